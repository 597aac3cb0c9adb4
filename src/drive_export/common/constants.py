"""Constants used throughout the application."""

# OAuth2 scopes (delete token.json after changing these)
SCOPES = [
    "https://www.googleapis.com/auth/drive.metadata.readonly",
    "https://www.googleapis.com/auth/drive",
]

# MIME types
PDF_MIME_TYPE = "application/pdf"
SVG_MIME_TYPE = "image/svg+xml"
FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
FORM_MIME_TYPE = "application/vnd.google-apps.form"

# Default source folders
SLIDES_FOLDER_ID = "0B-VJpOQeezDjZktuTnlEMEpGMUU"
PROGRAMS_FOLDER_ID = "1ZaPoNf2RhMxonGKhGBgTBSTJ0ZxnQs82"
IMAGES_FOLDER_ID = "1JiVDJ62v_x8yf2GdadSjwLKPkng2nFtL"

# API limits
PAGE_SIZE = 100

# OAuth
AUTH_STATE = "state-token"
DEFAULT_REDIRECT_URI = "http://localhost"

# Token storage
TOKEN_FILE = "token.json"
CREDENTIALS_FILE = "credentials.json"

"""Custom exception hierarchy."""


class GDriveExportError(Exception):
    """Base exception for all gdrive-export errors."""


class AuthenticationError(GDriveExportError):
    """Authentication or authorization failed."""


class ConfigError(GDriveExportError):
    """Configuration error."""


class ScanError(GDriveExportError):
    """Error while listing a Drive folder."""


class ExportError(GDriveExportError):
    """Error exporting or downloading a file."""


class WriteError(GDriveExportError):
    """Error writing an exported file to local storage."""

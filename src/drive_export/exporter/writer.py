"""Local persistence of exported files."""

from pathlib import Path

from humanize import naturalsize

from ..common.exceptions import WriteError
from ..common.logging import get_logger

logger = get_logger(__name__)


class LocalWriter:
    """Writes fetched bytes to the local filesystem."""

    def write(self, path: Path, data: bytes) -> int:
        """Create or truncate a file and write all bytes to it.

        No atomic rename is done: an interrupted write leaves a truncated file.

        Args:
            path: Destination path
            data: File contents

        Returns:
            Number of bytes written

        Raises:
            WriteError: If the file cannot be written
        """
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "wb") as f:
                written = f.write(data)
        except OSError as e:
            raise WriteError(f"Unable to create file {path}: {e}") from e

        logger.info(f"Wrote {naturalsize(written)} to {path}")
        return written

"""File system utilities."""

import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger("certforge")


class FileUtils:
    """Utility class for file operations."""

    @staticmethod
    def ensure_directory(path: Path) -> None:
        """
        Ensure directory exists, create if not.

        Args:
            path: Directory path to ensure
        """
        path.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Ensured directory exists: {path}")

    @staticmethod
    def read_binary_file(path: Path) -> bytes:
        """
        Read file contents as bytes.

        Args:
            path: File path to read

        Returns:
            File contents as bytes
        """
        with open(path, "rb") as f:
            return f.read()

    @staticmethod
    def write_binary_file(path: Path, content: bytes, mode: Optional[int] = None) -> None:
        """
        Write binary content to file.

        Args:
            path: File path to write
            content: Binary content to write
            mode: Optional permission bits the file is created with
        """
        FileUtils.ensure_directory(path.parent)
        if mode is None:
            with open(path, "wb") as f:
                f.write(content)
        else:
            fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
            with os.fdopen(fd, "wb") as f:
                f.write(content)
            # An existing file keeps its old bits through O_CREAT; no-op for most bits on Windows
            os.chmod(path, mode)
        logger.debug(f"Wrote binary file: {path}")

    @staticmethod
    def delete_file(path: Path) -> None:
        """
        Delete a file if it exists.

        Args:
            path: File path to delete
        """
        if path.exists():
            path.unlink()
            logger.info(f"Deleted file: {path}")

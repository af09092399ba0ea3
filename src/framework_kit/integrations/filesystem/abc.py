"""Abstract base class for workspace file storage."""

from abc import ABC, abstractmethod
from pathlib import Path


class FileSystem(ABC):
    """Async file primitives used by the lifecycle manager.

    Failures are signaled with the builtin ``OSError`` subclasses:
    ``FileNotFoundError`` for a missing source, ``PermissionError`` for
    denied access, ``FileExistsError`` for an unexpected existing path.

    Implementations include:
    - FakeFileSystem: In-memory for testing
    - RealFileSystem: aiofiles-backed for production
    """

    @abstractmethod
    async def read_text(self, path: Path) -> str:
        """Read a UTF-8 text file.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        ...

    @abstractmethod
    async def write_text(self, path: Path, content: str) -> None:
        """Write a UTF-8 text file, creating parent directories as needed."""
        ...

    @abstractmethod
    async def copy_file(self, source: Path, destination: Path) -> None:
        """Copy a file byte for byte, creating parent directories as needed.

        Raises:
            FileNotFoundError: If source does not exist
        """
        ...

    @abstractmethod
    async def delete_file(self, path: Path) -> None:
        """Delete a file. A missing file counts as already deleted."""
        ...

    @abstractmethod
    async def file_exists(self, path: Path) -> bool:
        """Return True if path exists and is a regular file."""
        ...

    @abstractmethod
    async def list_files(self, directory: Path) -> list[str]:
        """List names of regular files in a directory, sorted.

        A missing directory yields an empty list.
        """
        ...

"""Fake in-memory file system for testing."""

from pathlib import Path

from framework_kit.integrations.filesystem.abc import FileSystem


class FakeFileSystem(FileSystem):
    """In-memory fake implementation for testing.

    This class has NO public setup methods. All state is provided via
    constructor or captured during execution. Every call is recorded in
    ``operations`` as ``(method, path)`` so tests can assert that storage
    was, or was not, touched.
    """

    def __init__(
        self,
        files: dict[Path, str] | None = None,
        read_errors: dict[Path, OSError] | None = None,
        write_errors: dict[Path, OSError] | None = None,
    ) -> None:
        """Create FakeFileSystem.

        Args:
            files: Optional initial files (path -> text content)
            read_errors: Errors raised when reading or copying from a path
            write_errors: Errors raised when writing or copying to a path
        """
        self._files: dict[Path, bytes] = {
            path: content.encode("utf-8") for path, content in (files or {}).items()
        }
        self._read_errors = read_errors or {}
        self._write_errors = write_errors or {}
        self._operations: list[tuple[str, Path]] = []

    @property
    def files(self) -> dict[Path, str]:
        """Get current file contents for test assertions."""
        return {path: data.decode("utf-8") for path, data in self._files.items()}

    @property
    def operations(self) -> list[tuple[str, Path]]:
        """Get every recorded (method, path) call for test assertions."""
        return list(self._operations)

    @property
    def written_paths(self) -> list[Path]:
        """Get destination paths of write_text and copy_file calls."""
        return [path for op, path in self._operations if op in ("write_text", "copy_file")]

    def _check_read(self, path: Path) -> bytes:
        if path in self._read_errors:
            raise self._read_errors[path]
        if path not in self._files:
            raise FileNotFoundError(f"File not found: {path}")
        return self._files[path]

    def _check_write(self, path: Path) -> None:
        if path in self._write_errors:
            raise self._write_errors[path]

    async def read_text(self, path: Path) -> str:
        self._operations.append(("read_text", path))
        return self._check_read(path).decode("utf-8")

    async def write_text(self, path: Path, content: str) -> None:
        self._operations.append(("write_text", path))
        self._check_write(path)
        self._files[path] = content.encode("utf-8")

    async def copy_file(self, source: Path, destination: Path) -> None:
        self._operations.append(("copy_file", destination))
        data = self._check_read(source)
        self._check_write(destination)
        self._files[destination] = data

    async def delete_file(self, path: Path) -> None:
        self._operations.append(("delete_file", path))
        self._check_write(path)
        self._files.pop(path, None)

    async def file_exists(self, path: Path) -> bool:
        self._operations.append(("file_exists", path))
        return path in self._files

    async def list_files(self, directory: Path) -> list[str]:
        self._operations.append(("list_files", directory))
        return sorted(path.name for path in self._files if path.parent == directory)

"""aiofiles-backed file system implementation."""

from pathlib import Path

import aiofiles
import aiofiles.os

from framework_kit.integrations.filesystem.abc import FileSystem


class RealFileSystem(FileSystem):
    """Production implementation operating on the local disk."""

    async def read_text(self, path: Path) -> str:
        async with aiofiles.open(path, encoding="utf-8") as f:
            return await f.read()

    async def write_text(self, path: Path, content: str) -> None:
        await aiofiles.os.makedirs(path.parent, exist_ok=True)
        async with aiofiles.open(path, "w", encoding="utf-8") as f:
            await f.write(content)

    async def copy_file(self, source: Path, destination: Path) -> None:
        async with aiofiles.open(source, "rb") as src:
            data = await src.read()
        await aiofiles.os.makedirs(destination.parent, exist_ok=True)
        async with aiofiles.open(destination, "wb") as dst:
            await dst.write(data)

    async def delete_file(self, path: Path) -> None:
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            return

    async def file_exists(self, path: Path) -> bool:
        return await aiofiles.os.path.isfile(path)

    async def list_files(self, directory: Path) -> list[str]:
        if not await aiofiles.os.path.isdir(directory):
            return []
        names = await aiofiles.os.listdir(directory)
        files = [name for name in names if await aiofiles.os.path.isfile(directory / name)]
        return sorted(files)

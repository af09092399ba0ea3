from framework_kit.integrations.filesystem.abc import FileSystem
from framework_kit.integrations.filesystem.real import RealFileSystem

__all__ = [
    "FileSystem",
    "RealFileSystem",
]

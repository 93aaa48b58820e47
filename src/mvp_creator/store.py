"""Directory abstraction the generator reads and mutates."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class DirectoryStore(ABC):
    """A directory in the project tree that can hold packages and files."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Name of this directory."""
        pass

    @property
    @abstractmethod
    def parent(self) -> Optional["DirectoryStore"]:
        """Enclosing directory, or None at the filesystem root."""
        pass

    @abstractmethod
    def subdirectories(self) -> list["DirectoryStore"]:
        """Immediate child directories."""
        pass

    @abstractmethod
    def create_subdirectory(self, name: str) -> "DirectoryStore":
        """Create a child directory and return it."""
        pass

    @abstractmethod
    def has_file(self, name: str) -> bool:
        """Check whether a file with exactly this name exists."""
        pass

    @abstractmethod
    def create_file(self, name: str, content: str) -> None:
        """Create a new file holding content. Fails if it already exists."""
        pass

    @abstractmethod
    def is_valid(self) -> bool:
        """Whether the directory still exists."""
        pass

    @abstractmethod
    def package_name(self, source_root_marker: str) -> str:
        """Dotted package of this directory relative to the source root, or ""."""
        pass

    def find_subdirectory(self, name: str, ignore_case: bool = True) -> Optional["DirectoryStore"]:
        """Find a child directory by name."""
        for child in self.subdirectories():
            if child.name == name or (ignore_case and child.name.lower() == name.lower()):
                return child
        return None


class FileSystemDirectory(DirectoryStore):
    """DirectoryStore backed by a local filesystem path."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"FileSystemDirectory({str(self.path)!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, FileSystemDirectory) and self.path.resolve() == other.path.resolve()

    def __hash__(self) -> int:
        return hash(self.path.resolve())

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def parent(self) -> Optional["FileSystemDirectory"]:
        resolved = self.path.resolve()
        if resolved.parent == resolved:
            return None
        return FileSystemDirectory(resolved.parent)

    def subdirectories(self) -> list[DirectoryStore]:
        if not self.path.is_dir():
            return []
        return [FileSystemDirectory(child) for child in sorted(self.path.iterdir()) if child.is_dir()]

    def create_subdirectory(self, name: str) -> "FileSystemDirectory":
        child = self.path / name
        child.mkdir()
        logger.debug("Created directory %s", child)
        return FileSystemDirectory(child)

    def has_file(self, name: str) -> bool:
        # Listing keeps the match exact on case-insensitive filesystems
        if not self.path.is_dir():
            return False
        return any(child.name == name and child.is_file() for child in self.path.iterdir())

    def create_file(self, name: str, content: str) -> None:
        with open(self.path / name, "x", encoding="utf-8") as f:
            f.write(content)

    def is_valid(self) -> bool:
        return self.path.is_dir()

    def package_name(self, source_root_marker: str) -> str:
        parts = self.path.resolve().parts
        if source_root_marker not in parts:
            return ""
        index = parts.index(source_root_marker)
        return ".".join(parts[index + 1 :])

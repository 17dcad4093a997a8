"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

from pathlib import Path
from typing import Optional

from colon_whitespace_linter.domain.protocols import FileSystemProtocol

_SKIPPED_DIRS = frozenset({".git", ".hg", ".tox", ".venv", "venv", "__pycache__", "node_modules"})


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib."""

    def glob_python_files(self, path: str, exclude: Optional[list[str]] = None) -> list[str]:
        """Get all Python files in path (recursive if directory), sorted."""
        path_obj = Path(path).resolve()
        if not path_obj.is_dir():
            return [str(path_obj)] if path_obj.suffix == ".py" else []

        patterns = exclude or []
        found: list[str] = []
        for candidate in path_obj.glob("**/*.py"):
            relative = candidate.relative_to(path_obj)
            if any(part in _SKIPPED_DIRS for part in relative.parts[:-1]):
                continue
            if any(relative.match(pattern) for pattern in patterns):
                continue
            found.append(str(candidate))
        return sorted(found)

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Read a file without newline translation so offsets match the bytes on disk."""
        with open(path, encoding=encoding, newline="") as f:
            return f.read()

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        """Write text content to a file."""
        with open(path, "w", encoding=encoding, newline="") as f:
            f.write(content)

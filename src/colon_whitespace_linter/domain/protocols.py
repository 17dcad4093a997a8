from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    import astroid  # type: ignore[import-untyped]

    from colon_whitespace_linter.domain.entities import (
        ColonSite,
        ConstructKind,
        Replacement,
    )
    from colon_whitespace_linter.infrastructure.gateways.source_text import SourceText


class AstroidProtocol(Protocol):
    def construct_kind(self, node: "astroid.nodes.NodeNG") -> Optional["ConstructKind"]:
        ...

    def colon_sites(
        self, node: "astroid.nodes.NodeNG", source: "SourceText"
    ) -> tuple["ColonSite", ...]:
        """Locate every explicit key/value colon of an eligible node."""
        ...

    def parse_source(self, source: str, module_name: str = "") -> Optional["astroid.nodes.Module"]:
        """Parse source text and return the astroid Module node."""
        ...

    def read_module_source(self, module: "astroid.nodes.Module") -> Optional[str]:
        """Return the text pylint parsed the module from."""
        ...


class FileSystemProtocol(Protocol):
    def glob_python_files(self, path: str, exclude: Optional[list[str]] = None) -> list[str]:
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        ...


class FixerGatewayProtocol(Protocol):
    def render(self, source: str, replacements: list["Replacement"]) -> str:
        """Apply replacements to source text and return the result."""
        ...

    def apply_fixes(self, file_path: str, replacements: list["Replacement"]) -> bool:
        """Apply replacements to a file; True if the file was modified."""
        ...

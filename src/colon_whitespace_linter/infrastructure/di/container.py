from typing import TYPE_CHECKING, Any, Optional, cast

from colon_whitespace_linter.domain.config import ConfigurationLoader
from colon_whitespace_linter.infrastructure.config_file_loader import ConfigFileLoader
from colon_whitespace_linter.infrastructure.gateways.astroid_gateway import AstroidGateway
from colon_whitespace_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from colon_whitespace_linter.infrastructure.gateways.libcst_fixer_gateway import (
    LibCSTFixerGateway,
)
from colon_whitespace_linter.interface.reporters import TerminalReporter
from colon_whitespace_linter.use_cases.apply_fixes import ApplyFixesUseCase
from colon_whitespace_linter.use_cases.check_colons import CheckColonsUseCase
from colon_whitespace_linter.use_cases.inspect_source import InspectSourceUseCase

if TYPE_CHECKING:
    from colon_whitespace_linter.domain.protocols import (
        AstroidProtocol,
        FileSystemProtocol,
    )


class ColonWhitespaceContainer:
    """Dependency Injection Container for the colon whitespace linter."""

    _instance: Optional["ColonWhitespaceContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        self.register_singleton(
            "ConfigurationLoader", ConfigurationLoader(ConfigFileLoader.load_config_from_fs())
        )
        astroid_gateway = AstroidGateway()
        self.register_singleton("AstroidGateway", astroid_gateway)
        filesystem = FileSystemGateway()
        self.register_singleton("FileSystemGateway", filesystem)
        fixer = LibCSTFixerGateway(filesystem=filesystem)
        self.register_singleton("LibCSTFixerGateway", fixer)

        inspector = InspectSourceUseCase(astroid_gateway)
        self.register_singleton("InspectSourceUseCase", inspector)
        check_use_case = CheckColonsUseCase(filesystem, inspector)
        self.register_singleton("CheckColonsUseCase", check_use_case)
        self.register_singleton("ApplyFixesUseCase", ApplyFixesUseCase(check_use_case, fixer))

        self.register_singleton("TerminalReporter", TerminalReporter())

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config_loader(self) -> ConfigurationLoader:
        """Return the configuration loader (created at composition root)."""
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_astroid_gateway(self) -> "AstroidProtocol":
        """Return the Astroid gateway."""
        return cast("AstroidProtocol", self.get("AstroidGateway"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        """Return the filesystem gateway."""
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_check_use_case(self) -> CheckColonsUseCase:
        return cast(CheckColonsUseCase, self.get("CheckColonsUseCase"))

    def get_apply_fixes_use_case(self) -> ApplyFixesUseCase:
        return cast(ApplyFixesUseCase, self.get("ApplyFixesUseCase"))

    def get_reporter(self) -> TerminalReporter:
        """Return the terminal reporter."""
        return cast(TerminalReporter, self.get("TerminalReporter"))

    @classmethod
    def get_instance(cls) -> "ColonWhitespaceContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = ColonWhitespaceContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None

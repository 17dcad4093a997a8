"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from colon_whitespace_linter.infrastructure.di.container import ColonWhitespaceContainer
from colon_whitespace_linter.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = ColonWhitespaceContainer.get_instance()

    deps = CLIDependencies(
        config_loader=container.get_config_loader(),
        check_use_case=container.get_check_use_case(),
        apply_fixes_use_case=container.get_apply_fixes_use_case(),
        reporter=container.get_reporter(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()

"""CLI entry points - Thin Controller using Typer."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from colon_whitespace_linter.domain.config import ConfigurationLoader
from colon_whitespace_linter.domain.policy import InvalidPolicyError, WhitespacePolicy
from colon_whitespace_linter.domain.rules.whitespace_before_colon import RULE_METADATA
from colon_whitespace_linter.interface.reporters import Reporter
from colon_whitespace_linter.use_cases.apply_fixes import ApplyFixesUseCase
from colon_whitespace_linter.use_cases.check_colons import CheckColonsUseCase

# B008: avoid function call in default; use module-level singletons for Typer options
_PATH_ARGUMENT = typer.Argument(None, help="File or directory to check (default: current directory)")
_POLICY_OPTION = typer.Option(
    None, "--policy", "-p", help="nospace, onespace or space (default: [tool.colon-whitespace] policy)"
)
_STRICT_OPTION = typer.Option(
    None, "--strict/--no-strict", help="Treat an unrecognised policy as an error instead of disabling the check"
)


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_loader: ConfigurationLoader
    check_use_case: CheckColonsUseCase
    apply_fixes_use_case: ApplyFixesUseCase
    reporter: Reporter


class CLIAppFactory:
    """Creates the Typer app. No top-level functions."""

    @staticmethod
    def resolve_target_path(path: Optional[Path]) -> str:
        """Resolve target path: explicit path, else '.'."""
        if path and str(path) != ".":
            return str(path)
        return "."

    @staticmethod
    def resolve_policy(
        deps: CLIDependencies, policy: Optional[str], strict: Optional[bool]
    ) -> WhitespacePolicy:
        """Resolve the policy or exit with status 2 on a strict configuration error."""
        try:
            return deps.config_loader.resolve_policy(policy, strict=strict)
        except InvalidPolicyError as exc:
            typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=2) from exc

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="colon-whitespace",
            help="Enforce whitespace before the colon of dict entries and mapping patterns.",
            add_completion=False,
        )

        @app.callback()
        def main(
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
        ) -> None:
            logging.basicConfig(
                level=logging.DEBUG if verbose else logging.WARNING,
                format="%(levelname)s %(name)s: %(message)s",
            )

        @app.command()
        def check(
            path: Optional[Path] = _PATH_ARGUMENT,
            policy: Optional[str] = _POLICY_OPTION,
            strict: Optional[bool] = _STRICT_OPTION,
        ) -> None:
            """Report colons whose preceding whitespace breaks the policy."""
            resolved = CLIAppFactory.resolve_policy(deps, policy, strict)
            if not resolved.is_enabled:
                typer.secho("Colon whitespace check disabled: no recognised policy.", fg=typer.colors.YELLOW)
                return
            reports = deps.check_use_case.execute(
                CLIAppFactory.resolve_target_path(path), resolved, deps.config_loader.exclude
            )
            deps.reporter.report_check(reports)
            if reports:
                raise typer.Exit(code=1)

        @app.command()
        def fix(
            path: Optional[Path] = _PATH_ARGUMENT,
            policy: Optional[str] = _POLICY_OPTION,
            strict: Optional[bool] = _STRICT_OPTION,
        ) -> None:
            """Rewrite the whitespace before each offending colon."""
            resolved = CLIAppFactory.resolve_policy(deps, policy, strict)
            if not resolved.is_enabled:
                typer.secho("Colon whitespace check disabled: no recognised policy.", fg=typer.colors.YELLOW)
                return
            result = deps.apply_fixes_use_case.execute(
                CLIAppFactory.resolve_target_path(path), resolved, deps.config_loader.exclude
            )
            deps.reporter.report_fix(result)
            if result.refused_files:
                raise typer.Exit(code=1)

        @app.command()
        def explain() -> None:
            """Describe the rule and its options."""
            deps.reporter.report_metadata(RULE_METADATA)

        return app

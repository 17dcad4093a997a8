"""Terminal reporting for the standalone CLI."""

from pathlib import Path
from typing import Protocol

import typer

from colon_whitespace_linter.domain.entities import FileReport, FixResult
from colon_whitespace_linter.domain.rules import RuleMetadata


class Reporter(Protocol):
    """Protocol for reporting results to the user."""

    def report_check(self, reports: list[FileReport]) -> None:
        ...

    def report_fix(self, result: FixResult) -> None:
        ...

    def report_metadata(self, metadata: RuleMetadata) -> None:
        ...


class TerminalReporter:
    """Pylint-style one-line-per-violation output, coloured summaries."""

    @staticmethod
    def display_path(path: str) -> str:
        """Return path relative to cwd when possible; fallback to the path as given."""
        try:
            return str(Path(path).resolve().relative_to(Path.cwd()))
        except ValueError:
            return path

    def report_check(self, reports: list[FileReport]) -> None:
        total = 0
        for report in reports:
            shown = self.display_path(report.path)
            for v in report.violations:
                typer.echo(f"{shown}:{v.line}:{v.column}: {v.code} {v.message}")
                total += 1
        if total:
            typer.secho(
                f"\nFound {total} colon whitespace violation(s) in {len(reports)} file(s).",
                fg=typer.colors.RED,
            )
        else:
            typer.secho("No colon whitespace violations detected.", fg=typer.colors.GREEN)

    def report_fix(self, result: FixResult) -> None:
        for path in result.changed_files:
            typer.echo(f"fixed {self.display_path(path)}")
        for path in result.refused_files:
            typer.secho(f"not fixed {self.display_path(path)}", fg=typer.colors.YELLOW)
        typer.secho(
            f"{result.fixed_count} colon(s) fixed in {len(result.changed_files)} file(s).",
            fg=typer.colors.GREEN if not result.refused_files else typer.colors.YELLOW,
        )

    def report_metadata(self, metadata: RuleMetadata) -> None:
        typer.secho(metadata.rule_name, bold=True)
        typer.echo("")
        typer.echo(metadata.description)
        typer.echo("")
        typer.secho("Rationale", bold=True)
        typer.echo(metadata.rationale)
        typer.echo("")
        typer.secho("Options", bold=True)
        typer.echo(metadata.options_description)
        typer.echo("")
        typer.echo(f"Allowed values: {', '.join(metadata.option_values)}")
        typer.echo(f"Example: {', '.join(metadata.option_examples)}")
        typer.echo(f"Type: {metadata.rule_type}  Fixable: {'yes' if metadata.has_fix else 'no'}")

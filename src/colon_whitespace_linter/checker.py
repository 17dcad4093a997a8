"""
Pylint plugin entry point - composition root for the checker plugin.

Load with ``--load-plugins=colon_whitespace_linter.checker``.
"""

from pylint.lint import PyLinter

from colon_whitespace_linter.infrastructure.di.container import ColonWhitespaceContainer
from colon_whitespace_linter.use_cases.checks.colon_whitespace import ColonWhitespaceChecker


def register(linter: PyLinter) -> None:
    """Register checkers."""
    container = ColonWhitespaceContainer.get_instance()
    linter.register_checker(
        ColonWhitespaceChecker(
            linter,
            ast_gateway=container.get_astroid_gateway(),
            config_loader=container.get_config_loader(),
        )
    )

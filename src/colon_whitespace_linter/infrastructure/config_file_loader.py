"""Load [tool.colon-whitespace] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

SECTION = "colon-whitespace"


class ConfigFileLoader:
    """
    Loads config from the nearest pyproject.toml. No top-level functions.
    """

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> dict[str, object]:
        """Walk up from ``start`` (default: cwd) and return the first [tool.colon-whitespace] found."""
        current_path = (start or Path.cwd()).resolve()
        while True:
            config_file = current_path / "pyproject.toml"
            if config_file.exists():
                try:
                    with config_file.open("rb") as f:
                        data = toml_lib.load(f)
                except (OSError, toml_lib.TOMLDecodeError) as exc:
                    logging.warning("Configuration Warning: could not read %s: %s", config_file, exc)
                else:
                    section = data.get("tool", {}).get(SECTION)
                    if isinstance(section, dict):
                        return section
            if current_path.parent == current_path:
                return {}
            current_path = current_path.parent

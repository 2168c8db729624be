"""Configuration loading from environment variables and aliasreg.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

_DEFAULT_HOME = Path.home() / ".aliasreg"
_DEFAULT_REGISTRY_PATH = _DEFAULT_HOME / "registry.bin"
_CONFIG_FILENAME = "aliasreg.toml"


@dataclass
class AliasConfig:
    """Top-level aliasreg configuration."""

    registry_path: Path = _DEFAULT_REGISTRY_PATH
    log_level: str = "WARNING"


def load_config(config_path: Path | None = None) -> AliasConfig:
    """Load configuration from environment variables and optional aliasreg.toml.

    Priority: environment variables > aliasreg.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.aliasreg/
        for candidate in [Path.cwd() / _CONFIG_FILENAME, _DEFAULT_HOME / _CONFIG_FILENAME]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    registry_path = os.getenv(
        "ALIASREG_REGISTRY", file_data.get("registry_path", str(_DEFAULT_REGISTRY_PATH))
    )
    return AliasConfig(
        registry_path=Path(registry_path).expanduser(),
        log_level=os.getenv("ALIASREG_LOG_LEVEL", file_data.get("log_level", "WARNING")),
    )

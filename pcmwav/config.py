"""Configuration and environment loading for the pcmwav CLI.

The library functions take explicit arguments and never read these. CLI
settings come from the process environment first, then from an optional
dotenv file:
  ~/.config/pcmwav/pcmwav.env

Recognised variables:
  PCMWAV_DATA_BOUND  `length` (default) or `offset`
  PCMWAV_LOG_LEVEL   logging level name or number
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from pcmwav.format import DataBound


APP_NAME = "pcmwav"
DEFAULT_DATA_BOUND = DataBound.LENGTH

_ENV_LOADED = False


class PcmwavConfigError(RuntimeError):
    pass


def config_home() -> Path:
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        return Path(xdg_config_home)
    return Path.home() / ".config"


def config_dir() -> Path:
    return config_home() / APP_NAME


def env_file_path() -> Path:
    return config_dir() / f"{APP_NAME}.env"


def load_environment() -> None:
    """Load the pcmwav env file once; existing process env always wins."""

    global _ENV_LOADED
    if _ENV_LOADED:
        return
    _ENV_LOADED = True

    env_path = env_file_path()
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)


def get_data_bound(*, default: DataBound = DEFAULT_DATA_BOUND, load_env: bool = True) -> DataBound:
    if load_env:
        load_environment()
    raw = (os.environ.get("PCMWAV_DATA_BOUND") or "").strip()
    if not raw:
        return default
    try:
        return DataBound.parse(raw)
    except ValueError:
        choices = ", ".join(b.value for b in DataBound)
        raise PcmwavConfigError(
            f"Invalid PCMWAV_DATA_BOUND={raw!r} (expected one of: {choices}).\n"
            f"Set it in the environment or in: {env_file_path()}"
        ) from None

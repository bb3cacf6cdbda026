from __future__ import annotations

from pathlib import Path

from platformdirs import user_config_dir as _uc

DEFAULT_FILENAME = "config.ini"


def user_config_dir(app_name: str) -> Path:
    return Path(_uc(appname=app_name)).resolve()


def user_config_file(app_name: str, filename: str = DEFAULT_FILENAME) -> Path:
    """Return the conventional per-user INI file for *app_name*."""
    return user_config_dir(app_name) / filename

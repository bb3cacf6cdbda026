from .core import ConfigStore
from .errors import DestinationUnwritableError, IniStoreError, SourceUnavailableError
from .keys import make_path, split_path
from .paths import user_config_file


__all__ = [
    "ConfigStore",
    "IniStoreError",
    "SourceUnavailableError",
    "DestinationUnwritableError",
    "make_path",
    "split_path",
    "user_config_file",
]

from __future__ import annotations

import logging
from collections.abc import Callable, MutableSequence
from pathlib import Path
from typing import Any, TypeVar

from . import values
from .backend_ini import ConfigTree, read_sections, write_sections
from .errors import DestinationUnwritableError, SourceUnavailableError
from .keys import check_key, check_section, make_path, split_path
from .paths import DEFAULT_FILENAME, user_config_file

logger = logging.getLogger("pyinistore")

T = TypeVar("T")


class ConfigStore:
    """In-memory INI tree with typed accessors.

    Reads never raise: a missing or unparsable value gives back the caller's
    default. Writes always succeed in memory and only reach disk through
    :meth:`save`.

    Instances are not thread-safe; hosts sharing one store across threads
    must serialise calls themselves.
    """

    def __init__(self, source: str | Path | None = None) -> None:
        self._tree: ConfigTree = {}
        self._source: Path | None = None
        self._loaded = False
        self._load_ok = False
        if source is not None:
            self.load(source)

    @classmethod
    def for_app(cls, app_name: str, filename: str = DEFAULT_FILENAME) -> ConfigStore:
        """Return a store loaded from the per-user config file of *app_name*."""
        return cls(user_config_file(app_name, filename))

    # ----- lifecycle -----

    def load(self, source: str | Path) -> bool:
        """Replace the tree with the contents of *source*.

        Failures are logged and absorbed, leaving the current tree as it
        was. Returns whether the source parsed.
        """
        self._loaded = True
        # an empty path gives no save target
        self._source = Path(source) if source else None
        try:
            if self._source is None:
                raise SourceUnavailableError("empty source path")
            tree = read_sections(self._source)
        except SourceUnavailableError as exc:
            logger.warning("Failed to load config %r: %s", source, exc)
            self._load_ok = False
            return False
        self._tree = tree
        self._load_ok = True
        return True

    def is_loaded(self) -> bool:
        """Return whether :meth:`load` was attempted, successful or not."""
        return self._loaded

    @property
    def load_succeeded(self) -> bool:
        """Return whether the last :meth:`load` parsed its source."""
        return self._load_ok

    @property
    def source(self) -> Path | None:
        """Return the path recorded by the last :meth:`load`."""
        return self._source

    def save(self, destination: str | Path = "") -> None:
        """Write the tree to *destination* or to the last loaded path.

        Raises :class:`DestinationUnwritableError` if there is no target or
        it cannot be written.
        """
        if destination:
            target = Path(destination)
        elif self._source is not None:
            target = self._source
        else:
            raise DestinationUnwritableError("No destination given and nothing was loaded")
        write_sections(target, self._tree)
        logger.debug("saved %d sections to %s", len(self._tree), target)

    # ----- lookup -----

    def _lookup(self, section: str, key: str) -> str | None:
        sec = self._tree.get(section)
        if sec is None:
            return None
        return sec.get(key)

    def _read(
        self,
        section: str,
        key: str,
        default: T,
        parse: Callable[[str], T | None],
    ) -> T:
        raw = self._lookup(section, key)
        if raw is None:
            return default
        val = parse(raw)
        if val is None:
            logger.debug(
                "unparsable value %r for %s, using default", raw, make_path(section, key)
            )
            return default
        return val

    def read_string(self, section: str, key: str, default: str = "") -> str:
        raw = self._lookup(section, key)
        return default if raw is None else raw

    def read_int(self, section: str, key: str, default: int = 0) -> int:
        return self._read(section, key, default, values.parse_int)

    def read_uint(self, section: str, key: str, default: int = 0) -> int:
        return self._read(section, key, default, values.parse_uint)

    def read_bool(self, section: str, key: str, default: bool = False) -> bool:
        return self._read(section, key, default, values.parse_bool)

    def read_double(self, section: str, key: str, default: float = 0.0) -> float:
        return self._read(section, key, default, values.parse_double)

    def read_value(
        self,
        path: str,
        default: Any = None,
        cast: Callable[[str], Any] = str,
    ) -> Any:
        """Return the value at dotted *path* converted with *cast*.

        A malformed path, a missing value, or a ``ValueError``/``TypeError``
        from *cast* all give back *default*.
        """
        try:
            section, key = split_path(path)
        except ValueError:
            return default
        raw = self._lookup(section, key)
        if raw is None:
            return default
        try:
            return cast(raw)
        except (ValueError, TypeError) as exc:
            logger.debug("cast failed for %s: %s", path, exc)
            return default

    # ----- mutation -----

    def _put(self, section: str, key: str, text: str) -> None:
        check_section(section)
        check_key(key)
        values.check_text(text)
        self._tree.setdefault(section, {})[key] = text

    def write_string(self, section: str, key: str, value: str) -> None:
        self._put(section, key, str(value))

    def write_int(self, section: str, key: str, value: int) -> None:
        self._put(section, key, values.format_int(value))

    def write_uint(self, section: str, key: str, value: int) -> None:
        self._put(section, key, values.format_uint(value))

    def write_bool(self, section: str, key: str, value: bool) -> None:
        self._put(section, key, values.format_bool(value))

    def write_double(self, section: str, key: str, value: float) -> None:
        self._put(section, key, values.format_double(value))

    def write_value(self, path: str, value: Any) -> None:
        section, key = split_path(path)
        self._put(section, key, str(value))

    def remove_value(self, section: str, key: str) -> None:
        sec = self._tree.get(section)
        if sec is not None:
            sec.pop(key, None)

    def remove_section(self, section: str) -> None:
        self._tree.pop(section, None)

    # ----- enumeration -----

    def read_sections(self, out: MutableSequence[str]) -> int:
        out.extend(self._tree)
        return len(self._tree)

    def read_sec_key_array(self, section: str, out: MutableSequence[str]) -> int:
        sec = self._tree.get(section)
        if sec is None:
            return 0
        out.extend(sec)
        return len(sec)

    def read_sec_key_val_array(
        self,
        section: str,
        out_keys: MutableSequence[str],
        out_vals: MutableSequence[str],
    ) -> int:
        sec = self._tree.get(section)
        if sec is None:
            return 0
        for key, val in sec.items():
            out_keys.append(key)
            out_vals.append(val)
        return len(sec)

    def sections(self) -> list[str]:
        return list(self._tree)

    def keys(self, section: str) -> list[str]:
        return list(self._tree.get(section, {}))

    def items(self, section: str) -> list[tuple[str, str]]:
        return list(self._tree.get(section, {}).items())

    def to_dict(self) -> ConfigTree:
        return {name: dict(sec) for name, sec in self._tree.items()}

    def __len__(self) -> int:
        return len(self._tree)

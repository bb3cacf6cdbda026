from __future__ import annotations

import configparser
import io
from collections.abc import Mapping
from pathlib import Path

from .errors import DestinationUnwritableError, SourceUnavailableError

# section -> key -> value, insertion ordered
ConfigTree = dict[str, dict[str, str]]

ENCODING = "utf-8"

# Never matches a header, so no section is folded into parser defaults.
_NO_DEFAULT_SECTION = "\x00"


def _parser() -> configparser.ConfigParser:
    parser = configparser.ConfigParser(
        delimiters=("=",),
        interpolation=None,
        strict=True,
        empty_lines_in_values=False,
        default_section=_NO_DEFAULT_SECTION,
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    return parser


# ----- raw file access -----

def exists(path: Path) -> bool:
    return Path(path).is_file()


def read_all_bytes(path: Path) -> bytes:
    return Path(path).read_bytes()


def write_all_bytes(path: Path, data: bytes) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp.open("wb") as fh:
            fh.write(data)
        tmp.replace(path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


# ----- text grammar -----

def parse_text(text: str, source: str = "<string>") -> ConfigTree:
    """Parse INI *text* into an ordered tree.

    Duplicate sections or keys, keys outside a section and lines that are
    not ``key = value`` are all errors.
    """
    parser = _parser()
    try:
        parser.read_string(text, source=source)
    except configparser.Error as exc:
        raise SourceUnavailableError(str(exc)) from exc
    tree: ConfigTree = {}
    for section in parser.sections():
        tree[section] = dict(parser._sections[section])  # type: ignore[attr-defined]
    return tree


def render_text(tree: Mapping[str, Mapping[str, str]]) -> str:
    parser = _parser()
    for section, values in tree.items():
        parser.add_section(section)
        for key, value in values.items():
            parser.set(section, key, str(value))
    buf = io.StringIO()
    parser.write(buf)
    return buf.getvalue()


# ----- file level -----

def read_sections(path: Path) -> ConfigTree:
    path = Path(path)
    try:
        if not exists(path):
            raise SourceUnavailableError(f"{path} does not exist")
        raw = read_all_bytes(path)
    except (OSError, ValueError) as exc:
        raise SourceUnavailableError(str(exc)) from exc
    try:
        text = raw.decode(ENCODING)
    except UnicodeDecodeError as exc:
        raise SourceUnavailableError(f"{path} is not valid {ENCODING}: {exc}") from exc
    return parse_text(text, source=str(path))


def write_sections(path: Path, tree: Mapping[str, Mapping[str, str]]) -> None:
    """Write *tree* to *path*, refusing text that would not read back as *tree*."""
    try:
        text = render_text(tree)
        ok = parse_text(text) == {name: dict(sec) for name, sec in tree.items()}
    except (configparser.Error, SourceUnavailableError, ValueError) as exc:
        raise DestinationUnwritableError(f"cannot serialise {path}: {exc}") from exc
    if not ok:
        raise DestinationUnwritableError(f"cannot serialise {path}: content does not round-trip")
    try:
        write_all_bytes(Path(path), text.encode(ENCODING))
    except (OSError, ValueError) as exc:
        raise DestinationUnwritableError(f"cannot write {path}: {exc}") from exc

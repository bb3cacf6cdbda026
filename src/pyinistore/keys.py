from __future__ import annotations

PATH_SEP = "."

_LINE_BREAKS = ("\n", "\r")
# a key line starting with one of these reads back as a header or comment
_KEY_LEADERS = ("[", "#", ";")


def check_name(name: str, what: str = "name") -> str:
    if not isinstance(name, str) or name == "":
        raise ValueError(f"{what} must be a non-empty string, got {name!r}")
    return name


def check_section(name: str) -> str:
    """Validate a section name that can be written as a ``[header]`` line."""
    check_name(name, "section")
    if any(c in name for c in _LINE_BREAKS) or "\x00" in name:
        raise ValueError(f"section {name!r} cannot be written as a header")
    return name


def check_key(name: str) -> str:
    """Validate a key that reads back unchanged from a ``key = value`` line."""
    check_name(name, "key")
    if (
        "=" in name
        or any(c in name for c in _LINE_BREAKS)
        or name.startswith(_KEY_LEADERS)
        or name != name.strip()
    ):
        raise ValueError(f"key {name!r} cannot be written as a key line")
    return name


def make_path(section: str, key: str) -> str:
    """Return the dotted ``section.key`` path for a single value."""
    return f"{section}{PATH_SEP}{key}"


def split_path(path: str) -> tuple[str, str]:
    """Split *path* at its first separator into ``(section, key)``.

    Keys may themselves contain dots; section names may not when addressed
    through a path.
    """
    section, sep, key = path.partition(PATH_SEP)
    if not sep or section == "" or key == "":
        raise ValueError(f"Malformed path '{path}'")
    return section, key

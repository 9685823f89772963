from __future__ import annotations

"""backend/diagkit/services/diagnostics/path_redactor.py

Replace absolute filesystem paths in a payload with their basename so that
diagnostics never leak the layout of the user's machine:

    {"image": "/home/john/rpi.img"}  ->  {"image": "rpi.img"}

Detection is purely syntactic and depends on a PathConvention:

- POSIX:   a leading "/"
- WINDOWS: a drive letter with a root ("C:\\...") or a UNC path
           ("\\\\server\\share\\...")

Device paths (/dev/sdb, \\\\.\\PHYSICALDRIVE1) identify drives, not user
files, and are left alone. So are relative paths and bare file names, which
makes redaction idempotent.

The result is always a new structure, even when nothing was rewritten.
"""

import os
from collections.abc import Mapping
from enum import Enum
from pathlib import PurePath, PurePosixPath, PureWindowsPath

from diagkit.config import get_settings
from diagkit.exceptions import UnsupportedValueError
from diagkit.json_types import UNDEFINED, JSONValue, KeyPath, is_json_scalar


class PathConvention(str, Enum):
    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def host(cls) -> PathConvention:
        """Convention of the operating system we are running on."""
        return cls.WINDOWS if os.name == "nt" else cls.POSIX

    @classmethod
    def from_setting(cls, name: str) -> PathConvention:
        if name == "auto":
            return cls.host()
        return cls(name)


_PURE_PATHS: dict[PathConvention, type[PurePath]] = {
    PathConvention.POSIX: PurePosixPath,
    PathConvention.WINDOWS: PureWindowsPath,
}

_DEVICE_PREFIXES: dict[PathConvention, tuple[str, ...]] = {
    PathConvention.POSIX: ("/dev/",),
    PathConvention.WINDOWS: ("\\\\.\\", "//./"),
}


def default_path_convention() -> PathConvention:
    """Convention selected by DIAGKIT_PATH_CONVENTION (host OS by default)."""
    return PathConvention.from_setting(get_settings().path_convention)


def is_device_path(text: str, convention: PathConvention) -> bool:
    return text.startswith(_DEVICE_PREFIXES[convention])


def is_absolute_path(text: str, convention: PathConvention) -> bool:
    return _PURE_PATHS[convention](text).is_absolute()


def redact_path(text: str, convention: PathConvention) -> str:
    """Return the basename of `text` if it is an absolute, non-device path."""
    if is_device_path(text, convention) or not is_absolute_path(text, convention):
        return text
    # A bare root ("/", "C:\\") has no basename to fall back to.
    return _PURE_PATHS[convention](text).name or text


def _redact(value: object, convention: PathConvention, path: KeyPath) -> JSONValue:
    if isinstance(value, str):
        return redact_path(value, convention)
    if isinstance(value, os.PathLike):
        # Path objects are rendered as strings
        return redact_path(os.fsdecode(value), convention)
    if isinstance(value, Mapping):
        redacted: dict[str, JSONValue] = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise UnsupportedValueError(key, path, kind="mapping key")
            redacted[key] = _redact(item, convention, (*path, key))
        return redacted
    if isinstance(value, list):
        return [_redact(item, convention, (*path, index)) for index, item in enumerate(value)]
    if isinstance(value, tuple):
        return tuple(_redact(item, convention, (*path, index)) for index, item in enumerate(value))
    if not is_json_scalar(value):
        raise UnsupportedValueError(value, path)
    return value


def hide_absolute_paths_in_object(
    value: object = UNDEFINED,
    *,
    convention: PathConvention | str | None = None,
) -> JSONValue:
    """Return a copy of `value` with absolute paths replaced by their basename.

    UNDEFINED and None are returned as-is. `convention` is a PathConvention
    or a setting name ("auto", "posix", "windows"); it defaults to the
    configured one (see default_path_convention). os.PathLike values come
    back as (redacted) strings.

    Raises UnsupportedValueError for values that are not JSON-like.
    """
    if value is UNDEFINED or value is None:
        return value
    if convention is None:
        active = default_path_convention()
    else:
        active = PathConvention.from_setting(convention)
    return _redact(value, active, ())

"""Home-directory expansion and its display inverse.

Both helpers work on plain strings so configured values and messages keep the
user's spelling. ``home`` is injectable for tests and defaults to the current
user's home directory.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

HOME_MARKER: Final[str] = "~"
_SEPARATORS: Final[tuple[str, ...]] = tuple({"/", os.sep})


def _home(home: str | os.PathLike[str] | None) -> str:
    return os.fspath(home) if home is not None else str(Path.home())


def expand_home(raw: str, *, home: str | os.PathLike[str] | None = None) -> str:
    """Replace a leading ``~`` with the home directory.

    Only ``~`` on its own or followed by a separator is treated as the marker;
    ``~user`` forms and every other string come back unchanged.

    >>> expand_home("~/utils", home="/home/ann")
    '/home/ann/utils'
    >>> expand_home("/srv/utils", home="/home/ann")
    '/srv/utils'
    """

    if raw == HOME_MARKER:
        return _home(home)
    if raw.startswith(HOME_MARKER) and raw[1:2] in _SEPARATORS:
        remainder = raw[1:].lstrip("".join(_SEPARATORS))
        return os.path.join(_home(home), remainder)
    return raw


def format_for_display(path: str | os.PathLike[str], *, home: str | os.PathLike[str] | None = None) -> str:
    """Substitute ``~`` back in when ``path`` lives under the home directory.

    >>> format_for_display("/home/ann/utils", home="/home/ann")
    '~/utils'
    >>> format_for_display("/home/annex", home="/home/ann")
    '/home/annex'
    """

    text = os.fspath(path)
    home_text = _home(home).rstrip("".join(_SEPARATORS)) or _home(home)
    if text == home_text:
        return HOME_MARKER
    if text.startswith(home_text) and text[len(home_text):len(home_text) + 1] in _SEPARATORS:
        return HOME_MARKER + text[len(home_text):]
    return text


__all__ = ["HOME_MARKER", "expand_home", "format_for_display"]

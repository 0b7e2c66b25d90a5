from __future__ import annotations

import os

from fileshell.exceptions import NoParentError

"""Path resolution against a session's current directory.

Resolution is pure string manipulation: symbolic links are never followed and
existence or type checks are left to the caller.
"""

PARENT_TOKEN = ".."


def is_root(path: str) -> bool:
    return os.path.dirname(path) == path


def parent_of(current: str) -> str:
    """Return the parent of an absolute path, raise NoParentError at a root."""
    if is_root(current):
        raise NoParentError("Already at root directory")
    return os.path.dirname(current)


def resolve_path(current: str, raw: str) -> str:
    """Resolve a user supplied path against the current directory.

    '..' maps to the parent of current (NoParentError at a root). Anything else
    is joined onto current, so an absolute argument overrides it, then
    normalized and made absolute.
    """
    if raw == PARENT_TOKEN:
        return parent_of(current)
    return os.path.abspath(os.path.normpath(os.path.join(current, raw)))

"""Descendant, ancestor, sibling and equality checks for filesystem paths.

Every predicate canonicalizes both inputs with `resolve` and then compares
strings. Nothing here touches the filesystem: `..` is collapsed lexically and
symlinks are never followed.

Relative paths resolve against ``base``. When ``base`` is omitted the process
working directory is read once per call, so a concurrent ``os.chdir`` cannot
make one call compare against two different directories.

``other`` defaults to the base directory. An empty string is a path like any
other and also resolves to the base directory.

Examples (with the working directory at ``/home/me/apathy``)::

    is_descendant("./foo")                      # True
    is_descendant("/foo")                       # False
    is_descendant("../foo", "/")                # True
    is_ancestor("/", "/foo")                    # True
    is_sibling("./foo", "./bar")                # True
    is_equal("./foo/../bar/.", "./bar")         # True
    is_descendant("../../foo/../bar", "../../foo")  # False
"""

from __future__ import annotations

import os
import os.path
from typing import Optional, Union

from ._types import RelationReport

PathLike = Union[str, "os.PathLike[str]"]


def _normalize(path: str) -> str:
    path = os.path.normpath(path)
    # posixpath keeps exactly two leading slashes; there is only one root
    if os.sep == "/" and path.startswith("//"):
        path = "/" + path.lstrip("/")
    return path


def _base_dir(base: Optional[PathLike]) -> str:
    """Return the canonical base directory, snapshotting cwd when omitted."""
    if base is None:
        return _normalize(os.getcwd())
    base = os.fspath(base)
    if os.path.isabs(base):
        return _normalize(base)
    return _normalize(os.path.join(os.getcwd(), base))


def _resolve_against(path: PathLike, root: str) -> str:
    return _normalize(os.path.join(root, os.fspath(path)))


def resolve(path: PathLike, base: Optional[PathLike] = None) -> str:
    """Return the canonical absolute form of ``path``.

    Args:
        path: Absolute or relative path; may contain ``.`` and ``..``
        base: Directory relative paths are resolved against (default: cwd)

    Returns:
        Absolute path with ``.``/``..`` removed and no trailing separator
        except for the root.
    """
    return _resolve_against(path, _base_dir(base))


def parent(path: PathLike) -> str:
    """Return the parent directory of a canonical path. The root is its own parent."""
    return os.path.dirname(os.fspath(path))


def _descends(subject: str, other: str) -> bool:
    while True:
        if subject == other:
            return True
        up = parent(subject)
        if up == subject:
            # reached the root
            return False
        subject = up


def is_descendant(
    subject: PathLike, other: Optional[PathLike] = None, *, base: Optional[PathLike] = None
) -> bool:
    """Check whether ``subject`` is at or below ``other``.

    Args:
        subject: Path to check
        other: Potential ancestor of ``subject`` (default: the base directory)
        base: Directory relative paths are resolved against (default: cwd)

    Returns:
        True if ``subject`` is a descendant of ``other`` or both resolve to
        the same path.
    """
    root = _base_dir(base)
    target = root if other is None else _resolve_against(other, root)
    return _descends(_resolve_against(subject, root), target)


def is_ancestor(
    subject: PathLike, other: Optional[PathLike] = None, *, base: Optional[PathLike] = None
) -> bool:
    """Check whether ``subject`` is at or above ``other``.

    ``other`` is the potential descendant and defaults to the base directory.
    """
    root = _base_dir(base)
    descendant = root if other is None else other
    return is_descendant(descendant, subject, base=root)


def is_sibling(
    subject: PathLike, other: Optional[PathLike] = None, *, base: Optional[PathLike] = None
) -> bool:
    """Check whether ``subject`` and ``other`` share the same parent directory.

    A path is its own sibling, and so is the root.
    """
    root = _base_dir(base)
    target = root if other is None else _resolve_against(other, root)
    return parent(_resolve_against(subject, root)) == parent(target)


def is_equal(
    subject: PathLike, other: Optional[PathLike] = None, *, base: Optional[PathLike] = None
) -> bool:
    """Check whether ``subject`` and ``other`` refer to the same logical path."""
    root = _base_dir(base)
    target = root if other is None else _resolve_against(other, root)
    return _resolve_against(subject, root) == target


def classify(
    subject: PathLike, other: Optional[PathLike] = None, *, base: Optional[PathLike] = None
) -> RelationReport:
    """Evaluate every relation between ``subject`` and ``other`` in one pass.

    All four checks share a single base directory snapshot.
    """
    root = _base_dir(base)
    s = _resolve_against(subject, root)
    o = root if other is None else _resolve_against(other, root)
    return RelationReport(
        subject=s,
        other=o,
        equal=s == o,
        descendant=_descends(s, o),
        ancestor=_descends(o, s),
        sibling=parent(s) == parent(o),
    )


__all__ = [
    "PathLike",
    "resolve",
    "parent",
    "is_descendant",
    "is_ancestor",
    "is_sibling",
    "is_equal",
    "classify",
]

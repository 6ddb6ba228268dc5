"""
Lexical path helpers for the toolbox VFS

Nothing in this module touches the filesystem, so every function works on
paths that do not exist.
"""
import os
from pathlib import Path, PurePath
from typing import Union

PathLike = Union[str, os.PathLike]

CURRENT_DIR = '.'
PARENT_DIR = '..'


def as_path(path: PathLike) -> PurePath:
    """Return `path` as a path object, keeping existing PurePath flavours"""
    if isinstance(path, PurePath):
        return path
    return Path(path)


def normalize(path: PathLike) -> PurePath:
    """Collapse `.` and `..` components of `path` without filesystem access.

    A leading run of `..` is kept on unanchored paths, since there is no
    segment for it to cancel. The root or drive of an anchored path is
    never removed: `/..` normalizes to `/`.

    >>> normalize('../dir/..')
    PosixPath('..')
    >>> normalize('./first/second/..')
    PosixPath('first')
    """
    path = as_path(path)
    parts = path.parts
    flavour = type(path)

    if not parts:
        return flavour(CURRENT_DIR)
    if len(parts) == 1:
        return path

    anchor = path.anchor
    result = []
    for part in parts:
        if part == CURRENT_DIR:
            continue
        if part == PARENT_DIR:
            if not result or result[-1] == PARENT_DIR:
                result.append(part)
            elif anchor and len(result) == 1 and result[0] == anchor:
                # ".." above the root is the root
                continue
            else:
                result.pop()
        else:
            result.append(part)

    if not result:
        return flavour(CURRENT_DIR)
    return flavour(*result)


def is_contained(path: PathLike, root: PathLike) -> bool:
    """Check that the components of `root` are a prefix of those of `path`"""
    path_parts = as_path(path).parts
    root_parts = as_path(root).parts
    return path_parts[:len(root_parts)] == root_parts

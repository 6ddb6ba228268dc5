"""
Virtual file system rooted in a real directory

Paths handed to a VirtualFileSystem are either relative to its root or
absolute paths that must lie under it. Translation is purely lexical;
only construction, existence checks and the directory mutators touch
the real filesystem.
"""

import os
import shutil
import logging
from pathlib import Path
from typing import Optional

from ..exceptions import (
    ResolveFailed, OutOfScope, NotAbsoluteInput, FilesystemOperationFailed
)
from .path import PathLike, CURRENT_DIR, as_path, normalize, is_contained

logger = logging.getLogger('toolbox.vfs')


def _canonicalize(root: PathLike) -> Path:
    """Resolve `root` against the real filesystem"""
    try:
        resolved = Path(root).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise ResolveFailed(f"Failed to resolve root {root}: {e}") from e
    if not resolved.is_dir():
        raise ResolveFailed(f"Root is not a directory: {resolved}")
    return resolved


class VirtualFileSystem:
    """
    A root directory plus safe translation between root-relative and
    absolute paths.

    `root` is always absolute and normalized. It changes only through
    `chroot`, which either moves the whole object or leaves it untouched.
    Instances do no locking; share them across threads only behind an
    external lock.
    """

    def __init__(self, root: PathLike, strict_chroot: bool = True):
        self._root = _canonicalize(root)
        self.strict_chroot = strict_chroot
        logger.info(f"Virtual file system rooted at {self._root}")

    @classmethod
    def try_new(cls, root: PathLike, strict_chroot: bool = True) -> 'VirtualFileSystem':
        """Create a VFS for `root`, raising ResolveFailed if it cannot be resolved"""
        return cls(root, strict_chroot=strict_chroot)

    @classmethod
    def from_config(cls, config) -> 'VirtualFileSystem':
        """Create a VFS from a ToolboxConfig"""
        return cls(config.root, strict_chroot=config.strict_chroot)

    @property
    def root(self) -> Path:
        return self._root

    def __repr__(self):
        return f"{self.__class__.__name__}(root={str(self._root)!r})"

    def chroot(self, new_root: PathLike) -> bool:
        """Change the current root.

        `new_root` may be relative to the current root or absolute, but it
        must resolve inside the current root. With `strict_chroot` it must
        also be an existing directory, and the root becomes its canonical
        path, which must still lie inside the current root. Returns False
        and keeps the old root when any check fails.
        """
        target = self.absolute(new_root)
        if target is None:
            logger.warning(f"Refusing chroot outside of {self._root}: {new_root}")
            return False

        if self.strict_chroot:
            if not self.isdir(target):
                logger.warning(f"Refusing chroot to missing directory: {target}")
                return False
            try:
                target = _canonicalize(target)
            except ResolveFailed as e:
                logger.warning(f"Refusing chroot: {e}")
                return False
            if not is_contained(target, self._root):
                logger.warning(f"Refusing chroot to {new_root}: resolves outside of {self._root}")
                return False

        if target != self._root:
            logger.info(f"Changing root from {self._root} to {target}")
            self._root = target
        return True

    def absolute(self, path: PathLike) -> Optional[Path]:
        """Convert `path` to a normalized absolute path under the root.

        Relative paths are joined onto the root. Returns None if the
        result does not lie under the root.
        """
        path = as_path(path)
        if path.is_absolute():
            resolved = normalize(path)
        else:
            resolved = normalize(self._root / path)

        if not is_contained(resolved, self._root):
            logger.debug(f"Path {path} resolves outside of {self._root}")
            return None

        logger.debug(f"Resolved path '{path}' to '{resolved}'")
        return Path(resolved)

    def relative(self, path: PathLike) -> Optional[Path]:
        """Convert an absolute `path` under the root to a root-relative path.

        If `path` equals the root, return `.`.
        If root is `/foo/bar` and path is `/foo/bar/more`, return `more`.
        Returns None for relative input or paths outside the root.
        """
        if not as_path(path).is_absolute():
            logger.debug(f"Cannot make a relative path out of {path}: not absolute")
            return None

        resolved = self.absolute(path)
        if resolved is None:
            return None

        remainder = resolved.parts[len(self._root.parts):]
        if not remainder:
            return Path(CURRENT_DIR)
        return Path(normalize(Path(*remainder)))

    def exists(self, path: PathLike) -> bool:
        """Check if `path` exists inside the virtual file system"""
        resolved = self.absolute(path)
        if resolved is None:
            return False
        try:
            return resolved.exists()
        except OSError as e:
            logger.debug(f"Error checking existence of {resolved}: {e}")
            return False

    def isdir(self, path: PathLike) -> bool:
        """Check if `path` is an existing directory inside the virtual file system"""
        resolved = self.absolute(path)
        if resolved is None:
            return False
        try:
            return resolved.is_dir()
        except OSError as e:
            logger.debug(f"Error checking directory {resolved}: {e}")
            return False

    def _require_absolute(self, path: PathLike) -> Path:
        """Resolve `path` for a mutating operation"""
        resolved = self.absolute(path)
        if resolved is None:
            logger.warning(f"Path is outside the virtual file system: {path}")
            raise OutOfScope(path, self._root)
        if not resolved.is_absolute():
            raise NotAbsoluteInput(f"Path did not resolve to an absolute path: {path}")
        return resolved

    def create_dir(self, path: PathLike) -> Path:
        """Create a new, empty directory. The parent must already exist."""
        target = self._require_absolute(path)
        logger.debug(f"Creating directory: {target}")
        try:
            os.mkdir(target)
        except OSError as e:
            logger.error(f"Error creating directory {target}: {e}")
            raise FilesystemOperationFailed(f"Failed to create directory {target}", e) from e
        return target

    def create_dir_all(self, path: PathLike) -> Path:
        """Create a directory and all of its missing parents"""
        target = self._require_absolute(path)
        logger.debug(f"Creating directory tree: {target}")
        try:
            os.makedirs(target, exist_ok=True)
        except OSError as e:
            logger.error(f"Error creating directory tree {target}: {e}")
            raise FilesystemOperationFailed(f"Failed to create directory tree {target}", e) from e
        return target

    def remove_dir_all(self, path: PathLike) -> Path:
        """Remove a directory and all of its contents.

        A missing directory is reported as an error; check `exists` first
        when that should be ignored. The root itself cannot be removed.
        """
        target = self._require_absolute(path)
        if target == self._root:
            logger.warning(f"Refusing to remove the root of the virtual file system: {target}")
            raise OutOfScope(path, self._root)
        logger.debug(f"Removing directory tree: {target}")
        try:
            shutil.rmtree(target)
        except OSError as e:
            logger.error(f"Error removing directory tree {target}: {e}")
            raise FilesystemOperationFailed(f"Failed to remove directory tree {target}", e) from e
        return target


def new(root: PathLike, strict_chroot: bool = True) -> Optional[VirtualFileSystem]:
    """Create a VirtualFileSystem, or return None if `root` cannot be resolved"""
    try:
        return VirtualFileSystem(root, strict_chroot=strict_chroot)
    except ResolveFailed as e:
        logger.debug(f"Cannot create virtual file system: {e}")
        return None

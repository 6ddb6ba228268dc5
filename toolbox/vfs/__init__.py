"""
Virtual file system layer
"""
from .path import normalize, is_contained
from .filesystem import VirtualFileSystem, new

__all__ = [
    'VirtualFileSystem',
    'new',
    'normalize',
    'is_contained'
]

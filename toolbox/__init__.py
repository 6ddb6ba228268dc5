"""
toolbox - a virtual file system rooted in a real directory

Example Usage:

    from toolbox import VirtualFileSystem

    vfs = VirtualFileSystem('/srv/data')
    vfs.create_dir_all('reports/2024')
    vfs.exists('reports/2024')           # True
    vfs.absolute('reports/../reports')   # /srv/data/reports
    vfs.relative('/srv/data/reports')    # reports
    vfs.absolute('/etc/passwd')          # None, outside the root
"""

__version__ = '0.1.0'

from .exceptions import (
    ToolboxError,
    ConfigError,
    VFSError,
    ResolveFailed,
    OutOfScope,
    NotAbsoluteInput,
    FilesystemOperationFailed
)
from .vfs import VirtualFileSystem, new, normalize, is_contained
from .config import ToolboxConfig, load_config, save_config
from .log import setup_logging, setup_logging_from_config

__all__ = [
    'VirtualFileSystem',
    'new',
    'normalize',
    'is_contained',
    'ToolboxConfig',
    'load_config',
    'save_config',
    'setup_logging',
    'setup_logging_from_config',
    'ToolboxError',
    'ConfigError',
    'VFSError',
    'ResolveFailed',
    'OutOfScope',
    'NotAbsoluteInput',
    'FilesystemOperationFailed'
]

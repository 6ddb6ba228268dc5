"""
Exception hierarchy for toolbox
"""

class ToolboxError(Exception):
    """Base exception for toolbox"""
    pass

class ConfigError(ToolboxError):
    """Raised when a configuration file cannot be loaded"""
    pass

class VFSError(ToolboxError):
    """Base exception for virtual file system operations"""
    pass

class ResolveFailed(VFSError):
    """Raised when a root candidate does not exist or cannot be canonicalized"""
    pass

class OutOfScope(VFSError):
    """Raised when a path does not lie under the VFS root"""

    def __init__(self, path, root):
        super().__init__(f"Path is outside the virtual file system: {path} (root: {root})")
        self.path = path
        self.root = root

class NotAbsoluteInput(VFSError):
    """Raised when an anchored path was expected"""
    pass

class FilesystemOperationFailed(VFSError):
    """Raised when the underlying create/remove primitive fails"""

    def __init__(self, message: str, os_error: OSError):
        super().__init__(f"{message}: {os_error}")
        self.os_error = os_error

    @property
    def errno(self):
        return self.os_error.errno

"""An in-memory simulated file system with text-file storage and an interactive shell."""

__version__ = "0.1.0"
__all__ = ["filesystem", "storage", "shell"]
from .local import LocalFileSystem

__all__ = ["LocalFileSystem"]

"""copyto: copy selected files and folders to a configured destination."""

__version__ = "0.1.0"

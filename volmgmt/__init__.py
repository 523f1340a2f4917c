"""Windows volume and file system building blocks: I/O control codes, file attributes, file IDs, file information structures and file scan helpers."""

__version__ = "0.1.0"
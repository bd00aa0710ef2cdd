"""Text file operations, run-length encoding, chunked zlib compression and a snake game."""

__version__ = "0.1.0"
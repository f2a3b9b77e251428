"""Character, byte-buffer, string, linked-list, line-reading and printf helpers."""

__version__ = "0.1.0"
"""Small utility library: characters, strings, bytes, sorting, a linked list and a line reader."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "linked",
    "memory",
    "numeric",
    "output",
    "reader",
    "sorting",
    "strings",
    "text",
]
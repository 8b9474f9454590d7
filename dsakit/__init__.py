"""Classic data structures and algorithms: containers, sorting, searching, hashing and graphs."""

__version__ = "0.1.0"
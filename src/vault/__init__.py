"""vault — periodic directory backups to an object store."""

__version__ = "0.1.0"

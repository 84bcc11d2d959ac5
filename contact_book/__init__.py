"""Contact book: a small MVC contact manager with local and remote storage."""

__version__ = "0.1.0"

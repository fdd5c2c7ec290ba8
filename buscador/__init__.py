"""Word-position index for books, with proximity search over several words."""

__version__ = "0.1.0"
__all__ = ["postings", "indexer", "search", "cli"]
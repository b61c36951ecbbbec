"""Movie Catalog - browse, filter and curate a personal movie library."""

__version__ = "0.1.0"

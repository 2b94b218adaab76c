"""DocCatalog - an in-memory, searchable catalog of uploaded documents."""

__version__ = "0.1.0"

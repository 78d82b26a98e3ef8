"""litmark: build glue for literate markdown essays."""

__version__ = "0.1.0"

"""Reading pace and daily goals for book deadlines."""

__version__ = "0.1.0"

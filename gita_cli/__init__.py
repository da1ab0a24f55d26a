"""Print a verse of the Bhagavad Gita in the terminal."""

__version__ = "0.1.0"

"""aliasreg — short names for long filesystem paths."""

__version__ = "0.1.0"

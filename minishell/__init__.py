"""Building blocks of a small shell: formatting, line reading, string helpers, environment and builtins."""

__version__ = "0.1.0"
__all__ = ["printf", "linereader", "libft", "environment", "builtins"]
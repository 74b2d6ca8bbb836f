"""S-expression text output for debug dumps."""

from .writer import serialize

__all__ = ["serialize"]

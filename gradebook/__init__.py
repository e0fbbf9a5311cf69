"""Student roster with grade averages, pass status and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["cli", "roster"]
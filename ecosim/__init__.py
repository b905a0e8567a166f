"""Tk view of an ecosystem simulation, with a random demonstration backend."""

__version__ = "0.1.0"
__all__ = ["__version__"]
"""Newton's method for one equation and a 2x2 system in arbitrary precision, with number formatting and precision examples."""

__version__ = "0.1.0"
__all__ = ["formatting", "newton", "system", "examples"]
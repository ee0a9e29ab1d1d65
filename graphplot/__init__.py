"""Plot a function of x as ASCII art from an infix expression."""

__version__ = "0.1.0"
__all__ = ["parse", "evaluate", "plot"]
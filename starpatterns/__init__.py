"""Star, number and letter console patterns built with nested loops."""

__version__ = "0.1.0"
__all__ = ["patterns"]
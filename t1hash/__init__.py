"""Pure-Python t1ha2 fast positive hash and its arithmetic building blocks."""

__version__ = "0.1.0"
__all__ = ["arith", "fetch", "t1ha2"]
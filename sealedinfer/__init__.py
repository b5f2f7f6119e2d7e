"""AES-128 block cipher modes and multi-label accuracy metrics."""

__version__ = "0.1.0"
__all__ = ["aes", "metrics"]
"""Table-driven JSON writer with fixed-capacity buffers and whitespace compression."""

__version__ = "0.1.0"

__all__ = ["cli", "writer"]
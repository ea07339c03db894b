"""Buffer selection and clickable tab markup for editor tab lines."""

__all__ = [
    "adapters",
    "buffers",
    "clicks",
    "config",
    "host",
    "runtime",
    "utils",
]

__version__ = "0.1.0"

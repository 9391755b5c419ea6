"""UI-agnostic CSV/TSV document engine."""

__all__ = [
    "adapters",
    "codec",
    "document",
    "grid",
    "runtime",
]

__version__ = "0.1.0"

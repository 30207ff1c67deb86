"""lsh - a minimal command shell."""

__version__ = "0.1.0"

from .core import Shell  # noqa: E402

__all__ = ["Shell", "__version__"]

from .reflow import Classification, classify, clean, is_already_clean
from .version import __version__

__all__ = ["Classification", "classify", "clean", "is_already_clean", "__version__"]

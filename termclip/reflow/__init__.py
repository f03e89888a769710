from .cleaner import Classification, classify, clean, clean_paragraph, is_already_clean

__all__ = ["Classification", "classify", "clean", "clean_paragraph", "is_already_clean"]

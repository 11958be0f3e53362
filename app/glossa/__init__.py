"""glossa - localized text resolution from merged translation trees."""

__version__ = "0.1.0"

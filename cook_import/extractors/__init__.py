# Extractor modules
from .web import WebExtractor

__all__ = [
    "WebExtractor",
]

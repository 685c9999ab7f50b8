"""Top-level package for rawtext.

This package normalizes the literal-text spans of a template language:
`//` comments are stripped and whitespace runs collapse to nothing or a
single space. The main entry point is `normalize`.
"""

from .cursor import RawTextCursor
from .normalizer import normalize, normalize_text

__all__ = ["RawTextCursor", "normalize", "normalize_text", "__version__"]

__version__ = "0.1.0"

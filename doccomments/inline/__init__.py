"""
Inline tag matchers.

Each matcher looks at the scanner's cursor and either consumes a complete
``{@keyword ...}`` tag, returning the HTML that replaces it, or returns
``None`` and leaves the cursor where it was.
"""

from .base import InlineMatcher, fill_template
from .img import InlineImage
from .link import InlineLink
from .video import InlineVideo

__all__ = [
    "InlineMatcher",
    "InlineImage",
    "InlineLink",
    "InlineVideo",
    "fill_template",
]

# doccomments/inline/img.py
"""
{@img} tags.

Converts:
    {@img path/to/image.png Alt text}  →  <img src="base/path/to/image.png" alt="Alt text"/>

Every image url is recorded so the caller can copy the files alongside the
generated documentation.
"""

import re
from typing import List, Optional

from ..conf import FormatterConfig
from ..cursor import Cursor
from ..html import escape
from .base import fill_template

IMG_RE = re.compile(r"\{@img\s+(\S*?)(?:\s+(.+?))?\}", re.DOTALL)


class InlineImage:
    def __init__(self, config: FormatterConfig):
        self.config = config
        self.images: List[str] = []

    def replace(self, cursor: Cursor) -> Optional[str]:
        match = cursor.scan(IMG_RE)
        if match is None:
            return None
        return self.apply_template(match.group(1), match.group(2))

    def apply_template(self, url: str, alt_text: Optional[str]) -> str:
        if url not in self.images:
            self.images.append(url)

        base_path = self.config.img_path
        src = f"{base_path.rstrip('/')}/{url}" if base_path else url
        return fill_template(
            self.config.img_template,
            {"%u": src, "%a": escape(alt_text or "")},
        )

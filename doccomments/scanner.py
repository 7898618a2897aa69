# doccomments/scanner.py
"""
Single pass over rendered doc comment HTML.

At every position the first applicable rule wins:

1. an inline tag matcher ({@link}, {@img}, {@video}) consumes its tag
2. a "{" that starts no known tag is copied as-is
3. ``<pre><code>@example classes`` becomes an annotated example block
4. ``<a ...>`` is copied and opens an anchor
5. ``</a>`` is copied and closes an anchor
6. any other tag is copied through its ">" (or to the end of input)
7. plain text up to the next "{" or "<" is auto-linked, unless inside an anchor

Every input character ends up in the output, either copied or replaced.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import List

from .conf import FormatterConfig
from .cursor import Cursor
from .inline import InlineImage, InlineLink, InlineVideo

logger = logging.getLogger(__name__)

OPEN_BRACE_RE = re.compile(r"\{")
EXAMPLE_ANNOTATION_RE = re.compile(r"<pre><code>\s*@example( +[^\n]*)?\s+")
ANCHOR_OPEN_RE = re.compile(r"<a\b")
ANCHOR_CLOSE_RE = re.compile(r"</a>")
TAG_OPEN_RE = re.compile(r"<")
TAG_END_RE = re.compile(r">")
PLAIN_TEXT_RE = re.compile(r"[^{<]+")


@dataclass
class ScanResult:
    html: str
    images: List[str] = field(default_factory=list)

    def __str__(self):
        return self.html


def example_block_open(css_classes: str) -> str:
    css_classes = " ".join(css_classes.split())
    return f"<pre class='inline-example {css_classes}'><code>"


def scan(text: str, config: FormatterConfig) -> ScanResult:
    """
    Replace inline tags in ``text`` and auto-link recognised names.

    Matchers are created for this call only, so concurrent scans never share
    state; image urls seen along the way are returned with the HTML.
    """
    link = InlineLink(config)
    img = InlineImage(config)
    video = InlineVideo(config)
    matchers = (link, img, video)

    cursor = Cursor(text)
    out = []
    # Names are not auto-linked inside <a>. Links shouldn't nest, but count anyway.
    open_anchors = 0

    while not cursor.eos:
        for matcher in matchers:
            substitute = matcher.replace(cursor)
            if substitute is not None:
                out.append(substitute)
                break
        else:
            if cursor.check(OPEN_BRACE_RE):
                out.append(cursor.scan(OPEN_BRACE_RE).group(0))
            elif cursor.check(EXAMPLE_ANNOTATION_RE):
                match = cursor.scan(EXAMPLE_ANNOTATION_RE)
                out.append(example_block_open(match.group(1) or ""))
            elif cursor.check(ANCHOR_OPEN_RE):
                open_anchors += 1
                out.append(cursor.scan_until(TAG_END_RE))
            elif cursor.check(ANCHOR_CLOSE_RE):
                # Clamped so a stray </a> can't enable auto-linking inside the next <a>
                open_anchors = max(open_anchors - 1, 0)
                out.append(cursor.scan(ANCHOR_CLOSE_RE).group(0))
            elif cursor.check(TAG_OPEN_RE):
                out.append(cursor.scan_until(TAG_END_RE))
            else:
                plain = cursor.scan(PLAIN_TEXT_RE).group(0)
                out.append(plain if open_anchors > 0 else link.create_magic_links(plain))

    if open_anchors:
        logger.debug(f"{open_anchors} <a> tag(s) left open ({config.location})")

    return ScanResult("".join(out), list(img.images))

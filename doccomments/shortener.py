# doccomments/shortener.py
"""
Summaries of doc comments for listing views.

A comment is "too long" when its first sentence is only part of the text,
or when the text has more than ``max_length`` characters. Shortening keeps
the first sentence and appends an ellipsis, truncating the sentence itself
when it alone exceeds the limit.

Lengths are counted in characters, never bytes, so multi-byte text is cut on
character boundaries.
"""

import re
from typing import Union

from .html import strip_tags

DEFAULT_MAX_LENGTH = 120
ELLIPSIS = "..."

# Shortest prefix ending in "." or the ideographic full stop, followed by ASCII
# whitespace. Ideographic spaces and decoded &nbsp; don't end a sentence.
WHITESPACE = " \t\r\n\f\v"
FIRST_SENTENCE_RE = re.compile(r"\A(.+?[.。])[ \t\r\n\f\v]", re.DOTALL)


def char_count(value: Union[str, bytes]) -> int:
    """
    Count characters, treating each multi-byte UTF-8 sequence as one unit.

    Bytes are decoded as UTF-8 first; undecodable bytes count as one
    character each.
    """
    if isinstance(value, bytes):
        value = value.decode("utf-8", errors="replace")
    return len(value)


def first_sentence(text: str) -> str:
    """
    Return the first sentence of ``text``, terminator included.

    If no terminator followed by whitespace exists, the whole string is the
    sentence.
    """
    match = FIRST_SENTENCE_RE.match(text)
    if match is None:
        return text
    return match.group(1)


def _stripped(html: str) -> str:
    return strip_tags(html).strip(WHITESPACE)


def too_long(html: str, max_length: int = DEFAULT_MAX_LENGTH) -> bool:
    """
    True when the first sentence is only part of the text, or the text has
    more than ``max_length`` characters.
    """
    stripped = _stripped(html)
    if len(first_sentence(stripped)) < len(stripped):
        return True
    return char_count(stripped) > max_length


def shorten(html: str, max_length: int = DEFAULT_MAX_LENGTH) -> str:
    """
    Reduce a comment to its first sentence followed by an ellipsis.

    A first sentence longer than ``max_length`` is cut so that the result,
    ellipsis included, is exactly ``max_length`` characters.
    """
    sentence = first_sentence(_stripped(html))
    if char_count(sentence) > max_length:
        return sentence[: max_length - len(ELLIPSIS)] + ELLIPSIS
    return f"{sentence} {ELLIPSIS}"

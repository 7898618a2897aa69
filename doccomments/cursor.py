"""
Advance-only cursor over an immutable string.

Matchers and the tag scanner share one cursor per scan. ``check`` peeks at
the current position without moving; ``scan`` and ``scan_until`` consume
text and move forward. Nothing ever moves the position backwards.
"""

import re
from typing import Optional, Union

PatternLike = Union[str, re.Pattern]


def _compile(pattern: PatternLike) -> re.Pattern:
    if isinstance(pattern, str):
        return re.compile(pattern)
    return pattern


class Cursor:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    @property
    def eos(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def rest(self) -> str:
        return self.text[self.pos:]

    def check(self, pattern: PatternLike) -> Optional[re.Match]:
        """Match ``pattern`` anchored at the current position, without advancing."""
        return _compile(pattern).match(self.text, self.pos)

    def scan(self, pattern: PatternLike) -> Optional[re.Match]:
        """Match ``pattern`` at the current position and advance past it."""
        match = self.check(pattern)
        if match is None or match.end() == self.pos:
            return None
        self.pos = match.end()
        return match

    def scan_until(self, pattern: PatternLike) -> str:
        """
        Consume text up to and including the next match of ``pattern``.

        When nothing matches, the remainder of the input is consumed.
        """
        match = _compile(pattern).search(self.text, self.pos)
        end = match.end() if match else len(self.text)
        consumed = self.text[self.pos:end]
        self.pos = end
        return consumed

    def __repr__(self):
        return f"<Cursor pos={self.pos} len={len(self.text)}>"

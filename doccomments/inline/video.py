# doccomments/inline/video.py
"""
{@video} tags.

Converts:
    {@video html5 movie.mp4 Alt text}  →  <video src="movie.mp4">Alt text</video>
    {@video vimeo 12345}               →  Vimeo player iframe
"""

import logging
import re
from typing import Optional

from ..conf import FormatterConfig
from ..cursor import Cursor
from ..html import escape
from .base import fill_template

logger = logging.getLogger(__name__)

VIDEO_RE = re.compile(r"\{@video\s+(\w+)\s+(\S*?)(?:\s+(.+?))?\}", re.DOTALL)

VIDEO_TEMPLATES = {
    "html5": '<video src="%u">%a</video>',
    "vimeo": (
        '<p><iframe src="https://player.vimeo.com/video/%u" '
        'width="640" height="360" frameborder="0" '
        'allow="fullscreen" allowfullscreen title="%a"></iframe></p>'
    ),
}


class InlineVideo:
    def __init__(self, config: FormatterConfig):
        self.config = config

    def replace(self, cursor: Cursor) -> Optional[str]:
        match = cursor.scan(VIDEO_RE)
        if match is None:
            return None

        video_type, url, alt_text = match.groups()
        template = VIDEO_TEMPLATES.get(video_type)
        if template is None:
            logger.warning(
                f"Unknown video type {video_type} in {match.group(0)} "
                f"({self.config.location})"
            )
            return match.group(0)

        return fill_template(template, {"%u": url, "%a": escape(alt_text or "")})

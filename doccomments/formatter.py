# doccomments/formatter.py
"""
Formats doc comments for placement into HTML.

A DocFormatter is configured for one documented object at a time (class
context, doc context) and remembers the images referenced while it formats.
Use a separate instance per document when formatting concurrently.
"""

import dataclasses
from typing import List, Mapping, Optional

from . import shortener
from .conf import FormatterConfig
from .inline import InlineLink
from .markdown.renderer import render_markdown
from .relations import Relations
from .scanner import scan


class DocFormatter:
    def __init__(
        self,
        relations: Optional[Relations] = None,
        config: Optional[FormatterConfig] = None,
        **options,
    ):
        """
        Args:
            relations: Lookup table of known classes for links and auto-links
            config: Starting configuration; defaults to the DOC_COMMENTS settings
            **options: FormatterConfig fields overriding the starting configuration
        """
        config = config or FormatterConfig.from_settings()
        if relations is not None:
            options["relations"] = relations
        self.config = dataclasses.replace(config, **options) if options else config
        self._images: List[str] = []

    def _update(self, **changes) -> None:
        self.config = dataclasses.replace(self.config, **changes)

    # Maximum length for text that doesn't get shortened
    @property
    def max_length(self) -> int:
        return self.config.max_length

    @max_length.setter
    def max_length(self, value: int) -> None:
        self._update(max_length=value)

    @property
    def img_path(self) -> Optional[str]:
        return self.config.img_path

    @img_path.setter
    def img_path(self, path: Optional[str]) -> None:
        """Base path prefixed to the urls of {@img} tags."""
        self._update(img_path=path)

    @property
    def class_context(self) -> str:
        return self.config.class_context

    @class_context.setter
    def class_context(self, cls: str) -> None:
        """Class that bare {@link #member} references point into."""
        self._update(class_context=cls or "")

    @property
    def doc_context(self) -> Mapping:
        return self.config.doc_context

    @doc_context.setter
    def doc_context(self, doc: Mapping) -> None:
        """Documented object being formatted, used to attribute warnings."""
        self._update(doc_context=doc or {})

    @property
    def relations(self) -> Relations:
        return self.config.relations

    @relations.setter
    def relations(self, relations: Relations) -> None:
        self._update(relations=relations if relations is not None else Relations())

    @property
    def images(self) -> List[str]:
        """Image urls gathered from {@img} tags by earlier calls."""
        return list(self._images)

    def replace(self, text: str) -> str:
        """
        Replace {@link}, {@img} and {@video} tags and auto-link class names.

        Also marks code blocks starting with @example as inline examples.
        Use this directly when the input is already HTML.
        """
        result = scan(text, self.config)
        for image in result.images:
            if image not in self._images:
                self._images.append(image)
        return result.html

    def format(self, text: str) -> str:
        """Render a doc comment with Markdown, then replace inline tags."""
        return render_markdown(text, {"formatter": self})

    def link(
        self,
        cls: str,
        member: Optional[str],
        anchor_text: str,
        tagname: Optional[str] = None,
        static: Optional[bool] = None,
    ) -> str:
        """Create a link to a class or member from the link template."""
        return InlineLink(self.config).link(cls, member, anchor_text, tagname, static)

    def first_sentence(self, text: str) -> str:
        return shortener.first_sentence(text)

    def too_long(self, text: str) -> bool:
        """Returns True when text should get shortened."""
        return shortener.too_long(text, self.max_length)

    def shorten(self, text: str) -> str:
        """
        Shorten text to its first sentence.

        The cut only happens when there is more than max_length characters,
        so that a sentence just over the limit isn't expanded into an
        ellipsis that hides a single word.
        """
        return shortener.shorten(text, self.max_length)

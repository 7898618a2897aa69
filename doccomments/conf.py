"""
Settings for doc comment formatting.

Projects override defaults through the ``DOC_COMMENTS`` setting::

    DOC_COMMENTS = {
        "MAX_LENGTH": 100,
        "IMG_PATH": "doc-resources",
    }

Settings are read on every call so ``override_settings`` takes effect
immediately.
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .relations import Relations
from .shortener import DEFAULT_MAX_LENGTH, ELLIPSIS

DEFAULT_LINK_TEMPLATE = '<a href="#!/api/%c%-%m" rel="%c%-%m" class="docClass">%a</a>'
DEFAULT_IMG_TEMPLATE = '<img src="%u" alt="%a"/>'

DEFAULTS = {
    "MAX_LENGTH": DEFAULT_MAX_LENGTH,
    "IMG_PATH": None,
    "LINK_TEMPLATE": DEFAULT_LINK_TEMPLATE,
    "IMG_TEMPLATE": DEFAULT_IMG_TEMPLATE,
    "PANDOC_FORMAT": "markdown_strict",
    "PANDOC_EXTRA_ARGS": ["--wrap=preserve"],
}

# Shortened text must have room for at least one character before the ellipsis
MIN_MAX_LENGTH = len(ELLIPSIS) + 1


def get_doc_settings() -> dict:
    """Return DOC_COMMENTS merged over the defaults, validated."""
    overrides = getattr(settings, "DOC_COMMENTS", None) or {}
    if not isinstance(overrides, Mapping):
        raise ImproperlyConfigured("DOC_COMMENTS must be a dict")

    unknown = set(overrides) - set(DEFAULTS)
    if unknown:
        raise ImproperlyConfigured(
            f"Unknown DOC_COMMENTS keys: {', '.join(sorted(unknown))}"
        )

    conf = {**DEFAULTS, **overrides}

    max_length = conf["MAX_LENGTH"]
    if isinstance(max_length, bool) or not isinstance(max_length, int):
        raise ImproperlyConfigured("DOC_COMMENTS['MAX_LENGTH'] must be an integer")
    if max_length < MIN_MAX_LENGTH:
        raise ImproperlyConfigured(
            f"DOC_COMMENTS['MAX_LENGTH'] must be at least {MIN_MAX_LENGTH}"
        )

    for key in ("LINK_TEMPLATE", "IMG_TEMPLATE", "PANDOC_FORMAT"):
        if not isinstance(conf[key], str):
            raise ImproperlyConfigured(f"DOC_COMMENTS['{key}'] must be a string")

    if conf["IMG_PATH"] is not None and not isinstance(conf["IMG_PATH"], str):
        raise ImproperlyConfigured("DOC_COMMENTS['IMG_PATH'] must be a string or None")

    conf["PANDOC_EXTRA_ARGS"] = list(conf["PANDOC_EXTRA_ARGS"])
    return conf


@dataclass(frozen=True)
class FormatterConfig:
    """Everything a single scan needs to know, fixed for its duration."""

    max_length: int = DEFAULT_MAX_LENGTH
    img_path: Optional[str] = None
    class_context: str = ""
    doc_context: Mapping = field(default_factory=dict)
    relations: Relations = field(default_factory=Relations)
    link_template: str = DEFAULT_LINK_TEMPLATE
    img_template: str = DEFAULT_IMG_TEMPLATE

    def __post_init__(self):
        if self.max_length < MIN_MAX_LENGTH:
            raise ValueError(f"max_length must be at least {MIN_MAX_LENGTH}")

    @classmethod
    def from_settings(cls, **overrides) -> "FormatterConfig":
        conf = get_doc_settings()
        values = {
            "max_length": conf["MAX_LENGTH"],
            "img_path": conf["IMG_PATH"],
            "link_template": conf["LINK_TEMPLATE"],
            "img_template": conf["IMG_TEMPLATE"],
        }
        values.update(overrides)
        return cls(**values)

    @property
    def location(self) -> str:
        """``filename:linenr`` of the documented object, for log messages."""
        filename = self.doc_context.get("filename") or "?"
        linenr = self.doc_context.get("linenr")
        return f"{filename}:{linenr}" if linenr is not None else filename

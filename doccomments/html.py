"""HTML helpers shared by the shortener and the inline matchers."""

from bs4 import BeautifulSoup
from django.utils.html import escape as _django_escape


def strip_tags(html: str) -> str:
    """Return the visible text of an HTML fragment, with entities decoded."""
    if not html:
        return ""
    return BeautifulSoup(html, "html.parser").get_text()


def escape(text: str) -> str:
    """HTML-escape text for use inside markup or attribute values."""
    return str(_django_escape(text or ""))

# doccomments/templatetags/doc_tags.py

from django import template
from django.utils.safestring import mark_safe

from doccomments.formatter import DocFormatter
from doccomments.html import strip_tags

register = template.Library()


@register.filter(name="doc_format")
def doc_format_filter(value):
    """Render a Markdown doc comment to HTML"""
    return mark_safe(DocFormatter().format(value or ""))


@register.filter(name="doc_replace")
def doc_replace_filter(value):
    """Replace inline tags in a doc comment that is already HTML"""
    return mark_safe(DocFormatter().replace(value or ""))


@register.filter(name="doc_shorten")
def doc_shorten_filter(value):
    # Plain text, left to autoescaping
    return DocFormatter().shorten(value or "")


@register.filter(name="doc_too_long")
def doc_too_long_filter(value):
    return DocFormatter().too_long(value or "")


@register.filter(name="doc_summary")
def doc_summary_filter(value):
    """First sentence with an ellipsis when the comment is too long, else its text"""
    formatter = DocFormatter()
    value = value or ""
    if formatter.too_long(value):
        return formatter.shorten(value)
    return strip_tags(value).strip()

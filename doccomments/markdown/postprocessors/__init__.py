# doccomments/markdown/postprocessors/__init__.py

from .inline_tags import inline_tag_replacer

POSTPROCESSORS = [
    inline_tag_replacer,  # Expand {@link}/{@img}/{@video}, annotate examples, auto-link
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html

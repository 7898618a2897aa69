"""
Postprocessor that runs the rendered HTML through the inline tag scanner.

The formatter in the rendering context decides how tags resolve (class
context, relations, image path) and collects the image references.
"""


def inline_tag_replacer(html: str, context: dict) -> str:
    """
    Register this in POSTPROCESSORS.

    Without a formatter in the context a default one is built from settings,
    so render_markdown() can also be used on its own.
    """
    formatter = context.get("formatter")
    if formatter is None:
        from doccomments.formatter import DocFormatter

        formatter = DocFormatter()
        context["formatter"] = formatter

    return formatter.replace(html)

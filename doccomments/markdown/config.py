from ..conf import get_doc_settings


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc rendering of doc comments.

    Doc comments are written in classic Markdown with embedded HTML, so the
    strict reader is the default: Pandoc extensions such as attribute syntax
    would otherwise claim "{...}" sequences that belong to inline tags.
    Output wrapping is disabled so inline tags are never split across lines.
    """
    conf = get_doc_settings()

    return {
        "format": conf["PANDOC_FORMAT"],
        "to": "html5",
        "extra_args": conf["PANDOC_EXTRA_ARGS"],
    }

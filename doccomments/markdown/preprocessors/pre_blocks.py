"""
Preprocessor that puts <pre> blocks where the Markdown reader can see them.

In hand-written comments "<pre>" often ends a paragraph instead of starting
a line. The Markdown reader then treats it as inline HTML and keeps parsing
the code as Markdown, which tends to produce nested code blocks:

    Example usage:<pre><code>        →  Example usage:
    new Foo();                          <pre><code>new Foo();
    </code></pre>                       </code></pre>

The newline directly after "<pre>" (or "<pre><code>") is dropped so code
blocks never start with an empty line.
"""

import re

PRE_NOT_AT_LINE_START_RE = re.compile(r"([^\n])<pre>")
NEWLINE_AFTER_PRE_RE = re.compile(r"<pre>(<code>)?\n?")


def normalize_pre_blocks(text: str) -> str:
    text = PRE_NOT_AT_LINE_START_RE.sub(r"\1\n<pre>", text)
    return NEWLINE_AFTER_PRE_RE.sub(lambda m: "<pre>" + (m.group(1) or ""), text)


def pre_block_normalizer(text: str, context: dict) -> str:
    """
    Default configuration for normalize_pre_blocks.

    Register this in PREPROCESSORS.
    """
    return normalize_pre_blocks(text)

# doccomments/markdown/preprocessors/__init__.py

from .pre_blocks import pre_block_normalizer

PREPROCESSORS = [
    pre_block_normalizer,
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text

# shortcodes/markdown/preprocessors/__init__.py

from .shortcode_pass import shortcode_pass_default

PREPROCESSORS = [
    shortcode_pass_default,  # Must run before pandoc sees the brackets
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text

# shortcodes/markdown/renderer.py

import pypandoc

from .config import get_pandoc_config
from .preprocessors import apply_preprocessors


def render_markdown(text, context=None):
    """
    Render markdown to HTML, running the shortcode pass first.

    Args:
        text: Raw markdown text
        context: Optional dict for preprocessors. Recognised keys:
            shortcode_mode: ShortcodeMode or name (default: SHORTCODES["MARKDOWN_MODE"])
            shortcode_registry: TagRegistry (default: the process-wide registry)
    """
    context = context or {}

    # Pre-processing: shortcodes are expanded or stripped in the markdown source
    text = apply_preprocessors(text, context)

    pandoc_config = get_pandoc_config()

    return pypandoc.convert_text(
        text,
        to="html5",
        format="markdown",
        extra_args=pandoc_config["extra_args"],
    )

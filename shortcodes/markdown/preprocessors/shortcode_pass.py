"""
Preprocessor that expands or strips shortcodes in markdown source.

Converts (mode "expand"):
    [youtube id=dQw4w9WgXcQ]      → <iframe ...></iframe>
Converts (mode "strip"):
    [youtube id=dQw4w9WgXcQ]      → (nothing)
"""

import logging

from shortcodes.conf import get_shortcode_config
from shortcodes.modes import ShortcodeMode, apply_shortcodes

logger = logging.getLogger(__name__)


def process_shortcodes(text: str, context: dict) -> str:
    """
    Run the shortcode pass selected by the render context.

    Args:
        text: Markdown text
        context: May contain 'shortcode_mode' and 'shortcode_registry'

    Returns:
        Markdown with shortcodes expanded, stripped, or left as they are
    """
    mode = context.get('shortcode_mode')
    if mode is None:
        mode = get_shortcode_config()['MARKDOWN_MODE']
    mode = ShortcodeMode.coerce(mode)

    if mode is ShortcodeMode.UNSET:
        return text

    logger.debug(f"Applying shortcode pass ({mode.value}) to markdown source")
    return apply_shortcodes(text, mode, context.get('shortcode_registry'))


def shortcode_pass_default(text: str, context: dict) -> str:
    """Default instance of the shortcode preprocessor"""
    return process_shortcodes(text, context)

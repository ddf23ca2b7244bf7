# shortcodes/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from shortcodes.markdown.renderer import render_markdown
from shortcodes.modes import ShortcodeMode

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    return mark_safe(render_markdown(value, context={"shortcode_mode": ShortcodeMode.EXPAND}))


@register.filter(name="markdown_stripped")
def markdown_stripped_filter(value):
    """Render markdown with every shortcode removed (feeds, excerpts, emails)"""
    return mark_safe(render_markdown(value, context={"shortcode_mode": ShortcodeMode.STRIP}))


@register.simple_tag(takes_context=True)
def markdown_with_context(context, value, mode=None):
    """Template tag that passes template context to processors"""
    processor_context = {
        "user": context.get("user"),
        "request": context.get("request"),
        "shortcode_mode": mode if mode is not None else context.get("shortcode_mode"),
    }
    return mark_safe(render_markdown(value, context=processor_context))

"""
Template rendering with a shortcode pass applied to the output.

Mirrors django.shortcuts.render / django.template.loader.render_to_string,
with one extra ``mode`` argument choosing what happens to shortcodes in the
rendered page:

    render(request, "pages/about.html", {"page": page}, mode="expand")
    render_to_string("emails/digest.txt", context, mode=ShortcodeMode.STRIP)
"""

import logging

from django.http import HttpResponse
from django.template import loader

from .conf import get_shortcode_config
from .modes import ShortcodeMode, apply_shortcodes

logger = logging.getLogger(__name__)


def resolve_mode(mode=None) -> ShortcodeMode:
    """Return ``mode`` as a ShortcodeMode, falling back to DEFAULT_MODE."""
    if mode is None:
        mode = get_shortcode_config()["DEFAULT_MODE"]
    return ShortcodeMode.coerce(mode)


def render_to_string(template_name, context=None, request=None, using=None, mode=None, registry=None):
    """
    Render a template, then expand or strip the shortcodes in the result.

    Args:
        template_name: Template name or list of names, as for Django's loader
        context: Template context dict
        request: Optional HttpRequest for context processors
        using: Template engine alias
        mode: ShortcodeMode (or its name); None uses SHORTCODES["DEFAULT_MODE"]
        registry: TagRegistry to use (default: the process-wide registry)
    """
    mode = resolve_mode(mode)
    content = loader.render_to_string(template_name, context, request, using=using)

    logger.debug(f"Rendered {template_name!r} with shortcode mode {mode.value}")
    return apply_shortcodes(content, mode, registry)


def render(request, template_name, context=None, content_type=None, status=None,
           using=None, mode=None, registry=None):
    """Return an HttpResponse whose content is render_to_string()'s output."""
    content = render_to_string(
        template_name, context, request, using=using, mode=mode, registry=registry
    )
    return HttpResponse(content, content_type, status)

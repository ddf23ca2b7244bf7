from django import template
from django.template.defaultfilters import stringfilter
from django.utils.html import conditional_escape
from django.utils.safestring import SafeData, mark_safe

from shortcodes.modes import ShortcodeMode, apply_shortcodes
from shortcodes.scanner import compile_shortcodes, destroy_shortcodes

register = template.Library()

"""
Django template tags for shortcodes.

Usage in templates:
1. Load the tags: {% load shortcode_tags %}

2. Expand or strip shortcodes in a variable:
    {{ post.body|shortcodes }}
    {{ post.body|strip_shortcodes }}

3. Or in a block of template output:
    {% shortcodes %}...{% endshortcodes %}
    {% shortcodes strip %}...{% endshortcodes %}
    {% shortcodes page.shortcode_mode %}...{% endshortcodes %}
"""

_MODE_KEYWORDS = {"expand", "compile", "strip", "destroy", "unset"}


@register.filter(name="shortcodes", needs_autoescape=True)
@stringfilter
def shortcodes_filter(value, autoescape=True):
    """
    Expand shortcodes. Handler output is HTML and is not escaped; the text
    around the shortcodes is escaped unless it is already safe or
    autoescaping is off.
    """
    if autoescape and not isinstance(value, SafeData):
        return mark_safe(compile_shortcodes(value, escape_text=conditional_escape))
    return mark_safe(compile_shortcodes(value))


@register.filter(name="strip_shortcodes", is_safe=True)
@stringfilter
def strip_shortcodes_filter(value):
    return destroy_shortcodes(value)


class ShortcodesNode(template.Node):
    def __init__(self, nodelist, mode):
        self.nodelist = nodelist
        self.mode = mode

    def render(self, context):
        content = self.nodelist.render(context)
        mode = self._resolve_mode(context)
        return mark_safe(apply_shortcodes(content, mode))

    def _resolve_mode(self, context):
        """Resolve a template variable or return the literal mode"""
        if hasattr(self.mode, "resolve"):
            return ShortcodeMode.coerce(self.mode.resolve(context))
        return self.mode


@register.tag("shortcodes")
def do_shortcodes(parser, token):
    """
    Usage:
    {% shortcodes [expand|strip|unset|"mode"|variable] %}
        Text with [shortcodes] in it
    {% endshortcodes %}
    """
    bits = token.split_contents()
    tag_name = bits[0]

    if len(bits) > 2:
        raise template.TemplateSyntaxError(
            f"'{tag_name}' takes at most one argument, the shortcode mode"
        )

    if len(bits) == 1:
        mode = ShortcodeMode.EXPAND
    elif bits[1].lower() in _MODE_KEYWORDS:
        mode = ShortcodeMode.coerce(bits[1])
    elif bits[1][0] in "\"'" and bits[1][-1] == bits[1][0]:
        try:
            mode = ShortcodeMode.coerce(bits[1][1:-1])
        except ValueError as e:
            raise template.TemplateSyntaxError(f"'{tag_name}': {e}") from e
    else:
        mode = parser.compile_filter(bits[1])

    nodelist = parser.parse((f"end{tag_name}",))
    parser.delete_first_token()
    return ShortcodesNode(nodelist, mode)

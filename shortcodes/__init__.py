"""
WordPress-style shortcodes for Django templates and markdown.
"""

from .attributes import (
    RawAttributes,
    ShortcodeAttributes,
    merge_with_defaults,
    parse_attributes,
)
from .modes import ShortcodeMode, apply_shortcodes
from .registry import TagRegistry, default_registry, register
from .scanner import (
    ShortcodeMatch,
    compile_shortcodes,
    destroy_shortcodes,
    find_shortcodes,
)

__all__ = [
    'RawAttributes',
    'ShortcodeAttributes',
    'ShortcodeMatch',
    'ShortcodeMode',
    'TagRegistry',
    'apply_shortcodes',
    'compile_shortcodes',
    'destroy_shortcodes',
    'find_shortcodes',
    'merge_with_defaults',
    'parse_attributes',
    'default_registry',
    'register',
]

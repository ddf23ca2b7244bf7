"""
Render modes for shortcode handling.

A renderer picks one mode per render pass:

    UNSET   leave shortcodes in the text untouched
    EXPAND  replace shortcodes with their handler output
    STRIP   remove shortcodes without calling handlers
"""

from enum import Enum

from .scanner import compile_shortcodes, destroy_shortcodes

_ALIASES = {
    "compile": "expand",
    "render": "expand",
    "destroy": "strip",
    "remove": "strip",
    "none": "unset",
    "": "unset",
}


class ShortcodeMode(Enum):
    UNSET = "unset"
    EXPAND = "expand"
    STRIP = "strip"

    @classmethod
    def coerce(cls, value):
        """
        Accept a member, its name or its value (case-insensitive), plus the
        aliases ``compile``/``render`` and ``destroy``/``remove``.
        ``None`` means UNSET.
        """
        if value is None:
            return cls.UNSET
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower()
            key = _ALIASES.get(key, key)
            for member in cls:
                if member.value == key:
                    return member
        raise ValueError(
            f"Unknown shortcode mode {value!r}; expected one of "
            f"{', '.join(member.value for member in cls)}"
        )


def apply_shortcodes(text: str, mode, registry=None) -> str:
    """
    Run the pass selected by ``mode`` over ``text``.

    Args:
        text: Text to process
        mode: ShortcodeMode or anything ShortcodeMode.coerce accepts
        registry: TagRegistry to use (default: the process-wide registry)
    """
    mode = ShortcodeMode.coerce(mode)
    if mode is ShortcodeMode.EXPAND:
        return compile_shortcodes(text, registry)
    if mode is ShortcodeMode.STRIP:
        return destroy_shortcodes(text, registry)
    return text

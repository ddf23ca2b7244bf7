"""
Attribute parsing for shortcode tags.

Turns the raw text between a tag name and its closing bracket into either a
mapping of attributes or, when no ``key=value`` pair is present, the raw text
itself:

    id="5" size='l' align=left "caption" wide
        → ShortcodeAttributes({'id': '5', 'size': 'l', 'align': 'left'},
                              positional=['caption', 'wide'])

    just some text
        → RawAttributes('just some text')
"""

import re
from collections.abc import Mapping

# No-break space and zero-width space, usually pasted in from rich text editors
_SPACING_RE = re.compile("[\\u00a0\\u200b]+")

_ATTRIBUTE_RE = re.compile(
    r'(\w+)\s*=\s*"([^"]*)"(?:\s|$)'
    r"|(\w+)\s*=\s*'([^']*)'(?:\s|$)"
    r"""|(\w+)\s*=\s*([^\s'"]+)(?:\s|$)"""
    r'|"([^"]*)"(?:\s|$)'
    r"|(\S+)(?:\s|$)",
    re.ASCII,
)

_ESCAPE_RE = re.compile(r"\\(x[0-9A-Fa-f]{1,2}|[0-7]{1,3}|.)", re.DOTALL)

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}


class ShortcodeAttributes(dict):
    """
    Keyed attributes of a shortcode, with positional values kept aside.

    Behaves like a plain dict of the keyed attributes (keys lower-cased, last
    duplicate wins), so ``attrs == {"id": "5"}`` holds even when positional
    values were also given. Positional values live in ``positional`` in the
    order they appeared.
    """

    def __init__(self, *args, positional=None, **kwargs):
        super().__init__(*args, **kwargs)
        self.positional = list(positional or [])

    def is_raw(self) -> bool:
        return False

    def __repr__(self):
        return f"ShortcodeAttributes({dict.__repr__(self)}, positional={self.positional!r})"


class RawAttributes(str):
    """
    Attribute text that held no ``key=value`` pair, left-trimmed.

    The tokens found in it are still parsed into ``positional``, so
    ``[youtube "my video" 480]`` gives ``["my video", "480"]``.
    """

    def __new__(cls, value="", positional=None):
        obj = super().__new__(cls, value)
        obj.positional = list(positional or [])
        return obj

    def is_raw(self) -> bool:
        return True

    def __repr__(self):
        return f"RawAttributes({str.__repr__(self)})"


def unescape(value: str) -> str:
    """
    Interpret C-style backslash escapes in an attribute value.

    Supports ``\\n \\t \\r \\a \\b \\f \\v``, octal ``\\NNN`` and hex ``\\xHH``;
    any other escaped character stands for itself (``\\"`` → ``"``,
    ``\\\\`` → ``\\``). A lone trailing backslash is kept.
    """
    if "\\" not in value:
        return value

    def replace(match):
        seq = match.group(1)
        if seq in _SIMPLE_ESCAPES:
            return _SIMPLE_ESCAPES[seq]
        if seq[0] == "x" and len(seq) > 1:
            return chr(int(seq[1:], 16))
        if seq[0] in "01234567":
            return chr(int(seq, 8) & 0xFF)
        return seq

    return _ESCAPE_RE.sub(replace, value)


def normalize_spacing(text: str) -> str:
    """Collapse runs of no-break/zero-width spaces into a single space."""
    return _SPACING_RE.sub(" ", text)


def parse_attributes(text: str):
    """
    Parse the attribute span of a shortcode.

    Args:
        text: Raw text found between the tag name and ``]`` or ``/]``

    Returns:
        ShortcodeAttributes when at least one keyed attribute was found,
        otherwise RawAttributes holding the left-trimmed text (its positional
        tokens parsed into ``positional``). Callers must
        handle both shapes (``attrs.is_raw()`` tells them apart).
    """
    text = normalize_spacing(text)

    keyed = {}
    positional = []

    for match in _ATTRIBUTE_RE.finditer(text):
        if match.group(1) is not None:
            keyed[match.group(1).lower()] = unescape(match.group(2))
        elif match.group(3) is not None:
            keyed[match.group(3).lower()] = unescape(match.group(4))
        elif match.group(5) is not None:
            keyed[match.group(5).lower()] = unescape(match.group(6))
        elif match.group(7):
            positional.append(unescape(match.group(7)))
        elif match.group(8) is not None:
            positional.append(unescape(match.group(8)))

    if not keyed:
        return RawAttributes(text.lstrip(), positional=positional)

    return ShortcodeAttributes(keyed, positional=positional)


def merge_with_defaults(defaults: Mapping, supplied) -> dict:
    """
    Normalize a handler's attributes against its defaults.

    Every name in ``defaults`` appears in the result, taking the supplied
    value when present. Supplied names without a default are dropped. A raw
    (non-mapping) or missing ``supplied`` counts as nothing supplied.

    Example:
        >>> merge_with_defaults({"id": "0", "size": "m"}, {"size": "l", "extra": "z"})
        {'id': '0', 'size': 'l'}
    """
    if not isinstance(supplied, Mapping):
        supplied = {}

    merged = {}
    for name, default in defaults.items():
        merged[name] = supplied[name] if name in supplied else default
    return merged

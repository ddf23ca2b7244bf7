"""
Locate shortcodes in text and expand or strip them.

Recognised forms, for a registered tag ``tag``:

    [tag]                     → handler(attrs, None, "tag")
    [tag a="1" b=2]           → handler({"a": "1", "b": "2"}, None, "tag")
    [tag url=http://x/y/]     → self-closing, slashes allowed inside attributes
    [tag]body[/tag]           → handler(attrs, "body", "tag")
    [[tag]] / [[tag]x[/tag]]  → escaped, rendered literally as [tag] / [tag]x[/tag]

The opener is found with a regular expression built from the registered names.
The body of an enclosing tag then runs up to the first ``[/tag]`` after the
opener; without one the tag has no body.
"""

import html
import logging
import re
from dataclasses import dataclass
from typing import Iterator, Optional

from .attributes import parse_attributes
from .registry import default_registry

logger = logging.getLogger(__name__)

# Only complete references ending in ";", so "&copy=2" in a URL stays as typed
_ENTITY_RE = re.compile(r"&(#\d+|#[xX][0-9A-Fa-f]+|\w+);")


@dataclass(frozen=True)
class ShortcodeMatch:
    """One shortcode occurrence found in a text."""

    start: int
    end: int
    text: str
    tag_name: str
    attribute_text: str
    self_closing: bool
    body: Optional[str]
    leading_escape: bool
    trailing_escape: bool

    @property
    def is_escaped(self) -> bool:
        """``[[tag]]``: both outer brackets doubled, rendered literally."""
        return self.leading_escape and self.trailing_escape

    @property
    def leading(self) -> str:
        return "[" if self.leading_escape else ""

    @property
    def trailing(self) -> str:
        return "]" if self.trailing_escape else ""

    def literal(self) -> str:
        """The matched text with one outer bracket removed on each side."""
        return self.text[1:-1]


def build_pattern(names) -> re.Pattern:
    """
    Compile the opener pattern for a set of tag names.

    Groups:
        1: optional second ``[`` (escape)
        2: tag name
        3: attribute text, may contain ``/`` not followed by ``]``
        4: ``/`` when the tag is self-closing
    """
    alternation = "|".join(re.escape(name) for name in names)
    return re.compile(
        r"\[(\[?)"
        rf"({alternation})"
        r"(?![\w-])"
        r"([^\]/]*(?:/(?!\])[^\]/]*)*?)"
        r"(?:(/)\]|\])",
        re.ASCII | re.DOTALL,
    )


def decode_entities(text: str) -> str:
    """Decode named and numeric character references that end in ``;``."""
    if "&" not in text:
        return text
    return _ENTITY_RE.sub(lambda m: html.unescape(m.group(0)), text)


def _scan(text: str, pattern: re.Pattern) -> Iterator[ShortcodeMatch]:
    pos = 0
    length = len(text)

    while True:
        opener = pattern.search(text, pos)
        if opener is None:
            return

        start = opener.start()
        end = opener.end()
        tag_name = opener.group(2)
        self_closing = opener.group(4) is not None
        body = None

        if not self_closing:
            closer = f"[/{tag_name}]"
            close_at = text.find(closer, end)
            if close_at != -1:
                body = text[end:close_at]
                end = close_at + len(closer)

        trailing_escape = end < length and text[end] == "]"
        if trailing_escape:
            end += 1

        yield ShortcodeMatch(
            start=start,
            end=end,
            text=text[start:end],
            tag_name=tag_name,
            attribute_text=opener.group(3),
            self_closing=self_closing,
            body=body,
            leading_escape=opener.group(1) == "[",
            trailing_escape=trailing_escape,
        )
        pos = end


def find_shortcodes(text: str, registry=None) -> Iterator[ShortcodeMatch]:
    """
    Yield every shortcode of ``registry`` found in ``text``, in order.

    Matches never overlap; scanning resumes after the end of each match.
    """
    if registry is None:
        registry = default_registry
    names = registry.names()
    if not names:
        return iter(())
    return _scan(text, build_pattern(names))


def _replace(text: str, registry, render, escape_text=None) -> str:
    escape = escape_text or (lambda value: value)
    handlers = dict(registry.items())
    if not handlers:
        return escape(text)

    pieces = []
    last = 0
    found = 0

    for match in _scan(text, build_pattern(handlers)):
        pieces.append(escape(text[last:match.start]))
        piece = render(match, handlers)
        pieces.append(escape(piece) if match.is_escaped else piece)
        last = match.end
        found += 1

    if not found:
        return escape(text)

    pieces.append(escape(text[last:]))
    logger.debug(f"Processed {found} shortcode(s) in {len(text)} characters")
    return "".join(pieces)


def _expand(match: ShortcodeMatch, handlers) -> str:
    if match.is_escaped:
        return match.literal()

    attributes = parse_attributes(decode_entities(match.attribute_text))
    result = handlers[match.tag_name](attributes, match.body, match.tag_name)
    if result is None:
        result = ""
    return f"{match.leading}{result}{match.trailing}"


def _remove(match: ShortcodeMatch, handlers) -> str:
    if match.is_escaped:
        return match.literal()
    return match.leading + match.trailing


def compile_shortcodes(text: str, registry=None, escape_text=None) -> str:
    """
    Replace every registered shortcode in ``text`` with its handler's output.

    Args:
        text: Text containing shortcodes
        registry: TagRegistry to use (default: the process-wide registry)
        escape_text: Optional callable applied to the text outside shortcodes
            and to escaped shortcodes; handler output is left as returned

    Returns:
        The transformed text. Text is returned unchanged when the registry is
        empty or holds no tag found in it. Handler exceptions propagate.
    """
    if registry is None:
        registry = default_registry
    return _replace(text, registry, _expand, escape_text)


def destroy_shortcodes(text: str, registry=None) -> str:
    """
    Remove every registered shortcode from ``text`` without calling handlers.

    The tag, its attributes and its body are all removed. Escaped shortcodes
    (``[[tag]]``) are unescaped exactly as :func:`compile_shortcodes` does.
    """
    if registry is None:
        registry = default_registry
    return _replace(text, registry, _remove)

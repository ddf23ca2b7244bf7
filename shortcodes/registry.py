"""
Registry of shortcode handlers.

Handlers are plain callables bound to a tag name:

    def gallery(attrs, body, tag):
        return f'<div class="gallery" data-id="{attrs.get("id", "")}"></div>'

    registry.add("gallery", gallery)

Registration is additive only. Adding a name twice keeps the first handler
and reports ``False``.
"""

import logging
import threading

logger = logging.getLogger(__name__)


class TagRegistry:
    """Insertion-ordered mapping of tag name to handler."""

    def __init__(self):
        self._tags = {}
        self._lock = threading.Lock()

    def add(self, name: str, handler) -> bool:
        """
        Register ``handler`` for ``name``.

        Args:
            name: Tag name, matched case-sensitively
            handler: Callable taking ``(attributes, body, tag_name)`` and
                returning the replacement text

        Returns:
            True if registered, False if ``name`` was already taken
        """
        if not isinstance(name, str) or not name:
            raise ValueError(f"Shortcode name must be a non-empty string, got {name!r}")
        if not callable(handler):
            raise TypeError(f"Handler for shortcode '{name}' is not callable: {handler!r}")

        with self._lock:
            if name in self._tags:
                logger.warning(
                    f"Shortcode '{name}' is already registered; keeping "
                    f"{describe_handler(self._tags[name])}"
                )
                return False
            self._tags[name] = handler

        logger.debug(f"Registered shortcode '{name}' -> {describe_handler(handler)}")
        return True

    def register(self, name=None):
        """
        Decorator form of :meth:`add`.

        Usage:
            @registry.register("quote")
            def quote(attrs, body, tag): ...

            @registry.register()
            def gallery(attrs, body, tag): ...   # registered as "gallery"
        """

        def decorator(handler):
            self.add(name or handler.__name__, handler)
            return handler

        return decorator

    def count(self) -> int:
        return len(self._tags)

    def get(self, name: str):
        return self._tags.get(name)

    def names(self) -> tuple:
        """Snapshot of registered names in registration order."""
        with self._lock:
            return tuple(self._tags)

    def items(self) -> tuple:
        """Snapshot of ``(name, handler)`` pairs in registration order."""
        with self._lock:
            return tuple(self._tags.items())

    def __contains__(self, name):
        return name in self._tags

    def __len__(self):
        return self.count()

    def __repr__(self):
        return f"<TagRegistry: {', '.join(self.names()) or 'empty'}>"


def describe_handler(handler) -> str:
    """Dotted path of a handler, for logs and listings."""
    module = getattr(handler, "__module__", None)
    qualname = getattr(handler, "__qualname__", None) or type(handler).__qualname__
    return f"{module}.{qualname}" if module else qualname


# Process-wide registry used by template tags, the markdown pipeline and the
# management commands. Apps fill it from their ``shortcode_handlers`` module.
default_registry = TagRegistry()


def register(name=None):
    """Register a handler on the default registry."""
    return default_registry.register(name)

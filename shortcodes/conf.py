from django.conf import settings

DEFAULTS = {
    # Mode used by shortcodes.rendering when the caller passes none
    "DEFAULT_MODE": "unset",
    # Mode used by the markdown pipeline when the context sets none
    "MARKDOWN_MODE": "expand",
    # Import <app>.shortcode_handlers for every installed app on startup
    "AUTODISCOVER": True,
    # Overrides the pandoc arguments of the markdown pipeline when set
    "PANDOC_EXTRA_ARGS": None,
}


def get_shortcode_config():
    """
    Shortcode settings, with defaults filled in.

    Read from the ``SHORTCODES`` dict in Django settings:

        SHORTCODES = {
            "DEFAULT_MODE": "expand",
            "AUTODISCOVER": False,
        }
    """
    config = dict(DEFAULTS)
    config.update(getattr(settings, "SHORTCODES", None) or {})
    return config

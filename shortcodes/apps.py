import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class ShortcodesConfig(AppConfig):
    name = 'shortcodes'
    verbose_name = 'Shortcodes'

    def ready(self):
        """Import every installed app's shortcode_handlers module."""
        from django.utils.module_loading import autodiscover_modules

        from .conf import get_shortcode_config
        from .registry import default_registry

        if not get_shortcode_config()["AUTODISCOVER"]:
            return

        autodiscover_modules('shortcode_handlers')
        logger.info(f"Shortcode autodiscovery complete: {default_registry.count()} tag(s) registered")

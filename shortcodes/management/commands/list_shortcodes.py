"""
Management command to list the registered shortcode tags.

Shows every tag of the process-wide registry, in registration order, with
the handler bound to it. Useful to check that autodiscovery picked up an
app's shortcode_handlers module.
"""

from django.core.management.base import BaseCommand

from shortcodes.registry import default_registry, describe_handler


class Command(BaseCommand):
    help = 'List registered shortcode tags and their handlers'

    def add_arguments(self, parser):
        parser.add_argument(
            '--count',
            action='store_true',
            help='Only print the number of registered tags',
        )

    def handle(self, *args, **options):
        if options.get('count'):
            self.stdout.write(str(default_registry.count()))
            return

        items = default_registry.items()
        if not items:
            self.stdout.write(self.style.WARNING('No shortcodes registered'))
            return

        width = max(len(name) for name, _ in items)
        for name, handler in items:
            self.stdout.write(f"[{name}]".ljust(width + 3) + describe_handler(handler))

        self.stdout.write(self.style.SUCCESS(f'\n{len(items)} shortcode(s) registered'))

"""
Management command to expand or strip shortcodes in a file.

Reads the file (or stdin with "-"), runs the requested pass with the
process-wide registry and writes the result to stdout.
"""

import sys

from django.core.management.base import BaseCommand, CommandError

from shortcodes.modes import ShortcodeMode, apply_shortcodes


class Command(BaseCommand):
    help = 'Expand or strip shortcodes in a file and print the result'

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            help='File to process, or "-" to read stdin',
        )
        parser.add_argument(
            '--mode',
            type=str,
            choices=[mode.value for mode in ShortcodeMode],
            default=ShortcodeMode.EXPAND.value,
            help='What to do with shortcodes (default: expand)',
        )
        parser.add_argument(
            '--encoding',
            type=str,
            default='utf-8',
            help='Encoding of the input file (default: utf-8)',
        )

    def handle(self, *args, **options):
        path = options['path']
        mode = ShortcodeMode.coerce(options['mode'])

        if path == '-':
            text = sys.stdin.read()
        else:
            try:
                with open(path, encoding=options['encoding']) as f:
                    text = f.read()
            except OSError as e:
                raise CommandError(f'Cannot read {path}: {e}') from e
            except UnicodeDecodeError as e:
                raise CommandError(f'{path} is not valid {options["encoding"]}: {e}') from e

        self.stdout.write(apply_shortcodes(text, mode), ending='')

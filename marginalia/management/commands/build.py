"""
Management command to render a directory of markdown notes into HTML pages.

    marginalia notes/ site/
    python manage.py build notes/ site/

With either directory missing the command does nothing.
"""

import logging
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from marginalia.exceptions import ConversionError
from marginalia.site import build_site

VERBOSITY_LEVELS = {0: logging.WARNING, 1: logging.INFO}


class Command(BaseCommand):
    help = 'Render markdown notes and orbit review decks into HTML pages'

    requires_system_checks = []

    def add_arguments(self, parser):
        parser.add_argument(
            'source',
            nargs='?',
            help='Directory holding the markdown notes',
        )
        parser.add_argument(
            'destination',
            nargs='?',
            help='Directory receiving the rendered pages',
        )
        parser.add_argument(
            '--template',
            type=Path,
            help='Page template with a {{ body }} slot (default: packaged page.html)',
        )
        parser.add_argument(
            '--stylesheet',
            type=Path,
            help='Stylesheet copied next to the pages (default: packaged tufte.css)',
        )

    def handle(self, *args, **options):
        source = options.get('source')
        destination = options.get('destination')

        if not source or not destination:
            return

        logging.basicConfig(
            level=VERBOSITY_LEVELS.get(options.get('verbosity', 1), logging.DEBUG),
            format='[%(levelname)s] %(message)s',
        )

        try:
            pages = build_site(
                Path(source),
                Path(destination),
                template_path=options.get('template'),
                stylesheet_path=options.get('stylesheet'),
            )
        except ConversionError as exc:
            location = f'{exc.source}: ' if exc.source else ''
            raise CommandError(f'{location}{exc}') from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise CommandError(str(exc)) from exc

        self.stdout.write(
            self.style.SUCCESS(f'Rendered {len(pages)} page(s) into {destination}')
        )

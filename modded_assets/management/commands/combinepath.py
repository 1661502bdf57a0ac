import os
from django.core.exceptions import ImproperlyConfigured
from django.core.management.base import BaseCommand, CommandError

from ...utils.mods import get_mod_path
from ...utils.path import combine


class Command(BaseCommand):
    help = (
        'Combine path segments into a single path, matching existing '
        'directories and files case-insensitively.'
    )

    def add_arguments(self, parser):
        parser.add_argument('segments', nargs='*')
        parser.add_argument(
            '--mod', metavar='GUID',
            help='resolve the segments inside this mod\'s data directory'
        )
        parser.add_argument(
            '--must-exist', action='store_true',
            help='fail if the resolved path does not exist'
        )

    def handle(self, *args, **options):
        segments = options['segments']
        try:
            if options['mod']:
                segments = [get_mod_path(options['mod']), *segments]
            path = combine(segments)
        except (ValueError, OSError, ImproperlyConfigured) as e:
            raise CommandError(str(e)) from e

        if options['must_exist'] and not os.path.exists(path):
            raise CommandError(f'{path} does not exist')
        self.stdout.write(path)

"""
Management command to print the number of stored records per content type
Usage: python manage.py content_counts [--json] [--by-uid] [--url https://cms.example.com --token <jwt>]
"""
import json

from asgiref.sync import async_to_sync
from django.core.management.base import BaseCommand, CommandError

from content_metrics.client import MetricsClient
from content_metrics.constants import EMPTY_MESSAGE
from content_metrics.display import MetricsDisplay, WidgetState
from content_metrics.services import get_aggregator


class Command(BaseCommand):
    help = 'Print the number of stored records for each user content type'

    def add_arguments(self, parser):
        parser.add_argument('--json', action='store_true', help='Print the raw {name: count} mapping as JSON')
        parser.add_argument('--url', help='Fetch counts from a running deployment instead of the local database')
        parser.add_argument('--token', help='JWT access token used with --url')
        parser.add_argument(
            '--by-uid',
            action='store_true',
            help='List every content type by uid, including ones whose display name is shared with another type',
        )

    def handle(self, *args, **options):
        if options.get('by_uid'):
            if options.get('url'):
                raise CommandError('--by-uid reads the local registry and cannot be combined with --url')
            self._print_descriptors(options.get('json'))
            return

        if options.get('url'):
            counts = self._remote_counts(options['url'], options.get('token'))
        else:
            try:
                counts = get_aggregator().get_content_counts()
            except Exception as exc:
                raise CommandError(f'Failed to count content types: {exc}') from exc

        if options.get('json'):
            self.stdout.write(json.dumps(counts, indent=2))
            return

        if not counts:
            self.stdout.write(self.style.WARNING(EMPTY_MESSAGE))
            return

        width = max(len(str(name)) for name in counts)
        self.stdout.write(self.style.SUCCESS(f'\nFound {len(counts)} content types:\n'))
        self.stdout.write('-' * (width + 14))
        for name, count in counts.items():
            self.stdout.write(f'  {str(name).ljust(width)}  {count}')
        self.stdout.write('-' * (width + 14) + '\n')

    def _remote_counts(self, url, token):
        display = MetricsDisplay(MetricsClient(url, token=token).fetch_counts)
        async_to_sync(display.load)()
        if display.state == WidgetState.ERROR:
            raise CommandError(f'Failed to fetch content counts from {url}: {display.error}')
        return display.metrics or {}

    def _print_descriptors(self, as_json):
        try:
            descriptors = get_aggregator().list_descriptors()
        except Exception as exc:
            raise CommandError(f'Failed to count content types: {exc}') from exc

        if as_json:
            rows = [{'uid': d.uid, 'label': d.label, 'count': d.count} for d in descriptors]
            self.stdout.write(json.dumps(rows, indent=2))
            return

        if not descriptors:
            self.stdout.write(self.style.WARNING(EMPTY_MESSAGE))
            return

        uid_width = max(len(d.uid) for d in descriptors)
        label_width = max(len(d.label) for d in descriptors)
        labels = [d.label for d in descriptors]
        self.stdout.write(self.style.SUCCESS(f'\nFound {len(descriptors)} content types:\n'))
        for d in descriptors:
            line = f'  {d.uid.ljust(uid_width)}  {d.label.ljust(label_width)}  {d.count}'
            if labels.count(d.label) > 1:
                line += '  (shared display name)'
            self.stdout.write(line)
        self.stdout.write('')

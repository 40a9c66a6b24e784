"""
Management command for triggering frontend revalidation by hand.

Useful after bulk imports (which skip signals) or to check that the
frontend revalidate endpoint is reachable with the configured secret.
"""

from django.core.management.base import BaseCommand, CommandError

from revalidation.locales import get_available_locales
from revalidation.paths import PATH_GENERATORS, get_paths
from revalidation.service import get_revalidation_service


class Command(BaseCommand):
    help = 'Revalidate frontend pages for a content type or an explicit list of paths'

    def add_arguments(self, parser):
        parser.add_argument(
            'entity_type',
            nargs='?',
            choices=sorted(PATH_GENERATORS),
            help='Content type whose pages should be revalidated'
        )

        parser.add_argument(
            '--slug',
            help='Slug of the changed entity (product, brand, case-study)'
        )

        parser.add_argument(
            '--locale',
            action='append',
            dest='locales',
            help='Locale to revalidate; repeat for several (default: all locales)'
        )

        parser.add_argument(
            '--path',
            action='append',
            dest='paths',
            help='Explicit path to revalidate; repeat for several'
        )

        parser.add_argument(
            '--verify',
            action='store_true',
            help='Show the current revalidation configuration without sending anything'
        )

        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Print the paths that would be revalidated without sending them'
        )

    def handle(self, *args, **options):
        service = get_revalidation_service()

        if options['verify']:
            self._verify_configuration(service)
            return

        if options['paths']:
            paths = options['paths']
            entity_type = options['entity_type'] or 'manual'
        elif options['entity_type']:
            entity_type = options['entity_type']
            locales = options['locales'] or get_available_locales()
            paths = get_paths(entity_type, {'slug': options['slug']}, locales)
        else:
            raise CommandError('Give a content type or at least one --path')

        if not paths:
            self.stdout.write(
                self.style.WARNING(f'No paths to revalidate for {entity_type} (missing --slug?)')
            )
            return

        for path in paths:
            self.stdout.write(f'  {path}')

        if options['dry_run']:
            self.stdout.write(f'Dry run: {len(paths)} paths not sent')
            return

        if not service.is_configured():
            raise CommandError('FRONTEND_URL is not configured')

        if not service.revalidate_paths(paths, entity_type=entity_type):
            self.stdout.write(
                self.style.ERROR(f'✗ Revalidation of {len(paths)} paths failed, see the log for details')
            )
            raise CommandError('Frontend revalidation failed')
        self.stdout.write(
            self.style.SUCCESS(f'✓ Sent {len(paths)} paths to {service.endpoint}')
        )

    def _verify_configuration(self, service):
        """Display the current revalidation configuration."""

        self.stdout.write('Verifying revalidation configuration...')

        if not service.is_configured():
            self.stdout.write(
                self.style.ERROR(
                    'Revalidation is not configured. Please set:\n'
                    '- FRONTEND_URL=https://your-frontend-host\n'
                    '- REVALIDATE_SECRET=shared-secret (optional)'
                )
            )
            raise CommandError('Revalidation configuration incomplete')

        self.stdout.write(f'Endpoint: {service.endpoint}')
        if service.config.revalidate_secret:
            self.stdout.write('Secret: configured (x-revalidate-secret)')
        else:
            self.stdout.write(self.style.WARNING('Secret: not configured'))
        timeout = service.config.timeout
        self.stdout.write(f'Timeout: {f"{timeout:g}s" if timeout else "none"}')
        self.stdout.write(f'Locales: {", ".join(get_available_locales()) or "(none)"}')

        self.stdout.write(
            self.style.SUCCESS('Configuration verification complete')
        )

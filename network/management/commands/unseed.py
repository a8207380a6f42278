from django.core.management.base import BaseCommand
from django.db import transaction

from network.models import User


class Command(BaseCommand):
    """
    Management command to remove (unseed) user data from the database.

    Deletes every non-staff user; profiles, follow edges, posts, comments
    and likes go with them through the foreign-key cascades. Staff
    accounts are kept.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        with transaction.atomic():
            deleted_count, _ = User.objects.filter(is_staff=False).delete()

        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted_count} rows for non-staff users and related data."))

from django.core.management.base import BaseCommand
from django.db import transaction
from social.models import User

class Command(BaseCommand):
    """
    Management command to remove (unseed) user data from the database.

    Deletes all non-staff users. Their posts, comments, likes, saves,
    messages, follow edges and tokens go with them through cascading
    foreign keys, leaving administrative accounts in place.
    """

    help = 'Removes seeded sample data'

    def handle(self, *args, **options):
        """Delete every non-staff user and report how many accounts and rows went."""
        with transaction.atomic():
            users = User.objects.filter(is_staff=False)
            user_count = users.count()
            row_count, _ = users.delete()

        self.stdout.write(self.style.SUCCESS(
            f"Deleted {user_count} non-staff users ({row_count} rows including related data)."
        ))

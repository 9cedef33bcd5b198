"""Management command to seed the database with sample users, posts, and related data."""

from random import randint, sample

from faker import Faker
from django.core.management.base import BaseCommand
from django.db import IntegrityError, transaction

from social.models import User, Follower, Post, Comment, Message
from .seed_data import DEFAULT_PASSWORD, user_fixtures
from .seed_utils import SeedHelpers, create_email


class Command(SeedHelpers, BaseCommand):
    """Management command to seed the database with sample users/posts/data."""
    USER_COUNT = 30
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Total users to reach.")
        parser.add_argument("--posts-per-user", type=int, default=2)

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        self.generate_user_fixtures()
        self.generate_random_users(options["users"])
        self.seed_followers(follow_k=5)
        self.seed_posts(per_user=options["posts_per_user"])
        self.seed_likes(max_likes_per_post=10)
        self.seed_comments(max_comments_per_post=4)
        self.seed_messages()
        self.stdout.write(self.style.SUCCESS("Seeding complete"))
        self.stdout.write(f"Test accounts use password: {DEFAULT_PASSWORD}")

    def generate_user_fixtures(self):
        """Create users from predefined fixture data, skipping existing emails."""
        for data in user_fixtures:
            if User.objects.filter(email=data["email"]).exists():
                self.stdout.write(f"User already exists: {data['email']}")
                continue
            self.create_user(data)

    def generate_random_users(self, target):
        """Create random users until `target` is reached."""
        attempts = 0
        while User.objects.filter(is_staff=False).count() < target and attempts < target * 3:
            attempts += 1
            name = self.faker.name()[:50]
            self.try_create_user({"name": name, "email": create_email(name, randint(1, 9999))})

    def try_create_user(self, data):
        """Try to create a user; skip duplicate emails."""
        try:
            with transaction.atomic():
                return self.create_user(data)
        except IntegrityError:
            return None

    def create_user(self, data):
        return User.objects.create_user(
            email=data["email"],
            password=DEFAULT_PASSWORD,
            name=data["name"],
            avatar=data.get("avatar", ""),
            bio=data.get("bio", self.faker.sentence(nb_words=6)[:200]),
        )

    def seeded_user_ids(self):
        """Ids of the non-staff accounts that seeding populates and unseed removes."""
        return list(User.objects.filter(is_staff=False).values_list("id", flat=True))

    def seed_followers(self, follow_k: int = 5) -> None:
        """Create follower edges for sample users."""
        ids = self.seeded_user_ids()
        if len(ids) < 2:
            return
        rows = self._build_follow_edges(ids, follow_k)
        with transaction.atomic():
            Follower.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"follow edges created (attempted): {len(rows)}")

    def seed_posts(self, *, per_user: int = 2) -> None:
        """Generate posts for every seeded user."""
        user_ids = self.seeded_user_ids()
        rows = [self._build_post(author_id) for author_id in user_ids for _ in range(per_user)]
        with transaction.atomic():
            Post.objects.bulk_create(rows, batch_size=500)
        self.stdout.write(f"posts created: {len(rows)}")

    def seed_likes(self, max_likes_per_post: int = 10) -> None:
        """Create random likes for posts up to a max per post."""
        users = self.seeded_user_ids()
        through = Post.likes.through
        rows = []
        for post_id in Post.objects.filter(author__is_staff=False).values_list("id", flat=True):
            for user_id in sample(users, min(len(users), randint(0, max_likes_per_post))):
                rows.append(through(post_id=post_id, user_id=user_id))
        with transaction.atomic():
            through.objects.bulk_create(rows, ignore_conflicts=True, batch_size=1000)
        self.stdout.write(f"likes created: {len(rows)}")

    def seed_comments(self, max_comments_per_post: int = 4) -> None:
        """Generate random comments for each post."""
        users = self.seeded_user_ids()
        rows = []
        for post_id in Post.objects.filter(author__is_staff=False).values_list("id", flat=True):
            rows.extend(self._build_comments(post_id, users, max_comments_per_post))
        with transaction.atomic():
            Comment.objects.bulk_create(rows, batch_size=1000)
        self.stdout.write(f"comments created: {len(rows)}")

    def seed_messages(self) -> None:
        """Start a short conversation between each pair of fixture users."""
        emails = [data["email"] for data in user_fixtures]
        ids = list(User.objects.filter(email__in=emails, is_staff=False).order_by("id").values_list("id", flat=True))
        rows = []
        for a, b in zip(ids, ids[1:]):
            rows.extend(self._build_messages(a, b, count=4))
        with transaction.atomic():
            Message.objects.bulk_create(rows, batch_size=1000)
        self.stdout.write(f"messages created: {len(rows)}")

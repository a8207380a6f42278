"""Management command to seed the database with sample users, profiles, posts and interactions."""

from random import choice, randint, sample

from django.core.management.base import BaseCommand
from faker import Faker

from network.exceptions import NetworkError
from network.services import CommentService, FollowService, LikeService, PostService, ProfileService, UserService

TECH_TAGS = [
    "python", "django", "react", "node", "postgres", "docker",
    "typescript", "graphql", "redis", "aws", "vue", "go",
]


class Command(BaseCommand):
    """Seed sample data through the services so every stored row is valid."""
    USER_COUNT = 30
    DEFAULT_PASSWORD = 'Password123'
    help = 'Seeds the database with sample data'

    def add_arguments(self, parser):
        parser.add_argument("--users", type=int, default=self.USER_COUNT, help="Number of users to create.")
        parser.add_argument("--follows", type=int, default=5, help="Follow edges per user.")

    def __init__(self, *args, **kwargs):
        """Set up faker instance for generating seed content."""
        super().__init__(*args, **kwargs)
        self.faker = Faker('en_GB')

    def handle(self, *args, **options):
        """Run the full seeding sequence."""
        users = self.create_users(options["users"])
        self.create_profiles(users)
        self.seed_follows(users, options["follows"])
        posts = self.seed_posts(users, per_user=2)
        self.seed_likes(users, posts, max_likes_per_post=10)
        self.seed_comments(users, posts, max_comments_per_post=4)
        self.stdout.write(self.style.SUCCESS("Seeding complete"))

    def create_users(self, count):
        """Create `count` random users, skipping email collisions."""
        service = UserService()
        users = []
        for _ in range(count):
            try:
                users.append(service.create_user(
                    name=self.faker.name(),
                    email=self.faker.unique.email(),
                    password=self.DEFAULT_PASSWORD,
                ))
            except NetworkError as exc:
                self.stderr.write(f"Skipped user: {exc.message}")
        self.stdout.write(f"Created {len(users)} users")
        return users

    def create_profiles(self, users):
        service = ProfileService()
        for user in users:
            service.upsert_profile(user.id, {
                "bio": self.faker.sentence(nb_words=12),
                "skills": ", ".join(sample(TECH_TAGS, randint(2, 5))),
                "location": self.faker.city(),
                "website": self.faker.url(),
                "github_username": self.faker.user_name(),
            })

    def seed_follows(self, users, per_user):
        """Create up to `per_user` follow edges from each user to random others."""
        service = FollowService()
        for user in users:
            others = [u for u in users if u.id != user.id]
            for followee in sample(others, min(per_user, len(others))):
                try:
                    service.follow(user.id, followee.id)
                except NetworkError:
                    continue

    def seed_posts(self, users, per_user):
        service = PostService()
        posts = []
        for user in users:
            for _ in range(per_user):
                posts.append(service.create_post(user.id, {
                    "title": self.faker.catch_phrase(),
                    "description": self.faker.paragraph(nb_sentences=3),
                    "tech_tags": ", ".join(sample(TECH_TAGS, randint(1, 4))),
                    "website_url": self.faker.url(),
                    "repo_url": f"https://github.com/{self.faker.user_name()}/{self.faker.slug()}",
                }))
        return posts

    def seed_likes(self, users, posts, max_likes_per_post):
        service = LikeService()
        for post in posts:
            for user in sample(users, min(randint(0, max_likes_per_post), len(users))):
                service.like_post(post.id, user.id)

    def seed_comments(self, users, posts, max_comments_per_post):
        service = CommentService()
        for post in posts:
            for _ in range(randint(0, max_comments_per_post)):
                service.add_comment(post.id, choice(users).id, self.faker.sentence())

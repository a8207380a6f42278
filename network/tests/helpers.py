import uuid
from datetime import timedelta

from django.utils import timezone

from network.models import Post, Profile, User
from network.repos import FollowRepo


def make_user(**kwargs):
    name = kwargs.pop("name", "John Doe")
    email = kwargs.pop(
        "email",
        f"{name.split()[0].lower()}_{uuid.uuid4().hex[:6]}@example.org"
    )
    password = kwargs.pop("password", "Password123")

    return User.objects.create_user(
        username=kwargs.pop("username", email),
        email=email,
        password=password,
        name=name,
        **kwargs,
    )


def make_profile(user=None, **extra):
    """Create and return a profile for user (a fresh user when omitted)."""
    if user is None:
        user = make_user()
    return Profile.objects.create(
        user=user,
        bio=extra.pop("bio", "Test bio"),
        skills=extra.pop("skills", ["python", "django"]),
        **extra,
    )


def make_post(*, author=None, title="test post", minutes_ago=None, **extra):
    """
    creates and returns a post. minutes_ago backdates the post so tests can
    control newest-first ordering.
    """
    if author is None:
        author = make_user()
    post = Post.objects.create(
        user=author,
        title=title,
        description=extra.pop("description", "desc"),
        tech_tags=extra.pop("tech_tags", ["python"]),
        website_url=extra.pop("website_url", "https://example.org"),
        **extra,
    )
    if minutes_ago is not None:
        post.date = timezone.now() - timedelta(minutes=minutes_ago)
        Post.objects.filter(id=post.id).update(date=post.date)
    return post


def make_follow(follower_profile, followee_profile):
    """Write both records of one follow edge directly."""
    FollowRepo().add_edge(profile_id=follower_profile.id, followee_id=followee_profile.id)

"""Read-only helpers for follower/following queries."""

from network.exceptions import NotFound
from network.models import Profile
from network.repos import FollowRepo

from .storage import storage_guard


class FollowReadService:
    """Provide query helpers for follow relationships."""

    def __init__(self, follow_repo: FollowRepo | None = None) -> None:
        self.follow_repo = follow_repo or FollowRepo()

    def _require(self, profile_id):
        if not Profile.objects.filter(id=profile_id).exists():
            raise NotFound("Profile not found")

    @storage_guard
    def list_following(self, profile_id):
        """Return profiles the given profile follows, with user name/avatar."""
        self._require(profile_id)
        return list(self.follow_repo.following_profiles(profile_id))

    @storage_guard
    def list_followers(self, profile_id):
        """Return profiles following the given profile, with user name/avatar."""
        self._require(profile_id)
        return list(self.follow_repo.follower_profiles(profile_id))

    @storage_guard
    def counts(self, profile_id):
        """Return follower/following counts straight from the edge tables."""
        return {
            "followers": self.follow_repo.follower_count(profile_id),
            "following": self.follow_repo.following_count(profile_id),
        }

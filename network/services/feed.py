"""Feed service: posts from everyone a user follows."""

import logging
from typing import List

from network.models import Post, Profile
from network.repos import FollowRepo, PostRepo

from .storage import storage_guard

logger = logging.getLogger(__name__)


class FeedService:
    """Build the personalised following feed."""

    def __init__(self, *, follow_repo: FollowRepo | None = None, post_repo: PostRepo | None = None) -> None:
        self.follow_repo = follow_repo or FollowRepo()
        self.post_repo = post_repo or PostRepo()

    @storage_guard
    def get_feed(self, user_id) -> List[Post]:
        """
        Return posts authored by the users this user follows, newest first.

        A user with no profile, or whose profile follows nobody, gets an
        empty feed rather than an error.
        """
        profile_id = (
            Profile.objects.filter(user_id=user_id).values_list("id", flat=True).first()
        )
        if profile_id is None:
            return []

        followee_ids = self.follow_repo.followee_user_ids(profile_id)
        if not followee_ids:
            return []

        logger.debug("Feed for user %s spans %d followed authors", user_id, len(followee_ids))
        posts = self.post_repo.list_with_author(author_ids=followee_ids)
        return self._unique(posts)

    def _unique(self, posts) -> List[Post]:
        """Drop repeated posts, keeping the first (newest-ordered) occurrence."""
        seen = set()
        result = []
        for post in posts:
            if post.id in seen:
                continue
            seen.add(post.id)
            result.append(post)
        return result

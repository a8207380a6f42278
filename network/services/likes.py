"""Like / unlike a post."""

import logging

from django.db import IntegrityError, transaction

from network.exceptions import Conflict, NotFound
from network.models import Like, Post

from .storage import storage_guard

logger = logging.getLogger(__name__)


class LikeService:
    """Maintain the (post, user) like set.

    A second like is rejected with Conflict rather than ignored, and so is
    an unlike without a prior like.
    """

    def likers(self, post_id):
        """Users who liked the post, in like order."""
        return [
            like.user
            for like in Like.objects.filter(post_id=post_id).select_related("user").order_by("id")
        ]

    def _require_post(self, post_id):
        if not Post.objects.filter(id=post_id).exists():
            raise NotFound("Post not found")

    @storage_guard
    def like_post(self, post_id, user_id):
        """Add user_id to the post's likers and return the updated likers."""
        try:
            with transaction.atomic():
                self._require_post(post_id)
                if Like.objects.filter(post_id=post_id, user_id=user_id).exists():
                    raise Conflict("Post already liked")
                Like.objects.create(post_id=post_id, user_id=user_id)
        except IntegrityError as exc:
            raise Conflict("Post already liked") from exc
        logger.debug("User %s liked post %s", user_id, post_id)
        return self.likers(post_id)

    @storage_guard
    def unlike_post(self, post_id, user_id):
        """Remove user_id from the post's likers and return the updated likers."""
        with transaction.atomic():
            self._require_post(post_id)
            removed, _ = Like.objects.filter(post_id=post_id, user_id=user_id).delete()
            if not removed:
                raise Conflict("Post has not been liked yet")
        logger.debug("User %s unliked post %s", user_id, post_id)
        return self.likers(post_id)

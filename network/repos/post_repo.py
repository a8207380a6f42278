"""Repository helpers for fetching posts with their author projection."""

from typing import Iterable, Optional

from django.db.models import Prefetch, QuerySet

from network.db_accessor import DB_Accessor
from network.models import Comment, Like, Post

NEWEST_FIRST = ("-date", "-id")


class PostRepo(DB_Accessor):
    """Repository for Post queries (listing, per-author, feed, detail)."""
    def __init__(self) -> None:
        """Initialise with the Post model."""
        super().__init__(Post)

    def list_with_author(self, *, author_ids: Optional[Iterable] = None) -> QuerySet:
        """Return posts joined with their author, newest first."""
        filters = {}
        if author_ids is not None:
            filters["user_id__in"] = list(author_ids)
        return self.query(
            filters=filters,
            select_related=("user",),
            order_by=NEWEST_FIRST,
        )

    def list_for_author(self, author_id) -> QuerySet:
        """Return posts authored by a given user."""
        return self.query(
            filters={"user_id": author_id},
            select_related=("user",),
            order_by=NEWEST_FIRST,
        )

    def get_detail(self, post_id) -> Optional[Post]:
        """Return one post with author, comments and likers loaded."""
        return self.query(
            filters={"id": post_id},
            select_related=("user",),
            prefetch_related=(
                Prefetch("comments", queryset=Comment.objects.order_by("-date")),
                Prefetch("likes", queryset=Like.objects.select_related("user").order_by("id")),
            ),
        ).first()

    def lock(self, post_id) -> Optional[Post]:
        """Return the post row locked for update; call inside a transaction."""
        return self.model.objects.select_for_update().filter(id=post_id).first()

"""Model representing a user's like on a post."""

from django.conf import settings
from django.db import models
from .post import Post


class Like(models.Model):
    """Membership fact: `user` likes `post`."""
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='likes'
    )

    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        db_column='post_id',
        related_name='likes'
    )

    class Meta:
        """Enforce one like per user/post pair."""
        db_table = "like"
        constraints = [
            models.UniqueConstraint(fields=["post", "user"], name="uniq_like_post_user"),
        ]

    def __str__(self):
        return f"{self.user_id} → {self.post_id}"

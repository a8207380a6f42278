"""Model for user comments on posts."""

import uuid
from django.conf import settings
from django.db import models
from .post import Post


class Comment(models.Model):
    """Comment with a snapshot of its author's name and avatar."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # FK → post.id
    post = models.ForeignKey(
        Post,
        on_delete=models.CASCADE,
        db_column='post_id',
        related_name='comments'
    )

    # FK → user.id (author identity; name/avatar below are copies)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        db_column='user_id',
        related_name='comments'
    )

    # copied from the author when the comment is written, never refreshed
    name = models.CharField(max_length=100)
    avatar = models.CharField(max_length=500, blank=True)

    text = models.TextField()

    date = models.DateTimeField(auto_now_add=True)

    class Meta:
        """DB table name and default ordering for comments."""
        db_table = "comment"
        ordering = ['-date']

    def __str__(self):
        return f"Comment by {self.user_id} on {self.post_id}"

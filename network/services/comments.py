"""Service helpers for creating and deleting comments."""

import logging

from django.db import transaction

from network.exceptions import NotFound, Unauthorized, ValidationError
from network.models import Comment, Post
from network.repos import UserRepo
from network.utils import field_error

from .storage import storage_guard

logger = logging.getLogger(__name__)


class CommentService:
    """Encapsulate comment create/delete for posts."""

    def __init__(self, user_repo: UserRepo | None = None) -> None:
        self.user_repo = user_repo or UserRepo()

    def comments_for(self, post_id):
        """Return the post's comments, newest first."""
        return list(Comment.objects.filter(post_id=post_id).order_by("-date", "-id"))

    @storage_guard
    def add_comment(self, post_id, author_id, text):
        """
        Add a comment and return the post's comment list.

        The author's name and avatar are copied onto the comment now; later
        profile changes do not rewrite old comments.
        """
        text = (text or "").strip()
        if not text:
            raise ValidationError.from_fields([field_error("text", "Comment text is required")])

        with transaction.atomic():
            if not Post.objects.filter(id=post_id).exists():
                raise NotFound("Post not found")
            author = self.user_repo.get_by_id(author_id)
            if author is None:
                raise NotFound("User not found")
            Comment.objects.create(
                post_id=post_id,
                user=author,
                name=author.name,
                avatar=author.avatar,
                text=text,
            )
        logger.debug("User %s commented on post %s", author_id, post_id)
        return self.comments_for(post_id)

    @storage_guard
    def delete_comment(self, comment_id, requester_id, post_id=None):
        """
        Delete the requester's own comment and return what is left on the post.

        When post_id is given the comment must belong to that post.
        """
        with transaction.atomic():
            comment = Comment.objects.select_for_update().filter(id=comment_id).first()
            if comment is None or (post_id is not None and str(comment.post_id) != str(post_id)):
                raise NotFound("Comment does not exist")
            if str(comment.user_id) != str(requester_id):
                raise Unauthorized("Unauthorized")
            post_id = comment.post_id
            comment.delete()
        logger.debug("User %s deleted comment %s", requester_id, comment_id)
        return self.comments_for(post_id)

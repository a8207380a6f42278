"""Service helpers for post creation, reads and deletion."""

import logging

from django.db import transaction

from network.exceptions import NotFound, Unauthorized, ValidationError
from network.repos import PostRepo, UserRepo
from network.utils import field_error, is_valid_url, split_comma_list

from .storage import storage_guard

logger = logging.getLogger(__name__)


class PostService:
    """Encapsulate the post store: create, read, list and delete."""

    def __init__(self, post_repo: PostRepo | None = None, user_repo: UserRepo | None = None) -> None:
        self.post_repo = post_repo or PostRepo()
        self.user_repo = user_repo or UserRepo()

    def parse_tags(self, raw):
        """Split the comma-separated tag input into trimmed, non-empty tags."""
        return split_comma_list(raw)

    def build_fields(self, data, images=None):
        """
        Validate raw post input and return model field values.

        Every violated field is reported, not just the first one.
        """
        title = (data.get("title") or "").strip()
        tags = self.parse_tags(data.get("tech_tags", data.get("techTags")))
        website_url = (data.get("website_url") or data.get("websiteUrl") or "").strip()
        repo_url = (data.get("repo_url") or data.get("repoUrl") or "").strip()

        errors = []
        if not title:
            errors.append(field_error("title", "Title is required"))
        if not tags:
            errors.append(field_error("tech_tags", "Atleast 1 tag is required"))
        if not website_url:
            errors.append(field_error("website_url", "Website URL is required"))
        elif not is_valid_url(website_url):
            errors.append(field_error("website_url", "Enter a valid URL"))
        if repo_url and not is_valid_url(repo_url):
            errors.append(field_error("repo_url", "Enter a valid repository URL"))
        if errors:
            raise ValidationError.from_fields(errors)

        return {
            "title": title,
            "description": (data.get("description") or "").strip(),
            "tech_tags": tags,
            "website_url": website_url,
            "repo_url": repo_url,
            "images": [str(ref) for ref in (images or []) if ref],
        }

    @storage_guard
    def create_post(self, author_id, data, images=None):
        """Create a post for author_id; `images` are references from the upload step."""
        fields = self.build_fields(data, images)
        if not self.user_repo.exists(id=author_id):
            raise NotFound("User not found")
        with transaction.atomic():
            post = self.post_repo.create(user_id=author_id, **fields)
        logger.info("User %s created post %s", author_id, post.id)
        return self.post_repo.list_with_author().get(id=post.id)

    @storage_guard
    def get_post(self, post_id):
        """Return a post with author, comments and likers; NotFound if absent."""
        post = self.post_repo.get_detail(post_id)
        if post is None:
            raise NotFound("Post not found")
        return post

    @storage_guard
    def list_posts(self):
        """Return every post joined with its author, newest first."""
        return list(self.post_repo.list_with_author())

    @storage_guard
    def list_posts_by_author(self, author_id):
        """
        Return the author's posts, newest first.

        An unknown author raises NotFound; a known author without posts
        yields an empty list so the caller can tell the two apart.
        """
        if not self.user_repo.exists(id=author_id):
            raise NotFound("User not found")
        return list(self.post_repo.list_for_author(author_id))

    @storage_guard
    def delete_post(self, post_id, requester_id):
        """Delete a post owned by requester_id, with its comments and likes."""
        with transaction.atomic():
            post = self.post_repo.lock(post_id)
            if post is None:
                raise NotFound("Post not found")
            if str(post.user_id) != str(requester_id):
                logger.warning("User %s tried to delete post %s owned by %s",
                               requester_id, post_id, post.user_id)
                raise Unauthorized("Unauthorized")
            post.delete()
        logger.info("User %s deleted post %s", requester_id, post_id)
        return {"msg": "Post deleted"}

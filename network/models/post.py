import uuid
from django.conf import settings
from django.db import models

"""
Post model

A post is a project a user shows off: a title, an optional description,
the image references handed over by the upload step, the technology tags
and the links to the live site and (optionally) the repository.

- `user` is the author and never changes after creation.
- `images` keeps the upload order; it may be empty.
- `tech_tags` is the trimmed, de-duplicated tag list parsed from the
  comma-separated input (see PostService).
- `date` is set once on insert and drives every newest-first listing.

Comments and likes hang off the post with on_delete=CASCADE, so deleting
a post inside a transaction removes them in the same unit of work.
"""


class Post(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='posts',
        db_column='user_id'
    )

    title = models.CharField(max_length=255)   # required
    description = models.TextField(blank=True, default="")

    # images / tech_tags: stored as JSON (string array)
    images = models.JSONField(default=list, blank=True)
    tech_tags = models.JSONField(default=list)

    website_url = models.URLField(max_length=500)
    repo_url = models.URLField(max_length=500, blank=True, default="")

    date = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'post'
        ordering = ['-date']

    def __str__(self):
        return self.title

    @property
    def likes_count(self):
        return self.likes.count()

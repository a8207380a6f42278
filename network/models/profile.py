"""Profile model: the one-to-one extension of a user."""

import uuid
from django.conf import settings
from django.db import models


class Profile(models.Model):
    """Developer profile; follow edges connect profiles, not users."""
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # unique=True keeps the relation 1:1 at the database level
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='profile',
        db_column='user_id',
    )

    bio = models.TextField()
    website = models.CharField(max_length=255, blank=True, default="")
    location = models.CharField(max_length=255, blank=True, default="")

    # skills: JSON string array
    skills = models.JSONField(default=list, blank=True)

    github_username = models.CharField(max_length=100, blank=True, default="")

    # social: {"twitter": "...", "github": "..."}
    social = models.JSONField(default=dict, blank=True)

    date = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'profile'

    def __str__(self):
        return f"Profile({self.user_id})"

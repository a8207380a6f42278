"""Custom user model holding the display name and avatar reference."""

from django.contrib.auth.models import AbstractUser
from django.db import models
from libgravatar import Gravatar


class User(AbstractUser):
    """Account record; everything else refers to it by id."""

    name = models.CharField(max_length=100, blank=False)
    email = models.EmailField(unique=True, blank=False)
    avatar = models.CharField(max_length=500, blank=True)

    class Meta:
        """Default ordering for users."""
        ordering = ['name', 'id']

    def __str__(self):
        return self.name or self.username

    def gravatar(self, size=200):
        """Return gravatar URL for the user's email."""
        gravatar_object = Gravatar(self.email)
        return gravatar_object.get_image(size=size, default='mm')

    def save(self, *args, **kwargs):
        """Fill in a gravatar avatar when none was supplied."""
        if not self.avatar and self.email:
            self.avatar = self.gravatar()
        super().save(*args, **kwargs)

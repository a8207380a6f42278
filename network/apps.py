from django.apps import AppConfig


class NetworkConfig(AppConfig):
    """Django app config for the social graph, posts and feed."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'network'
    verbose_name = 'Showcase network'

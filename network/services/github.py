"""GitHub repository listing behind a short-lived cache."""

import logging
from urllib.parse import quote

import requests
from django.conf import settings
from django.core.cache import cache as default_cache

from network.exceptions import NotFound

logger = logging.getLogger(__name__)


class GithubRepoService:
    """
    Fetch a user's latest public repositories from the GitHub API.

    Results are cached for GITHUB_CACHE_SECONDS. The cache write uses
    `cache.add`, which only stores a value when the key is absent, so the
    first response written inside the window is the one everybody sees.
    """

    def __init__(self, *, cache=None, session=None, timeout: float = 8) -> None:
        self.cache = cache or default_cache
        self.session = session or requests.Session()
        self.timeout = timeout

    def cache_key(self, username: str) -> str:
        return f"github-{username}-profile"

    def repos_for(self, username: str):
        """Return a list of repository summaries, or raise NotFound."""
        key = self.cache_key(username)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("using cache: github api | username: %s", username)
            return cached

        repos = self._fetch(username)
        self.cache.add(key, repos, timeout=settings.GITHUB_CACHE_SECONDS)
        logger.debug("set cache: github api | username: %s", username)
        return repos

    def _fetch(self, username: str):
        url = f"{settings.GITHUB_API_URL}/users/{quote(username)}/repos"
        params = {"per_page": settings.GITHUB_REPO_COUNT, "sort": "created:asc"}
        headers = {"User-Agent": "showcase"}
        if settings.GITHUB_TOKEN:
            headers["Authorization"] = f"token {settings.GITHUB_TOKEN}"
        try:
            resp = self.session.get(url, params=params, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("[github] request failed for %s: %s", username, exc)
            raise NotFound("No GitHub profile") from exc
        if resp.status_code != 200:
            logger.warning("[github] Non-200 for %s: %s", username, resp.status_code)
            raise NotFound("No GitHub profile")
        data = resp.json()
        if not isinstance(data, list):
            raise NotFound("No GitHub profile")
        return data

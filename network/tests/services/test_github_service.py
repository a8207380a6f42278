from unittest.mock import MagicMock

import requests
from django.core.cache import cache
from django.test import TestCase, override_settings

from network.exceptions import NotFound
from network.services import GithubRepoService


@override_settings(GITHUB_API_URL="https://api.github.test", GITHUB_TOKEN="", GITHUB_REPO_COUNT=5)
class GithubRepoServiceTestCase(TestCase):
    def setUp(self):
        cache.clear()
        self.session = MagicMock()
        self.service = GithubRepoService(session=self.session)

    def _response(self, status_code=200, body=None):
        resp = MagicMock()
        resp.status_code = status_code
        resp.json.return_value = body
        return resp

    def test_fetches_and_caches_repos(self):
        self.session.get.return_value = self._response(body=[{"name": "site"}])

        self.assertEqual(self.service.repos_for("alice"), [{"name": "site"}])
        self.assertEqual(self.service.repos_for("alice"), [{"name": "site"}])

        self.session.get.assert_called_once()
        args, kwargs = self.session.get.call_args
        self.assertEqual(args[0], "https://api.github.test/users/alice/repos")
        self.assertEqual(kwargs["params"], {"per_page": 5, "sort": "created:asc"})
        self.assertEqual(cache.get("github-alice-profile"), [{"name": "site"}])

    def test_cached_value_is_served_without_a_request(self):
        cache.add("github-alice-profile", [{"name": "first"}], timeout=180)
        self.assertEqual(self.service.repos_for("alice"), [{"name": "first"}])
        self.session.get.assert_not_called()

    @override_settings(GITHUB_CACHE_SECONDS=180)
    def test_cache_write_only_adds(self):
        fake_cache = MagicMock()
        fake_cache.get.return_value = None
        self.session.get.return_value = self._response(body=[{"name": "site"}])
        GithubRepoService(cache=fake_cache, session=self.session).repos_for("alice")
        fake_cache.add.assert_called_once_with("github-alice-profile", [{"name": "site"}], timeout=180)
        fake_cache.set.assert_not_called()

    def test_non_200_is_not_found(self):
        self.session.get.return_value = self._response(status_code=404, body={"message": "Not Found"})
        with self.assertRaises(NotFound):
            self.service.repos_for("ghost")
        self.assertIsNone(cache.get("github-ghost-profile"))

    def test_network_error_is_not_found(self):
        self.session.get.side_effect = requests.ConnectionError("down")
        with self.assertRaises(NotFound):
            self.service.repos_for("alice")

    @override_settings(GITHUB_TOKEN="abc")
    def test_token_is_sent(self):
        self.session.get.return_value = self._response(body=[])
        self.service.repos_for("alice")
        headers = self.session.get.call_args.kwargs["headers"]
        self.assertEqual(headers["Authorization"], "token abc")

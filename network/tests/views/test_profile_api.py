from unittest.mock import patch

from django.db import connection
from django.test import TestCase
from django.test.utils import CaptureQueriesContext
from django.urls import reverse
from rest_framework.test import APIClient

from network.exceptions import NotFound
from network.models import User
from network.tests.helpers import make_follow, make_profile, make_user


class ProfileApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.alice = make_user(name="Alice Smith")
        self.bob = make_user(name="Bob Jones")
        self.client.force_authenticate(user=self.alice)

    def test_upsert_and_read_own_profile(self):
        response = self.client.post(reverse("profiles"), {"bio": "Dev", "skills": "python, go"}, format="json")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["skills"], ["python", "go"])

        response = self.client.get(reverse("my_profile"))
        data = response.json()
        self.assertEqual(data["user"]["name"], "Alice Smith")
        self.assertEqual(data["counts"], {"followers": 0, "following": 0})

    def test_my_profile_missing(self):
        response = self.client.get(reverse("my_profile"))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"msg": "There is no profile for this user"})

    def test_profile_list_is_public(self):
        make_profile(self.bob)
        response = APIClient().get(reverse("profiles"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.json()), 1)

    def test_profile_list_query_count_does_not_grow_with_profiles(self):
        bob_profile = make_profile(self.bob)
        with CaptureQueriesContext(connection) as one_profile:
            APIClient().get(reverse("profiles"))

        alice_profile = make_profile(self.alice)
        cara_profile = make_profile(make_user(name="Cara Lee"))
        make_follow(alice_profile, bob_profile)
        make_follow(cara_profile, bob_profile)
        make_follow(bob_profile, alice_profile)
        with CaptureQueriesContext(connection) as three_profiles:
            response = APIClient().get(reverse("profiles"))

        self.assertEqual(len(three_profiles), len(one_profile))
        bob = next(p for p in response.json() if p["id"] == str(bob_profile.id))
        self.assertEqual(bob["counts"], {"followers": 2, "following": 1})
        self.assertCountEqual([p["user"]["name"] for p in bob["followers"]], ["Alice Smith", "Cara Lee"])

    def test_upsert_requires_authentication(self):
        response = APIClient().post(reverse("profiles"), {"bio": "x", "skills": "y"}, format="json")
        self.assertEqual(response.status_code, 401)

    def test_delete_account(self):
        make_profile(self.alice)
        response = self.client.delete(reverse("profiles"))
        self.assertEqual(response.status_code, 200)
        self.assertFalse(User.objects.filter(id=self.alice.id).exists())

    def test_follow_self_is_bad_request(self):
        make_profile(self.alice)
        response = self.client.put(reverse("follow", args=[self.alice.id]))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"msg": "You cannot follow yourself"})

    def test_follow_unknown_profile(self):
        make_profile(self.alice)
        response = self.client.put(reverse("follow", args=[self.bob.id]))
        self.assertEqual(response.status_code, 404)

    def test_followers_and_following_lists(self):
        alice_profile = make_profile(self.alice)
        bob_profile = make_profile(self.bob)
        self.client.put(reverse("follow", args=[self.bob.id]))

        following = self.client.get(reverse("profile_following", args=[alice_profile.id])).json()
        followers = self.client.get(reverse("profile_followers", args=[bob_profile.id])).json()
        self.assertEqual([p["user"]["name"] for p in following], ["Bob Jones"])
        self.assertEqual([p["user"]["name"] for p in followers], ["Alice Smith"])

    @patch("network.views.profile_api.GithubRepoService.repos_for")
    def test_github_repos(self, mock_repos):
        mock_repos.return_value = [{"name": "site"}]
        response = APIClient().get(reverse("github_repos", args=["alice"]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [{"name": "site"}])

    @patch("network.views.profile_api.GithubRepoService.repos_for", side_effect=NotFound("No GitHub profile"))
    def test_github_repos_missing(self, _mock):
        response = APIClient().get(reverse("github_repos", args=["ghost"]))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"msg": "No GitHub profile"})

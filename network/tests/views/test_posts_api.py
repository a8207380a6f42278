from django.test import TestCase
from django.urls import reverse
from rest_framework.test import APIClient

from network.models import Post
from network.tests.helpers import make_post, make_user


class PostsApiTestCase(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.alice = make_user(name="Alice Smith")
        self.bob = make_user(name="Bob Jones")
        self.client.force_authenticate(user=self.alice)

    def test_posts_require_authentication(self):
        response = APIClient().get(reverse("posts"))
        self.assertEqual(response.status_code, 401)

    def test_create_post(self):
        response = self.client.post(reverse("posts"), {
            "title": "Portfolio",
            "tech_tags": "react, node",
            "website_url": "https://alice.dev",
            "images": ["img/one.png"],
        }, format="json")
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["tech_tags"], ["react", "node"])
        self.assertEqual(data["images"], ["img/one.png"])
        self.assertEqual(data["user"]["name"], "Alice Smith")

    def test_create_post_validation_errors(self):
        response = self.client.post(reverse("posts"), {"title": ""}, format="json")
        self.assertEqual(response.status_code, 400)
        params = [err["param"] for err in response.json()["errors"]]
        self.assertIn("title", params)
        self.assertIn("tech_tags", params)

    def test_post_detail_and_missing(self):
        post = make_post(author=self.bob)
        response = self.client.get(reverse("post_detail", args=[post.id]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["comments"], [])
        self.assertEqual(response.json()["likes"], [])

        post_id = post.id
        post.delete()
        response = self.client.get(reverse("post_detail", args=[post_id]))
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"msg": "Post not found"})

    def test_delete_someone_elses_post(self):
        post = make_post(author=self.bob)
        response = self.client.delete(reverse("post_detail", args=[post.id]))
        self.assertEqual(response.status_code, 401)
        self.assertTrue(Post.objects.filter(id=post.id).exists())

    def test_posts_by_user(self):
        make_post(author=self.bob, title="bob's")
        response = self.client.get(reverse("posts_by_user", args=[self.bob.id]))
        self.assertEqual([p["title"] for p in response.json()], ["bob's"])
        response = self.client.get(reverse("posts_by_user", args=[self.alice.id]))
        self.assertEqual(response.json(), [])

    def test_like_twice_conflicts(self):
        post = make_post(author=self.bob)
        url = reverse("like_post", args=[post.id])
        response = self.client.put(url)
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [{"id": self.alice.id, "name": "Alice Smith", "avatar": self.alice.avatar}])
        response = self.client.put(url)
        self.assertEqual(response.status_code, 409)
        self.assertEqual(response.json(), {"msg": "Post already liked"})

    def test_comment_and_delete(self):
        post = make_post(author=self.bob)
        response = self.client.post(reverse("add_comment", args=[post.id]), {"text": "Great"}, format="json")
        self.assertEqual(response.status_code, 200)
        comment = response.json()[0]
        self.assertEqual(comment["name"], "Alice Smith")

        response = self.client.delete(reverse("delete_comment", args=[post.id, comment["id"]]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [])

    def test_delete_comment_under_wrong_post(self):
        post = make_post(author=self.bob)
        other_post = make_post(author=self.bob)
        comment = self.client.post(
            reverse("add_comment", args=[post.id]), {"text": "Great"}, format="json"
        ).json()[0]

        response = self.client.delete(reverse("delete_comment", args=[other_post.id, comment["id"]]))

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {"msg": "Comment does not exist"})
        self.assertEqual(len(self.client.get(reverse("post_detail", args=[post.id])).json()["comments"]), 1)

from django.test import TestCase

from network.repos import UserRepo
from network.tests.helpers import make_user


class UserRepoTestCase(TestCase):
    def setUp(self):
        self.repo = UserRepo()
        self.user = make_user(email="Alice@Example.org")

    def test_get_by_id(self):
        self.assertEqual(self.repo.get_by_id(self.user.id), self.user)
        self.assertIsNone(self.repo.get_by_id(self.user.id + 1000))

    def test_email_lookup_ignores_case(self):
        self.assertEqual(self.repo.get_by_email("alice@example.org"), self.user)
        self.assertTrue(self.repo.email_taken("ALICE@example.org"))
        self.assertFalse(self.repo.email_taken("bob@example.org"))

from django.db import IntegrityError, transaction
from django.test import TestCase

from network.models import Follower, Following
from network.tests.helpers import make_follow, make_profile


class FollowEdgeModelTestCase(TestCase):
    def setUp(self):
        self.alice = make_profile()
        self.bob = make_profile()

    def test_edge_pair_is_stored_in_both_tables(self):
        make_follow(self.alice, self.bob)
        self.assertTrue(Following.objects.filter(profile=self.alice, following=self.bob).exists())
        self.assertTrue(Follower.objects.filter(profile=self.bob, follower=self.alice).exists())

    def test_duplicate_following_row_rejected(self):
        Following.objects.create(profile=self.alice, following=self.bob)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Following.objects.create(profile=self.alice, following=self.bob)

    def test_duplicate_follower_row_rejected(self):
        Follower.objects.create(profile=self.bob, follower=self.alice)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Follower.objects.create(profile=self.bob, follower=self.alice)

    def test_self_edge_rejected(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Following.objects.create(profile=self.alice, following=self.alice)
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Follower.objects.create(profile=self.alice, follower=self.alice)

    def test_deleting_profile_removes_both_directions(self):
        make_follow(self.alice, self.bob)
        make_follow(self.bob, self.alice)
        self.alice.delete()
        self.assertEqual(Following.objects.count(), 0)
        self.assertEqual(Follower.objects.count(), 0)

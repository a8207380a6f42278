from unittest.mock import MagicMock

from django.test import TestCase

from network.services import FeedService, FollowService
from network.tests.helpers import make_post, make_profile, make_user


class FeedServiceTestCase(TestCase):
    def setUp(self):
        self.service = FeedService()
        self.alice = make_user(name="Alice Smith")
        self.bob = make_user(name="Bob Jones")
        self.cara = make_user(name="Cara Lee")
        for user in (self.alice, self.bob, self.cara):
            make_profile(user)

    def test_feed_empty_without_profile(self):
        self.assertEqual(self.service.get_feed(make_user().id), [])

    def test_feed_empty_when_following_nobody(self):
        make_post(author=self.bob)
        self.assertEqual(self.service.get_feed(self.alice.id), [])

    def test_feed_is_union_of_followed_authors_newest_first(self):
        b_old = make_post(author=self.bob, title="b-old", minutes_ago=50)
        c_mid = make_post(author=self.cara, title="c-mid", minutes_ago=30)
        b_new = make_post(author=self.bob, title="b-new", minutes_ago=10)
        make_post(author=self.alice, title="own", minutes_ago=5)
        FollowService().follow(self.alice.id, self.bob.id)
        FollowService().follow(self.alice.id, self.cara.id)

        feed = self.service.get_feed(self.alice.id)

        self.assertEqual(feed, [b_new, c_mid, b_old])
        self.assertEqual(feed[0].user.name, "Bob Jones")

    def test_unfollowed_author_leaves_feed(self):
        make_post(author=self.bob)
        FollowService().follow(self.alice.id, self.bob.id)
        self.assertEqual(len(self.service.get_feed(self.alice.id)), 1)
        FollowService().unfollow(self.alice.id, self.bob.id)
        self.assertEqual(self.service.get_feed(self.alice.id), [])

    def test_duplicate_rows_are_dropped(self):
        post = make_post(author=self.bob)
        post_repo = MagicMock()
        post_repo.list_with_author.return_value = [post, post]
        follow_repo = MagicMock()
        follow_repo.followee_user_ids.return_value = [self.bob.id]

        feed = FeedService(follow_repo=follow_repo, post_repo=post_repo).get_feed(self.alice.id)

        self.assertEqual(feed, [post])
        post_repo.list_with_author.assert_called_once_with(author_ids=[self.bob.id])

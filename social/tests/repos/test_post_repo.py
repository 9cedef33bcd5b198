from django.test import TestCase

from social.models import Post
from social.repos.post_repo import PostRepo
from social.tests.helpers import make_comment, make_post, make_user


class PostRepoTests(TestCase):

    def setUp(self):
        self.repo = PostRepo()
        self.author = make_user(name="Author")
        self.reader = make_user(name="Reader")

    def test_list_for_feed_public_only(self):
        public = make_post(author=self.author)
        make_post(author=self.author, visibility=Post.VISIBILITY_PRIVATE)
        self.assertEqual(list(self.repo.list_for_feed()), [public])

    def test_list_for_feed_by_author(self):
        make_post(author=self.author)
        theirs = make_post(author=self.reader)
        self.assertEqual(list(self.repo.list_for_feed(author_id=self.reader.id)), [theirs])

    def test_liked_by_keeps_full_like_list(self):
        post = make_post(author=self.author)
        post.likes.add(self.reader, self.author)
        liked = list(self.repo.liked_by(self.reader))
        self.assertEqual(liked, [post])
        self.assertEqual(len(liked[0].likes.all()), 2)

    def test_saved_by(self):
        post = make_post(author=self.author)
        make_post(author=self.author)
        post.saved_by.add(self.reader)
        self.assertEqual(list(self.repo.saved_by(self.reader)), [post])

    def test_get_detailed_prefetches_comments(self):
        post = make_post(author=self.author)
        make_comment(post=post, user=self.reader)
        detailed = self.repo.get_detailed(post.id)
        with self.assertNumQueries(0):
            self.assertEqual(detailed.comments.all()[0].user, self.reader)
            self.assertEqual(detailed.author, self.author)

    def test_get_detailed_missing(self):
        self.assertIsNone(self.repo.get_detailed(999999))

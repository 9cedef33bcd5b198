from django.test import TestCase
from rest_framework.exceptions import NotFound, PermissionDenied

from social.models import Comment, Post
from social.services import PostService
from social.tests.helpers import make_post, make_user


class PostServiceTests(TestCase):

    def setUp(self):
        self.service = PostService()
        self.author = make_user(name="Author")
        self.reader = make_user(name="Reader")
        self.post = make_post(author=self.author)

    def test_create_trims_content_and_blank_image(self):
        post = self.service.create(self.author, content="  hi there  ", image="")
        self.assertEqual(post.content, "hi there")
        self.assertIsNone(post.image)
        self.assertEqual(post.author, self.author)

    def test_fetch_missing_raises_not_found(self):
        with self.assertRaises(NotFound):
            self.service.fetch(999999)

    def test_feed_lists_public_only(self):
        make_post(author=self.author, visibility=Post.VISIBILITY_PRIVATE)
        make_post(author=self.reader, visibility=Post.VISIBILITY_FOLLOWERS)
        posts, pagination = self.service.feed()
        self.assertEqual(posts, [self.post])
        self.assertEqual(pagination, {"total": 1, "page": 1, "pages": 1})

    def test_feed_filters_by_author_and_paginates(self):
        for i in range(3):
            make_post(author=self.reader, content=f"r{i}")
        posts, pagination = self.service.feed(author_id=self.reader.id, page=2, limit=2)
        self.assertEqual(len(posts), 1)
        self.assertEqual(posts[0].content, "r0")
        self.assertEqual(pagination, {"total": 3, "page": 2, "pages": 2})

    def test_feed_page_past_end_is_empty(self):
        posts, pagination = self.service.feed(page=5, limit=20)
        self.assertEqual(posts, [])
        self.assertEqual(pagination["total"], 1)

    def test_delete_by_author(self):
        self.service.delete(self.author, self.post.id)
        self.assertFalse(Post.objects.filter(id=self.post.id).exists())

    def test_delete_by_other_user_forbidden(self):
        with self.assertRaisesMessage(PermissionDenied, "Not authorized to delete this post"):
            self.service.delete(self.reader, self.post.id)
        self.assertTrue(Post.objects.filter(id=self.post.id).exists())

    def test_delete_missing_post(self):
        with self.assertRaises(NotFound):
            self.service.delete(self.author, 999999)

    def test_toggle_like_twice_restores_state(self):
        self.assertEqual(self.service.toggle_like(self.reader, self.post.id), (True, 1))
        self.assertEqual(self.service.toggle_like(self.reader, self.post.id), (False, 0))

    def test_toggle_save(self):
        self.assertTrue(self.service.toggle_save(self.reader, self.post.id))
        self.assertEqual(self.service.saved(self.reader), [self.post])
        self.assertFalse(self.service.toggle_save(self.reader, self.post.id))
        self.assertEqual(self.service.saved(self.reader), [])

    def test_liked_lists_posts_newest_first(self):
        newer = make_post(author=self.author, content="newer")
        self.service.toggle_like(self.reader, self.post.id)
        self.service.toggle_like(self.reader, newer.id)
        self.assertEqual(self.service.liked(self.reader), [newer, self.post])

    def test_add_comment_returns_count(self):
        comment, count = self.service.add_comment(self.reader, self.post.id, "  nice  ")
        self.assertEqual(comment.text, "nice")
        self.assertEqual(count, 1)
        self.assertEqual(Comment.objects.get().user, self.reader)

    def test_add_comment_missing_post(self):
        with self.assertRaises(NotFound):
            self.service.add_comment(self.reader, 999999, "hello")

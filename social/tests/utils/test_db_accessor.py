from django.test import TestCase
from social.db_accessor import DB_Accessor
from social.models import Post
from social.tests.helpers import make_user


class DBAccessorTests(TestCase):

    def setUp(self):
        self.user = make_user()
        self.obj1 = Post.objects.create(author=self.user, content="Soup")
        self.obj2 = Post.objects.create(author=self.user, content="Cake")

        self.repo = DB_Accessor(Post)

    # ---------- page() ----------

    def test_page_summary(self):
        items, summary = self.repo.page(Post.objects.order_by("content"), page=2, limit=1)
        self.assertEqual(items, [self.obj1])
        self.assertEqual(summary, {"total": 2, "page": 2, "pages": 2})

    def test_page_clamps_to_first_page(self):
        items, summary = self.repo.page(Post.objects.order_by("content"), page=0, limit=5)
        self.assertEqual(summary["page"], 1)
        self.assertEqual(len(items), 2)

    def test_page_past_the_end_is_empty(self):
        items, summary = self.repo.page(Post.objects.order_by("content"), page=3, limit=2)
        self.assertEqual(items, [])
        self.assertEqual(summary, {"total": 2, "page": 3, "pages": 1})

    # ---------- single-object helpers ----------

    def test_find(self):
        self.assertEqual(self.repo.find(id=self.obj1.id), self.obj1)
        self.assertIsNone(self.repo.find(id=999999))

    def test_create_and_delete(self):
        created = self.repo.create(author=self.user, content="Pie")
        self.assertEqual(Post.objects.get(id=created.id).content, "Pie")
        self.assertEqual(self.repo.delete(id=created.id), 1)
        self.assertEqual(self.repo.delete(id=created.id), 0)

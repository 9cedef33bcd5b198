from django.urls import reverse
from rest_framework.test import APIClient

from social.tests.helpers import make_post
from social.tests.views.base import ApiTestCase

REVOKED = "Bearer " + "0" * 40


class RevokedTokenViewTests(ApiTestCase):
    """Public endpoints ignore a token the server no longer knows."""
    __test__ = True

    def setUp(self):
        super().setUp()
        self.stale = APIClient()
        self.stale.credentials(HTTP_AUTHORIZATION=REVOKED)

    def test_login_with_revoked_token(self):
        response = self.stale.post(
            reverse("login"), {"email": "user_a@example.org", "password": "Password123"}, format="json"
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["user"]["id"], self.user.id)

    def test_signup_with_revoked_token(self):
        response = self.stale.post(
            reverse("signup"), {"name": "Fresh", "email": "fresh@example.org", "password": "secret1"}, format="json"
        )
        self.assertEqual(response.status_code, 201)

    def test_feed_with_revoked_token(self):
        post = make_post(author=self.other)
        response = self.stale.get(reverse("post_list"))
        self.assertEqual(response.status_code, 200)
        posts = response.json()["posts"]
        self.assertEqual([p["id"] for p in posts], [post.id])
        self.assertNotIn("isLiked", posts[0])

    def test_post_detail_with_revoked_token(self):
        post = make_post(author=self.other)
        response = self.stale.get(reverse("post_detail", args=[post.id]))
        self.assertEqual(response.status_code, 200)

    def test_malformed_header_on_feed(self):
        self.stale.credentials(HTTP_AUTHORIZATION="Bearer two parts")
        self.assertEqual(self.stale.get(reverse("post_list")).status_code, 200)

    def test_writes_still_need_a_valid_token(self):
        response = self.stale.post(reverse("post_list"), {"content": "hi"}, format="json")
        self.assertEqual(response.status_code, 401)
        post = make_post(author=self.user)
        response = self.stale.delete(reverse("post_detail", args=[post.id]))
        self.assertEqual(response.status_code, 401)

    def test_private_endpoints_still_reject_revoked_token(self):
        self.assertError(self.stale.get(reverse("me")), 401, "Invalid token")

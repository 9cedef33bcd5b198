from django.test import TestCase
from rest_framework.authtoken.models import Token
from rest_framework.exceptions import ValidationError

from social.models import Follower, Message, Post, User
from social.services import AccountService
from social.tests.helpers import make_message, make_post, make_user


class AccountServiceTests(TestCase):

    def setUp(self):
        self.service = AccountService()

    def test_signup_returns_online_user_and_token(self):
        user, token = self.service.signup(name=" Jane ", email="jane@example.org", password="secret1")
        self.assertEqual(user.name, "Jane")
        self.assertTrue(user.is_online)
        self.assertEqual(Token.objects.get(user=user).key, token)

    def test_login_is_case_insensitive_on_email(self):
        make_user(email="jane@example.org", password="secret1")
        user, token = self.service.login(email="JANE@example.org", password="secret1")
        self.assertEqual(user.email, "jane@example.org")
        self.assertTrue(token)

    def test_login_with_wrong_password(self):
        make_user(email="jane@example.org", password="secret1")
        with self.assertRaisesMessage(ValidationError, "Invalid email or password"):
            self.service.login(email="jane@example.org", password="nope")

    def test_login_unknown_email(self):
        with self.assertRaisesMessage(ValidationError, "Invalid email or password"):
            self.service.login(email="ghost@example.org", password="secret1")

    def test_logout_revokes_token(self):
        user, _ = self.service.signup(name="Jane", email="jane@example.org", password="secret1")
        self.service.logout(user)
        user.refresh_from_db()
        self.assertFalse(user.is_online)
        self.assertFalse(Token.objects.filter(user=user).exists())

    def test_update_profile_only_touches_given_fields(self):
        user = make_user(name="Jane", bio="old bio")
        self.service.update_profile(user, name=" Janet ")
        user.refresh_from_db()
        self.assertEqual(user.name, "Janet")
        self.assertEqual(user.bio, "old bio")

    def test_change_password_rotates_token(self):
        user, old_token = self.service.signup(name="Jane", email="jane@example.org", password="secret1")
        new_token = self.service.change_password(user, current_password="secret1", new_password="secret2")
        self.assertNotEqual(old_token, new_token)
        user.refresh_from_db()
        self.assertTrue(user.check_password("secret2"))

    def test_change_password_wrong_current(self):
        user = make_user(password="secret1")
        with self.assertRaisesMessage(ValidationError, "Current password is incorrect"):
            self.service.change_password(user, current_password="wrong", new_password="secret2")

    def test_delete_account_cascades(self):
        user = make_user()
        other = make_user()
        make_post(author=user)
        liked = make_post(author=other)
        liked.likes.add(user)
        make_message(user, other)
        Follower.objects.create(follower=other, author=user)

        self.service.delete_account(user)

        self.assertFalse(User.objects.filter(id=user.id).exists())
        self.assertFalse(Post.objects.filter(author_id=user.id).exists())
        self.assertEqual(liked.likes.count(), 0)
        self.assertFalse(Message.objects.exists())
        self.assertEqual(other.following_count, 0)

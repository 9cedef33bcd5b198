import uuid

from rest_framework.authtoken.models import Token
from rest_framework.test import APIClient

from social.models import Comment, Message, Post, User


def make_user(**kwargs):
    name = kwargs.pop("name", "John Doe")
    email = kwargs.pop("email", f"john_{uuid.uuid4().hex[:6]}@example.org")
    password = kwargs.pop("password", "Password123")
    return User.objects.create_user(email=email, password=password, name=name, **kwargs)


def make_post(*, author=None, content="hello world", visibility=Post.VISIBILITY_PUBLIC, **extra):
    """creates and returns a post; a fresh author is made when none is given."""
    if author is None:
        author = make_user()
    return Post.objects.create(author=author, content=content, visibility=visibility, **extra)


def make_comment(*, post, user, text="nice"):
    return Comment.objects.create(post=post, user=user, text=text)


def make_message(sender, receiver, content="hi", **extra):
    return Message.objects.create(sender=sender, receiver=receiver, content=content, **extra)


def auth_client(user):
    """APIClient sending the user's bearer token."""
    token, _ = Token.objects.get_or_create(user=user)
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {token.key}")
    return client

from .accounts import AccountService
from .comments import CommentService
from .follow import FollowService
from .messages import MessageService
from .posts import PostService
from .users import UserService

__all__ = [
    "AccountService",
    "CommentService",
    "FollowService",
    "MessageService",
    "PostService",
    "UserService",
]

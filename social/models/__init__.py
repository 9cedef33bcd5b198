from .user import User
from .followers import Follower
from .post import Post
from .comment import Comment
from .message import Message

__all__ = [
    "User",
    "Follower",
    "Post",
    "Comment",
    "Message",
]

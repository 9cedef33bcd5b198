from .api_views import health
from .auth_views import signup, login, logout, me, update_profile, change_password
from .user_views import user_list, user_detail, follow, unfollow, followers, following
from .post_views import (
    post_list,
    post_detail,
    like,
    save,
    add_comment,
    saved_posts,
    liked_posts,
)
from .message_views import conversations, thread, mark_read

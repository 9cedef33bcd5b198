"""
Fire-and-forget event fan-out over the channel layer.

Every connected websocket joins `user_<id>` for its own account and the
shared `broadcast` group. Events are delivered at most once; when the layer
is missing or a send fails the error is logged and swallowed, so an HTTP
request never fails because a notification could not be pushed.
"""

import logging

from asgiref.sync import async_to_sync
from channels.layers import get_channel_layer

logger = logging.getLogger(__name__)

BROADCAST_GROUP = "broadcast"

NEW_MESSAGE = "new_message"
MESSAGE_READ = "message_read"
NEW_POST = "new_post"
POST_LIKED = "post_liked"
NEW_COMMENT = "new_comment"
NEW_FOLLOWER = "new_follower"
USER_TYPING = "user_typing"


def user_group(user_id) -> str:
    """Channel-layer group name for one user's room."""
    return f"user_{user_id}"


def _send(group, event, data):
    layer = get_channel_layer()
    if layer is None:
        logger.debug("No channel layer configured; dropping %s", event)
        return False
    try:
        async_to_sync(layer.group_send)(
            group,
            {"type": "social.event", "event": event, "data": data},
        )
    except Exception as e:
        logger.warning("Realtime emit of %s to %s failed: %s", event, group, e)
        return False
    return True


def emit_to_user(user_id, event, data):
    """Push `event` to every socket of `user_id`."""
    return _send(user_group(user_id), event, data)


def broadcast(event, data):
    """Push `event` to every connected socket."""
    return _send(BROADCAST_GROUP, event, data)

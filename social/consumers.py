"""Websocket consumer delivering per-user and broadcast events."""

import logging
from collections import Counter

from channels.db import database_sync_to_async
from channels.generic.websocket import AsyncJsonWebsocketConsumer

from social import realtime

logger = logging.getLogger(__name__)

UNAUTHORIZED_CLOSE_CODE = 4401

# open sockets per user id in this process
_open_sockets = Counter()


@database_sync_to_async
def _set_presence(user, online):
    if online:
        user.mark_online()
    else:
        user.mark_offline()


class EventConsumer(AsyncJsonWebsocketConsumer):
    """
    One socket per connected client.

    Outbound frames look like `{"event": name, "data": payload}`. Inbound
    frames are `{"type": ..., "to": user_id, ...}`; `private_message` and
    `typing` are relayed to the target's room, `join` is accepted for
    clients that announce themselves (the room is joined on connect).

    A user stays online while any of their sockets is open.
    """

    groups = []

    async def connect(self):
        user = self.scope.get("user")
        if user is None or not user.is_authenticated:
            # a close before accept is a handshake rejection with no code
            await self.accept()
            await self.close(code=UNAUTHORIZED_CLOSE_CODE)
            return

        self.user = user
        _open_sockets[user.id] += 1
        self.rooms = [realtime.user_group(user.id), realtime.BROADCAST_GROUP]
        for room in self.rooms:
            await self.channel_layer.group_add(room, self.channel_name)
        await self.accept()
        await _set_presence(user, True)
        logger.info("User %s connected (%s)", user.id, self.channel_name)

    async def disconnect(self, code):
        user = getattr(self, "user", None)
        if user is None:
            return
        for room in self.rooms:
            await self.channel_layer.group_discard(room, self.channel_name)
        _open_sockets[user.id] -= 1
        if _open_sockets[user.id] <= 0:
            del _open_sockets[user.id]
            await _set_presence(user, False)
        logger.info("User %s disconnected (%s)", user.id, code)

    async def receive_json(self, content, **kwargs):
        kind = content.get("type") if isinstance(content, dict) else None
        if kind == "join":
            return
        if kind == "private_message":
            await self._relay(content, realtime.NEW_MESSAGE, {"message": content.get("message")})
            return
        if kind == "typing":
            await self._relay(content, realtime.USER_TYPING, {})
            return
        logger.debug("Ignoring socket frame of type %r from %s", kind, self.user.id)

    async def _relay(self, content, event, data):
        to = content.get("to")
        if not str(to or "").isdigit():
            return
        payload = {"from": self.user.id, **data}
        await self.channel_layer.group_send(
            realtime.user_group(to),
            {"type": "social.event", "event": event, "data": payload},
        )

    async def social_event(self, event):
        """Forward a group event to the client."""
        await self.send_json({"event": event["event"], "data": event["data"]})

"""Service helpers for direct messages and the conversation list."""

from django.db import transaction
from django.utils import timezone
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from social.models import Message
from social.repos.message_repo import MessageRepo
from social.repos.user_repo import UserRepo


class MessageService:
    """Send, read and list messages on behalf of `actor`."""

    def __init__(self, actor, message_repo=None, user_repo=None):
        self.actor = actor
        self.message_repo = message_repo or MessageRepo()
        self.user_repo = user_repo or UserRepo()

    def _counterpart(self, user_id):
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    def conversations(self):
        """
        One entry per user the actor has exchanged messages with.

        Each entry is a dict with `user`, `last_message` and `unread_count`,
        newest conversation first.
        """
        rows = list(self.message_repo.conversation_rows(self.actor))
        if not rows:
            return []
        users = self.user_repo.model.objects.in_bulk([r["counterpart"] for r in rows])
        messages = self.message_repo.model.objects.in_bulk([r["last_message_id"] for r in rows])
        conversations = []
        for row in rows:
            user = users.get(row["counterpart"])
            if user is None:
                continue
            conversations.append({
                "user": user,
                "last_message": messages[row["last_message_id"]],
                "unread_count": row["unread_count"],
            })
        return conversations

    @transaction.atomic
    def thread(self, other_id, *, limit=50, before=None):
        """
        Newest `limit` messages with other_id (older than `before`), oldest first.

        Marks everything other_id sent to the actor as read.
        """
        other = self._counterpart(other_id)
        page = list(self.message_repo.between(self.actor, other, before=before)[:max(1, int(limit))])
        self.message_repo.unread_from(other, self.actor).update(read=True, read_at=timezone.now())
        page.reverse()
        return other, page

    def send(self, receiver_id, *, content, message_type=Message.TYPE_TEXT):
        """Create a message from actor to receiver_id."""
        receiver = self._counterpart(receiver_id)
        if receiver.pk == self.actor.pk:
            raise ValidationError("You cannot message yourself")
        message = Message.objects.create(
            sender=self.actor,
            receiver=receiver,
            content=content.strip(),
            message_type=message_type,
        )
        return message

    def mark_read(self, message_id):
        """Mark one received message read; returns True on the first transition."""
        message = self.message_repo.find(id=message_id)
        if message is None:
            raise NotFound("Message not found")
        if message.receiver_id != self.actor.id:
            raise PermissionDenied("Not authorized")
        return message.mark_read()

"""Repository helpers for direct messages and derived conversations."""

from django.db.models import Case, Count, F, IntegerField, Max, Q, QuerySet, When

from social.db_accessor import DB_Accessor
from social.models import Message


class MessageRepo(DB_Accessor):
    """Repository for Message queries."""
    def __init__(self) -> None:
        """Initialise with the Message model."""
        super().__init__(Message)

    def between(self, user, other, *, before=None) -> QuerySet:
        """Messages exchanged by user and other, newest first."""
        qs = self.model.objects.filter(
            Q(sender=user, receiver=other) | Q(sender=other, receiver=user)
        )
        if before is not None:
            qs = qs.filter(created_at__lt=before)
        return qs.select_related("sender", "receiver").order_by("-created_at", "-id")

    def unread_from(self, sender, receiver) -> QuerySet:
        """Unread messages sender sent to receiver."""
        return self.model.objects.filter(sender=sender, receiver=receiver, read=False)

    def conversation_rows(self, user) -> QuerySet:
        """
        One row per counterpart of `user`.

        Each row carries `counterpart` (the other user's id), `last_message_id`
        and `unread_count` (counterpart → user messages not yet read), and
        rows are ordered newest conversation first. Ids are monotonic, so the
        highest id in a group is its newest message.
        """
        return (
            self.model.objects.filter(Q(sender=user) | Q(receiver=user))
            .annotate(
                counterpart=Case(
                    When(sender=user, then=F("receiver_id")),
                    default=F("sender_id"),
                    output_field=IntegerField(),
                )
            )
            .values("counterpart")
            .annotate(
                last_message_id=Max("id"),
                unread_count=Count("id", filter=Q(receiver=user, read=False)),
            )
            .order_by("-last_message_id")
        )


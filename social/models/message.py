"""Direct message between two users."""

from django.conf import settings
from django.db import models
from django.utils import timezone


class Message(models.Model):
    """A message sent from `sender` to `receiver`."""

    TYPE_TEXT = "text"
    TYPE_IMAGE = "image"
    TYPE_AUDIO = "audio"
    TYPE_VIDEO = "video"

    TYPES = [
        (TYPE_TEXT, "Text"),
        (TYPE_IMAGE, "Image"),
        (TYPE_AUDIO, "Audio"),
        (TYPE_VIDEO, "Video"),
    ]

    sender = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="sent_messages",
        db_column="sender_id",
    )
    receiver = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="received_messages",
        db_column="receiver_id",
    )
    content = models.TextField()
    message_type = models.CharField(max_length=10, choices=TYPES, default=TYPE_TEXT)
    read = models.BooleanField(default=False)
    read_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "message"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["sender", "receiver", "-created_at"], name="message_sender__7b1e2a_idx"),
            models.Index(fields=["receiver", "read"], name="message_receive_4e9d0c_idx"),
        ]

    def __str__(self):
        return f"Message({self.sender_id} -> {self.receiver_id})"

    def mark_read(self):
        """Flag as read; returns False when it already was."""
        if self.read:
            return False
        self.read = True
        self.read_at = timezone.now()
        self.save(update_fields=["read", "read_at"])
        return True

"""Push real-time events to connected clients when social models change."""

from django.db import transaction
from django.db.models.signals import m2m_changed, post_save
from django.dispatch import receiver

from social import realtime
from social.models import Comment, Follower, Message, Post, User
from social.serializers import (
    AuthorSerializer,
    CommentSerializer,
    MessageSerializer,
    PostSerializer,
    PublicProfileSerializer,
)


def _emit_after_commit(user_id, event, data):
    # Payloads are serialized now; delivery waits until the write is committed.
    transaction.on_commit(lambda: realtime.emit_to_user(user_id, event, data))


def _broadcast_after_commit(event, data):
    transaction.on_commit(lambda: realtime.broadcast(event, data))


@receiver(post_save, sender=Follower)
def notify_on_follow(sender, instance, created, **kwargs):
    """Tell an author someone started following them."""
    if not created:
        return
    _emit_after_commit(
        instance.author_id,
        realtime.NEW_FOLLOWER,
        {"follower": PublicProfileSerializer(instance.follower).data},
    )


@receiver(post_save, sender=Post)
def announce_new_post(sender, instance, created, **kwargs):
    """Broadcast newly created public posts."""
    if not created or instance.visibility != Post.VISIBILITY_PUBLIC:
        return
    _broadcast_after_commit(realtime.NEW_POST, PostSerializer(instance).data)


@receiver(m2m_changed, sender=Post.likes.through)
def notify_on_like(sender, instance, action, reverse, pk_set, **kwargs):
    """Tell a post's author each time someone else likes it."""
    if action != "post_add" or not pk_set:
        return
    if reverse:
        # user.liked_posts.add(...): instance is the user, pk_set holds posts.
        pairs = [(post, instance) for post in Post.objects.filter(pk__in=pk_set)]
    else:
        pairs = [(instance, user) for user in User.objects.filter(pk__in=pk_set)]
    for post, user in pairs:
        if user.pk == post.author_id:
            continue
        _emit_after_commit(
            post.author_id,
            realtime.POST_LIKED,
            {"postId": post.pk, "user": PublicProfileSerializer(user).data},
        )


@receiver(post_save, sender=Comment)
def notify_on_comment(sender, instance, created, **kwargs):
    """Tell a post's author about comments from other users."""
    if not created or instance.user_id == instance.post.author_id:
        return
    _emit_after_commit(
        instance.post.author_id,
        realtime.NEW_COMMENT,
        {"postId": instance.post_id, "comment": CommentSerializer(instance).data},
    )


@receiver(post_save, sender=Message)
def deliver_message(sender, instance, created, update_fields=None, **kwargs):
    """Push new messages to the receiver and read receipts to the sender."""
    if created:
        _emit_after_commit(
            instance.receiver_id,
            realtime.NEW_MESSAGE,
            {
                "message": MessageSerializer(instance).data,
                "from": AuthorSerializer(instance.sender).data,
            },
        )
        return
    if update_fields and "read" in update_fields and instance.read:
        _emit_after_commit(
            instance.sender_id,
            realtime.MESSAGE_READ,
            {"messageId": instance.pk},
        )

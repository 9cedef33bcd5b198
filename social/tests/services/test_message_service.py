from datetime import timedelta

from django.test import TestCase
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from social.models import Message
from social.services import MessageService
from social.tests.helpers import make_message, make_user


class MessageServiceTests(TestCase):

    def setUp(self):
        self.alice = make_user(name="Alice")
        self.bob = make_user(name="Bob")
        self.cara = make_user(name="Cara")

    def test_send_creates_message(self):
        message = MessageService(self.alice).send(self.bob.id, content=" hey ", message_type=Message.TYPE_IMAGE)
        self.assertEqual(message.sender, self.alice)
        self.assertEqual(message.receiver, self.bob)
        self.assertEqual(message.content, "hey")
        self.assertEqual(message.message_type, Message.TYPE_IMAGE)
        self.assertFalse(message.read)

    def test_send_to_missing_user(self):
        with self.assertRaisesMessage(NotFound, "User not found"):
            MessageService(self.alice).send(999999, content="hey")

    def test_send_to_self_rejected(self):
        with self.assertRaisesMessage(ValidationError, "You cannot message yourself"):
            MessageService(self.alice).send(self.alice.id, content="hey")

    def test_thread_is_oldest_first_and_marks_received_read(self):
        first = make_message(self.bob, self.alice, "one")
        second = make_message(self.alice, self.bob, "two")
        third = make_message(self.bob, self.alice, "three")
        make_message(self.cara, self.alice, "elsewhere")

        other, messages = MessageService(self.alice).thread(self.bob.id)

        self.assertEqual(other, self.bob)
        self.assertEqual(messages, [first, second, third])
        self.assertFalse(Message.objects.filter(sender=self.bob, receiver=self.alice, read=False).exists())
        # messages alice sent stay unread, and other threads are untouched
        self.assertFalse(Message.objects.get(id=second.id).read)
        self.assertFalse(Message.objects.get(content="elsewhere").read)

    def test_thread_limit_keeps_newest(self):
        for i in range(5):
            make_message(self.alice, self.bob, f"m{i}")
        _, messages = MessageService(self.alice).thread(self.bob.id, limit=2)
        self.assertEqual([m.content for m in messages], ["m3", "m4"])

    def test_thread_before_cursor(self):
        old = make_message(self.alice, self.bob, "old")
        new = make_message(self.alice, self.bob, "new")
        Message.objects.filter(id=old.id).update(created_at=new.created_at - timedelta(minutes=5))
        _, messages = MessageService(self.alice).thread(self.bob.id, before=new.created_at)
        self.assertEqual(messages, [old])

    def test_thread_missing_user(self):
        with self.assertRaises(NotFound):
            MessageService(self.alice).thread(999999)

    def test_conversations_groups_by_counterpart(self):
        make_message(self.bob, self.alice, "b1")
        make_message(self.bob, self.alice, "b2")
        make_message(self.alice, self.cara, "c1")
        last_bob = make_message(self.alice, self.bob, "b3")

        conversations = MessageService(self.alice).conversations()

        self.assertEqual([c["user"] for c in conversations], [self.bob, self.cara])
        self.assertEqual(conversations[0]["last_message"], last_bob)
        self.assertEqual(conversations[0]["unread_count"], 2)
        self.assertEqual(conversations[1]["unread_count"], 0)

    def test_conversations_empty(self):
        self.assertEqual(MessageService(self.alice).conversations(), [])

    def test_mark_read_by_receiver(self):
        message = make_message(self.alice, self.bob)
        self.assertTrue(MessageService(self.bob).mark_read(message.id))
        message.refresh_from_db()
        self.assertTrue(message.read)
        self.assertIsNotNone(message.read_at)

    def test_mark_read_is_idempotent(self):
        message = make_message(self.alice, self.bob)
        MessageService(self.bob).mark_read(message.id)
        read_at = Message.objects.get(id=message.id).read_at
        self.assertFalse(MessageService(self.bob).mark_read(message.id))
        self.assertEqual(Message.objects.get(id=message.id).read_at, read_at)

    def test_mark_read_by_sender_forbidden(self):
        message = make_message(self.alice, self.bob)
        with self.assertRaisesMessage(PermissionDenied, "Not authorized"):
            MessageService(self.alice).mark_read(message.id)

    def test_mark_read_missing(self):
        with self.assertRaisesMessage(NotFound, "Message not found"):
            MessageService(self.bob).mark_read(999999)

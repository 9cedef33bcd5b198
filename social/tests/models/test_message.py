from django.test import TestCase

from social.models import Message
from social.tests.helpers import make_message, make_user


class MessageModelTests(TestCase):

    def setUp(self):
        self.alice = make_user(name="Alice")
        self.bob = make_user(name="Bob")
        self.message = make_message(self.alice, self.bob)

    def test_defaults(self):
        self.assertEqual(self.message.message_type, Message.TYPE_TEXT)
        self.assertFalse(self.message.read)
        self.assertIsNone(self.message.read_at)

    def test_mark_read_sets_timestamp_once(self):
        self.assertTrue(self.message.mark_read())
        first_read_at = self.message.read_at
        self.assertIsNotNone(first_read_at)
        self.assertFalse(self.message.mark_read())
        self.message.refresh_from_db()
        self.assertEqual(self.message.read_at, first_read_at)

    def test_sender_deletion_cascades(self):
        self.alice.delete()
        self.assertFalse(Message.objects.exists())

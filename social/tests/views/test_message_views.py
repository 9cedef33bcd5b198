from django.urls import reverse

from social.models import Message
from social.tests.helpers import make_message
from social.tests.views.base import ApiTestCase


class MessageViewTests(ApiTestCase):
    __test__ = True

    def test_send_message(self):
        response = self.client.post(reverse("thread", args=[self.other.id]), {"content": "hello"}, format="json")
        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["message"], "Message sent successfully")
        self.assertEqual(body["data"]["content"], "hello")
        self.assertEqual(body["data"]["messageType"], "text")
        self.assertEqual(body["data"]["receiver"]["id"], self.other.id)
        self.assertFalse(body["data"]["read"])

    def test_send_requires_content(self):
        response = self.client.post(reverse("thread", args=[self.other.id]), {"content": ""}, format="json")
        self.assertError(response, 400, "Message content is required")

    def test_send_to_self(self):
        response = self.client.post(reverse("thread", args=[self.user.id]), {"content": "me"}, format="json")
        self.assertError(response, 400, "You cannot message yourself")

    def test_send_to_missing_user(self):
        response = self.client.post(reverse("thread", args=[999999]), {"content": "hi"}, format="json")
        self.assertError(response, 404, "User not found")

    def test_thread_marks_incoming_read(self):
        make_message(self.other, self.user, "one")
        make_message(self.user, self.other, "two")
        response = self.client.get(reverse("thread", args=[self.other.id]))
        self.assertEqual(response.status_code, 200)
        self.assertEqual([m["content"] for m in response.json()["messages"]], ["one", "two"])
        self.assertEqual(response.json()["user"]["id"], self.other.id)
        self.assertFalse(Message.objects.filter(receiver=self.user, read=False).exists())

    def test_thread_invalid_before(self):
        response = self.client.get(reverse("thread", args=[self.other.id]), {"before": "yesterday"})
        self.assertError(response, 400, "Invalid before timestamp")

    def test_conversations(self):
        make_message(self.other, self.user, "hey")
        response = self.client.get(reverse("conversations"))
        self.assertEqual(response.status_code, 200)
        conversation = response.json()["conversations"][0]
        self.assertEqual(conversation["id"], self.other.id)
        self.assertEqual(conversation["user"]["id"], self.other.id)
        self.assertEqual(conversation["lastMessage"]["content"], "hey")
        self.assertEqual(conversation["lastMessage"]["sender"], self.other.id)
        self.assertEqual(conversation["unreadCount"], 1)

    def test_mark_read(self):
        message = make_message(self.other, self.user)
        response = self.client.put(reverse("mark_read", args=[message.id]))
        self.assertEqual(response.json()["message"], "Message marked as read")
        message.refresh_from_db()
        self.assertTrue(message.read)

    def test_mark_read_by_sender_forbidden(self):
        message = make_message(self.user, self.other)
        self.assertError(self.client.put(reverse("mark_read", args=[message.id])), 403, "Not authorized")

    def test_mark_read_missing(self):
        self.assertError(self.client.put(reverse("mark_read", args=[999999])), 404, "Message not found")

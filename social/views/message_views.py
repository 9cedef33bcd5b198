from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from social.serializers import (
    ChatUserSerializer,
    ConversationSerializer,
    MessageCreateSerializer,
    MessageSerializer,
)
from social.services import MessageService
from social.views.view_utils import datetime_param, int_param

message_service_factory = MessageService


@api_view(["GET"])
def conversations(request):
    """List the caller's conversations, newest first."""
    items = message_service_factory(request.user).conversations()
    return Response({"conversations": ConversationSerializer(items, many=True).data})


@api_view(["GET", "POST"])
def thread(request, user_id):
    """GET: messages with user_id (marks theirs read). POST: send them a message."""
    service = message_service_factory(request.user)
    if request.method == "POST":
        serializer = MessageCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        message = service.send(
            user_id,
            content=serializer.validated_data["content"],
            message_type=serializer.validated_data["messageType"],
        )
        return Response(
            {"message": "Message sent successfully", "data": MessageSerializer(message).data},
            status=status.HTTP_201_CREATED,
        )

    other, messages = service.thread(
        user_id,
        limit=int_param(request, "limit", settings.MESSAGES_PAGE_SIZE, maximum=200),
        before=datetime_param(request, "before"),
    )
    return Response({
        "messages": MessageSerializer(messages, many=True).data,
        "user": ChatUserSerializer(other).data,
    })


@api_view(["PUT"])
def mark_read(request, message_id):
    message_service_factory(request.user).mark_read(message_id)
    return Response({"message": "Message marked as read"})

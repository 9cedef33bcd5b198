from django.contrib.auth import password_validation
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from social.models import Comment, Message, Post, User


def _required(message):
    return {"required": message, "blank": message, "null": message}


# --- output -----------------------------------------------------------------

class PublicProfileSerializer(serializers.ModelSerializer):
    """Profile as other users see it."""
    avatar = serializers.CharField(source="avatar_url", read_only=True)
    followersCount = serializers.IntegerField(source="followers_count", read_only=True)
    followingCount = serializers.IntegerField(source="following_count", read_only=True)
    isOnline = serializers.BooleanField(source="is_online", read_only=True)
    lastSeen = serializers.DateTimeField(source="last_seen", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = User
        fields = [
            "id",
            "name",
            "email",
            "avatar",
            "bio",
            "followersCount",
            "followingCount",
            "isOnline",
            "lastSeen",
            "createdAt",
        ]


class AuthorSerializer(serializers.ModelSerializer):
    """Compact user reference embedded in posts, comments and messages."""
    avatar = serializers.CharField(source="avatar_url", read_only=True)

    class Meta:
        model = User
        fields = ["id", "name", "avatar"]


class ChatUserSerializer(AuthorSerializer):
    """User reference shown in conversation lists, with presence."""
    isOnline = serializers.BooleanField(source="is_online", read_only=True)
    lastSeen = serializers.DateTimeField(source="last_seen", read_only=True)

    class Meta(AuthorSerializer.Meta):
        fields = AuthorSerializer.Meta.fields + ["isOnline", "lastSeen"]


class CommentSerializer(serializers.ModelSerializer):
    user = AuthorSerializer(read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Comment
        fields = ["id", "user", "text", "createdAt"]


class PostSerializer(serializers.ModelSerializer):
    """
    Post with its author, likers and comments embedded.

    `isLiked` / `isSaved` are only present when the serializer context holds
    an authenticated request user.
    """
    author = AuthorSerializer(read_only=True)
    likes = serializers.PrimaryKeyRelatedField(many=True, read_only=True)
    savedBy = serializers.PrimaryKeyRelatedField(source="saved_by", many=True, read_only=True)
    comments = CommentSerializer(many=True, read_only=True)
    likesCount = serializers.SerializerMethodField()
    commentsCount = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Post
        fields = [
            "id",
            "author",
            "content",
            "image",
            "visibility",
            "likes",
            "savedBy",
            "comments",
            "likesCount",
            "commentsCount",
            "createdAt",
            "updatedAt",
        ]

    def get_likesCount(self, obj):
        return len(obj.likes.all())

    def get_commentsCount(self, obj):
        return len(obj.comments.all())

    def _viewer(self):
        request = self.context.get("request")
        user = getattr(request, "user", None)
        if user is not None and user.is_authenticated:
            return user
        return None

    def to_representation(self, instance):
        data = super().to_representation(instance)
        viewer = self._viewer()
        if viewer is not None:
            data["isLiked"] = viewer.pk in data["likes"]
            data["isSaved"] = viewer.pk in data["savedBy"]
        return data


class MessageSerializer(serializers.ModelSerializer):
    sender = AuthorSerializer(read_only=True)
    receiver = AuthorSerializer(read_only=True)
    messageType = serializers.CharField(source="message_type", read_only=True)
    readAt = serializers.DateTimeField(source="read_at", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Message
        fields = ["id", "sender", "receiver", "content", "messageType", "read", "readAt", "createdAt"]


# --- input ------------------------------------------------------------------

class SignupSerializer(serializers.Serializer):
    name = serializers.CharField(
        min_length=2,
        max_length=50,
        error_messages={
            **_required("Name is required"),
            "min_length": "Name must be at least 2 characters",
            "max_length": "Name must be at most 50 characters",
        },
    )
    email = serializers.EmailField(
        error_messages={**_required("Email is required"), "invalid": "Please enter a valid email"},
    )
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        error_messages=_required("Password is required"),
    )

    def validate_email(self, value):
        email = value.strip().lower()
        if User.objects.filter(email__iexact=email).exists():
            raise serializers.ValidationError("Email already registered")
        return email

    def validate_password(self, value):
        try:
            password_validation.validate_password(value)
        except DjangoValidationError as e:
            raise serializers.ValidationError(list(e.messages))
        return value


class LoginSerializer(serializers.Serializer):
    email = serializers.CharField(error_messages=_required("Email and password are required"))
    password = serializers.CharField(
        trim_whitespace=False,
        error_messages=_required("Email and password are required"),
    )


class ProfileUpdateSerializer(serializers.Serializer):
    name = serializers.CharField(
        required=False,
        min_length=2,
        max_length=50,
        error_messages={
            "blank": "Name is required",
            "min_length": "Name must be at least 2 characters",
            "max_length": "Name must be at most 50 characters",
        },
    )
    bio = serializers.CharField(
        required=False,
        allow_blank=True,
        max_length=200,
        error_messages={"max_length": "Bio must be at most 200 characters"},
    )
    avatar = serializers.URLField(
        required=False,
        allow_blank=True,
        max_length=500,
        error_messages={"invalid": "Avatar must be a valid URL"},
    )


class ChangePasswordSerializer(serializers.Serializer):
    currentPassword = serializers.CharField(
        trim_whitespace=False,
        error_messages=_required("Current and new password are required"),
    )
    newPassword = serializers.CharField(
        trim_whitespace=False,
        error_messages=_required("Current and new password are required"),
    )

    def validate_newPassword(self, value):
        try:
            password_validation.validate_password(value)
        except DjangoValidationError as e:
            raise serializers.ValidationError(list(e.messages))
        return value


class PostCreateSerializer(serializers.Serializer):
    content = serializers.CharField(
        max_length=1000,
        error_messages={
            **_required("Post content is required"),
            "max_length": "Post content must be at most 1000 characters",
        },
    )
    image = serializers.URLField(required=False, allow_null=True, allow_blank=True, max_length=500)
    visibility = serializers.ChoiceField(
        choices=Post.VISIBILITY_CHOICES,
        default=Post.VISIBILITY_PUBLIC,
        error_messages={"invalid_choice": "Invalid visibility"},
    )


class CommentCreateSerializer(serializers.Serializer):
    text = serializers.CharField(
        max_length=500,
        error_messages={
            **_required("Comment text is required"),
            "max_length": "Comment must be at most 500 characters",
        },
    )


class MessageCreateSerializer(serializers.Serializer):
    content = serializers.CharField(error_messages=_required("Message content is required"))
    messageType = serializers.ChoiceField(
        choices=Message.TYPES,
        default=Message.TYPE_TEXT,
        error_messages={"invalid_choice": "Invalid message type"},
    )


class LastMessageSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    sender = serializers.PrimaryKeyRelatedField(read_only=True)

    class Meta:
        model = Message
        fields = ["content", "createdAt", "sender"]


class ConversationSerializer(serializers.Serializer):
    """One derived conversation: counterpart, newest message and unread count."""
    id = serializers.IntegerField(source="user.id", read_only=True)
    user = ChatUserSerializer(read_only=True)
    lastMessage = LastMessageSerializer(source="last_message", read_only=True)
    unreadCount = serializers.IntegerField(source="unread_count", read_only=True)

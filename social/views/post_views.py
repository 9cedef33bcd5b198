from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import IsAuthenticated, IsAuthenticatedOrReadOnly
from rest_framework.response import Response

from social.authentication import OptionalBearerTokenAuthentication
from social.serializers import CommentCreateSerializer, CommentSerializer, PostCreateSerializer, PostSerializer
from social.services import PostService
from social.views.view_utils import int_param

post_service = PostService()


def _post_data(request, posts, many=False):
    return PostSerializer(posts, many=many, context={"request": request}).data


@api_view(["GET", "POST"])
@authentication_classes([OptionalBearerTokenAuthentication])
@permission_classes([IsAuthenticatedOrReadOnly])
def post_list(request):
    """GET: public feed (optionally one author's). POST: create a post."""
    if request.method == "POST":
        serializer = PostCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        post = post_service.create(request.user, **serializer.validated_data)
        return Response(
            {"message": "Post created successfully", "post": _post_data(request, post)},
            status=status.HTTP_201_CREATED,
        )

    author_id = request.query_params.get("userId") or None
    if author_id is not None and not author_id.isdigit():
        return Response({"posts": [], "pagination": {"total": 0, "page": 1, "pages": 0}})
    posts, pagination = post_service.feed(
        author_id=int(author_id) if author_id else None,
        page=int_param(request, "page", 1),
        limit=int_param(request, "limit", settings.API_PAGE_SIZE, maximum=100),
    )
    return Response({"posts": _post_data(request, posts, many=True), "pagination": pagination})


@api_view(["GET", "DELETE"])
@authentication_classes([OptionalBearerTokenAuthentication])
@permission_classes([IsAuthenticatedOrReadOnly])
def post_detail(request, post_id):
    if request.method == "DELETE":
        post_service.delete(request.user, post_id)
        return Response({"message": "Post deleted successfully"})
    return Response({"post": _post_data(request, post_service.fetch(post_id))})


@api_view(["POST"])
def like(request, post_id):
    """Toggle the caller's like on a post."""
    liked, likes_count = post_service.toggle_like(request.user, post_id)
    return Response({
        "message": "Post liked" if liked else "Post unliked",
        "isLiked": liked,
        "likesCount": likes_count,
    })


@api_view(["POST"])
def save(request, post_id):
    """Toggle the caller's bookmark on a post."""
    saved = post_service.toggle_save(request.user, post_id)
    return Response({
        "message": "Post saved" if saved else "Post unsaved",
        "isSaved": saved,
    })


@api_view(["POST"])
def add_comment(request, post_id):
    serializer = CommentCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    comment, comments_count = post_service.add_comment(request.user, post_id, serializer.validated_data["text"])
    return Response(
        {
            "message": "Comment added successfully",
            "comment": CommentSerializer(comment).data,
            "commentsCount": comments_count,
        },
        status=status.HTTP_201_CREATED,
    )


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def saved_posts(request):
    return Response({"posts": _post_data(request, post_service.saved(request.user), many=True)})


@api_view(["GET"])
@permission_classes([IsAuthenticated])
def liked_posts(request):
    return Response({"posts": _post_data(request, post_service.liked(request.user), many=True)})

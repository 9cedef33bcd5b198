from django.conf import settings
from rest_framework.decorators import api_view
from rest_framework.response import Response

from social.serializers import PublicProfileSerializer
from social.services import FollowService, UserService
from social.views.view_utils import int_param

user_service = UserService()
follow_service_factory = FollowService


@api_view(["GET"])
def user_list(request):
    """Search/discover users other than the caller."""
    users, pagination = user_service.search(
        request.user,
        query=(request.query_params.get("search") or "").strip() or None,
        page=int_param(request, "page", 1),
        limit=int_param(request, "limit", settings.API_PAGE_SIZE, maximum=100),
    )
    return Response({
        "users": PublicProfileSerializer(users, many=True).data,
        "pagination": pagination,
    })


@api_view(["GET"])
def user_detail(request, user_id):
    user = user_service.fetch(user_id)
    return Response({
        "user": PublicProfileSerializer(user).data,
        "isFollowing": user_service.is_following(request.user, user),
    })


@api_view(["POST"])
def follow(request, user_id):
    """Follow a user; 400 on self-follow or when already following."""
    target = user_service.fetch(user_id)
    follow_service_factory(request.user).follow_user(target)
    return Response({
        "message": "Successfully followed user",
        "user": PublicProfileSerializer(target).data,
    })


@api_view(["POST"])
def unfollow(request, user_id):
    target = user_service.fetch(user_id)
    follow_service_factory(request.user).unfollow(target)
    return Response({
        "message": "Successfully unfollowed user",
        "user": PublicProfileSerializer(target).data,
    })


@api_view(["GET"])
def followers(request, user_id):
    user = user_service.fetch(user_id)
    return Response({"followers": PublicProfileSerializer(user_service.followers(user), many=True).data})


@api_view(["GET"])
def following(request, user_id):
    user = user_service.fetch(user_id)
    return Response({"following": PublicProfileSerializer(user_service.following(user), many=True).data})

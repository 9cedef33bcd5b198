from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from social.authentication import OptionalBearerTokenAuthentication
from social.serializers import (
    ChangePasswordSerializer,
    LoginSerializer,
    ProfileUpdateSerializer,
    PublicProfileSerializer,
    SignupSerializer,
)
from social.services import AccountService

account_service = AccountService()


@api_view(["POST"])
@authentication_classes([OptionalBearerTokenAuthentication])
@permission_classes([AllowAny])
def signup(request):
    """Register a new account and return its bearer token."""
    serializer = SignupSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user, token = account_service.signup(**serializer.validated_data)
    return Response(
        {
            "message": "User registered successfully",
            "token": token,
            "user": PublicProfileSerializer(user).data,
        },
        status=status.HTTP_201_CREATED,
    )


@api_view(["POST"])
@authentication_classes([OptionalBearerTokenAuthentication])
@permission_classes([AllowAny])
def login(request):
    """Exchange email and password for a bearer token."""
    serializer = LoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user, token = account_service.login(request=request, **serializer.validated_data)
    return Response({
        "message": "Login successful",
        "token": token,
        "user": PublicProfileSerializer(user).data,
    })


@api_view(["POST"])
@permission_classes([IsAuthenticated])
def logout(request):
    account_service.logout(request.user)
    return Response({"message": "Logged out successfully"})


@api_view(["GET", "DELETE"])
@permission_classes([IsAuthenticated])
def me(request):
    """Return the caller's profile, or delete the caller's account."""
    if request.method == "DELETE":
        account_service.delete_account(request.user)
        return Response({"message": "Account deleted successfully"})
    return Response({"user": PublicProfileSerializer(request.user).data})


@api_view(["PUT", "PATCH"])
@permission_classes([IsAuthenticated])
def update_profile(request):
    serializer = ProfileUpdateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    user = account_service.update_profile(request.user, **serializer.validated_data)
    return Response({
        "message": "Profile updated successfully",
        "user": PublicProfileSerializer(user).data,
    })


@api_view(["PUT"])
@permission_classes([IsAuthenticated])
def change_password(request):
    serializer = ChangePasswordSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    token = account_service.change_password(
        request.user,
        current_password=serializer.validated_data["currentPassword"],
        new_password=serializer.validated_data["newPassword"],
    )
    return Response({"message": "Password changed successfully", "token": token})

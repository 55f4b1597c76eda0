from rest_framework import status, viewsets, serializers
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework_simplejwt.tokens import RefreshToken
from drf_spectacular.utils import extend_schema
from .serializers import (
    UserLoginSerializer,
    UserCreateSerializer,
    UserUpdateSerializer,
    UserRoleSerializer,
    PasswordResetSerializer,
    UserSerializer,
)
from .permissions import IsAdmin
from .services import (
    authenticate_user,
    list_users,
    get_user_by_id,
    create_user,
    update_user,
    update_user_role,
    reset_user_password,
    toggle_user_status,
    # Exceptions
    InvalidCredentialsError,
    InactiveAccountError,
    UserNotFoundError,
    DuplicateUsernameError,
    DuplicateEmailError,
    InvalidRoleError,
    CannotDeactivateSelfError,
)


# Response serializers for API documentation
class TokensResponseSerializer(serializers.Serializer):
    refresh = serializers.CharField()
    access = serializers.CharField()


class AuthResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    user = UserSerializer()
    tokens = TokensResponseSerializer()


class MessageResponseSerializer(serializers.Serializer):
    message = serializers.CharField()
    data = UserSerializer(required=False)


class ErrorResponseSerializer(serializers.Serializer):
    error = serializers.CharField()


def _tokens_for(user):
    refresh = RefreshToken.for_user(user)
    refresh['role'] = user.role
    refresh['username'] = user.username
    return {
        'refresh': str(refresh),
        'access': str(refresh.access_token),
    }


@extend_schema(
    request=UserLoginSerializer,
    responses={
        200: AuthResponseSerializer,
        400: ErrorResponseSerializer,
        401: ErrorResponseSerializer,
        403: ErrorResponseSerializer,
    },
    description="Authenticate with username and password to receive JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([AllowAny])
def login(request):
    """Login with username and password."""
    serializer = UserLoginSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = authenticate_user(**serializer.validated_data)
    except InvalidCredentialsError as e:
        return Response({'error': str(e)}, status=status.HTTP_401_UNAUTHORIZED)
    except InactiveAccountError as e:
        return Response({'error': str(e)}, status=status.HTTP_403_FORBIDDEN)

    return Response({
        'message': 'Login successful',
        'user': UserSerializer(user).data,
        'tokens': _tokens_for(user),
    })


@extend_schema(
    request=UserCreateSerializer,
    responses={
        201: AuthResponseSerializer,
        400: ErrorResponseSerializer,
    },
    description="Register a new employee account (admin only) and issue its JWT tokens.",
    tags=['auth'],
)
@api_view(['POST'])
@permission_classes([IsAuthenticated, IsAdmin])
def register(request):
    """Register a new employee account."""
    serializer = UserCreateSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    try:
        user = create_user(**serializer.validated_data)
    except (DuplicateUsernameError, DuplicateEmailError, InvalidRoleError) as e:
        return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response({
        'message': 'Registration successful',
        'user': UserSerializer(user).data,
        'tokens': _tokens_for(user),
    }, status=status.HTTP_201_CREATED)


@extend_schema(
    responses={200: UserSerializer},
    description="Get the current authenticated user's profile.",
    tags=['auth'],
)
@api_view(['GET'])
@permission_classes([IsAuthenticated])
def get_current_user(request):
    """Get current authenticated user profile."""
    return Response(UserSerializer(request.user).data)


class UserManagementViewSet(viewsets.ViewSet):
    """
    Back-office management of employee accounts (admin only).

    list: Get all users, newest first
    create: Create a user
    retrieve: Get a user
    update: Update username, email, role, is_active
    role: Change a user's role
    reset_password: Set a new password
    toggle_status: Activate/deactivate a user
    """

    permission_classes = [IsAuthenticated, IsAdmin]
    lookup_value_regex = r'\d+'

    @extend_schema(responses={200: UserSerializer(many=True)}, tags=['admin'])
    def list(self, request):
        return Response(UserSerializer(list_users(), many=True).data)

    @extend_schema(request=UserCreateSerializer, responses={201: UserSerializer}, tags=['admin'])
    def create(self, request):
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            user = create_user(**serializer.validated_data)
        except (DuplicateUsernameError, DuplicateEmailError, InvalidRoleError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(UserSerializer(user).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: UserSerializer}, tags=['admin'])
    def retrieve(self, request, pk=None):
        try:
            user = get_user_by_id(user_id=pk)
        except UserNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(UserSerializer(user).data)

    @extend_schema(request=UserUpdateSerializer, responses={200: UserSerializer}, tags=['admin'])
    def update(self, request, pk=None):
        serializer = UserUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            user = update_user(user_id=pk, **serializer.validated_data)
        except UserNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except (DuplicateUsernameError, DuplicateEmailError, InvalidRoleError) as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(UserSerializer(user).data)

    @extend_schema(request=UserRoleSerializer, responses={200: MessageResponseSerializer}, tags=['admin'])
    @action(detail=True, methods=['patch'], url_path='role')
    def role(self, request, pk=None):
        """Change a user's role."""
        serializer = UserRoleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            user = update_user_role(user_id=pk, role=serializer.validated_data.get('role', ''))
        except InvalidRoleError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)
        except UserNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({
            'message': 'User role updated successfully',
            'data': UserSerializer(user).data,
        })

    @extend_schema(request=PasswordResetSerializer, responses={200: MessageResponseSerializer}, tags=['admin'])
    @action(detail=True, methods=['patch'], url_path='reset-password')
    def reset_password(self, request, pk=None):
        """Set a new password for a user."""
        serializer = PasswordResetSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            user = reset_user_password(
                user_id=pk,
                new_password=serializer.validated_data['new_password']
            )
        except UserNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response({
            'message': 'Password reset successfully',
            'data': UserSerializer(user).data,
        })

    @extend_schema(request=None, responses={200: MessageResponseSerializer}, tags=['admin'])
    @action(detail=True, methods=['patch'], url_path='toggle-status')
    def toggle_status(self, request, pk=None):
        """Activate or deactivate a user."""
        try:
            user = toggle_user_status(user_id=pk, acting_user=request.user)
        except UserNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except CannotDeactivateSelfError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        state = 'activated' if user.is_active else 'deactivated'
        return Response({
            'message': f'User {state} successfully',
            'data': UserSerializer(user).data,
        })

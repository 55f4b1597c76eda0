from rest_framework import viewsets, status, serializers as drf_serializers
from rest_framework.decorators import action, api_view, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from apps.accounts.permissions import IsAdmin, IsStaffOrAdmin
from .serializers import (
    MenuCategoryInputSerializer,
    MenuItemCreateSerializer,
    MenuItemUpdateSerializer,
    MenuCategorySerializer,
    MenuItemSerializer,
    MenuSectionSerializer,
)
from .services import (
    get_menu,
    list_active_categories,
    list_category_items,
    get_menu_item,
    list_all_menu_items,
    create_category,
    update_category,
    delete_category,
    create_menu_item,
    update_menu_item,
    delete_menu_item,
    # Exceptions
    CategoryNotFoundError,
    InvalidCategoryError,
    CategoryHasItemsError,
    MenuItemNotFoundError,
    MenuItemInUseError,
)


# Response serializers for API documentation
class MessageResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()


class MenuItemMessageResponseSerializer(drf_serializers.Serializer):
    message = drf_serializers.CharField()
    data = MenuItemSerializer()


class ErrorResponseSerializer(drf_serializers.Serializer):
    error = drf_serializers.CharField()


@extend_schema(
    responses={200: MenuSectionSerializer(many=True)},
    description="Full guest menu: active categories with their available items.",
    tags=['menu'],
)
@api_view(['GET'])
@permission_classes([AllowAny])
def menu(request):
    return Response(MenuSectionSerializer(get_menu(), many=True).data)


class MenuCategoryViewSet(viewsets.ViewSet):
    """
    Menu categories.

    list: Active categories (public)
    items: Available items of a category (public)
    create/update/destroy: Category management (staff/admin)
    """

    lookup_value_regex = r'\d+'

    def get_permissions(self):
        if self.action in ['list', 'items']:
            return [AllowAny()]
        return [IsAuthenticated(), IsStaffOrAdmin()]

    @extend_schema(responses={200: MenuCategorySerializer(many=True)}, tags=['menu'])
    def list(self, request):
        return Response(MenuCategorySerializer(list_active_categories(), many=True).data)

    @extend_schema(responses={200: MenuItemSerializer(many=True)}, tags=['menu'])
    @action(detail=True, methods=['get'])
    def items(self, request, pk=None):
        try:
            items = list_category_items(category_id=pk)
        except CategoryNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(MenuItemSerializer(items, many=True).data)

    @extend_schema(request=MenuCategoryInputSerializer, responses={201: MenuCategorySerializer}, tags=['menu'])
    def create(self, request):
        serializer = MenuCategoryInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        category = create_category(**serializer.validated_data)
        return Response(MenuCategorySerializer(category).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=MenuCategoryInputSerializer, responses={200: MenuCategorySerializer}, tags=['menu'])
    def update(self, request, pk=None):
        serializer = MenuCategoryInputSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        try:
            category = update_category(category_id=pk, **serializer.validated_data)
        except CategoryNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        return Response(MenuCategorySerializer(category).data)

    @extend_schema(responses={200: MessageResponseSerializer, 400: ErrorResponseSerializer}, tags=['menu'])
    def destroy(self, request, pk=None):
        try:
            delete_category(category_id=pk)
        except CategoryNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except CategoryHasItemsError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({'message': 'Category deleted successfully'})


class MenuItemViewSet(viewsets.ViewSet):
    """
    Menu items.

    retrieve: An item with its category name (public)
    create/update/destroy: Item management (staff/admin)
    """

    lookup_value_regex = r'\d+'

    def get_permissions(self):
        if self.action == 'retrieve':
            return [AllowAny()]
        return [IsAuthenticated(), IsStaffOrAdmin()]

    @extend_schema(responses={200: MenuItemSerializer, 404: ErrorResponseSerializer}, tags=['menu'])
    def retrieve(self, request, pk=None):
        try:
            item = get_menu_item(item_id=pk)
        except MenuItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(MenuItemSerializer(item).data)

    def _create(self, request):
        serializer = MenuItemCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        return create_menu_item(**serializer.validated_data)

    def _update(self, request, pk):
        serializer = MenuItemUpdateSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        return update_menu_item(item_id=pk, **serializer.validated_data)

    @extend_schema(request=MenuItemCreateSerializer, responses={201: MenuItemSerializer}, tags=['menu'])
    def create(self, request):
        try:
            item = self._create(request)
        except InvalidCategoryError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(MenuItemSerializer(item).data, status=status.HTTP_201_CREATED)

    @extend_schema(request=MenuItemUpdateSerializer, responses={200: MenuItemSerializer}, tags=['menu'])
    def update(self, request, pk=None):
        try:
            item = self._update(request, pk)
        except MenuItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidCategoryError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(MenuItemSerializer(item).data)

    @extend_schema(responses={200: MessageResponseSerializer, 400: ErrorResponseSerializer}, tags=['menu'])
    def destroy(self, request, pk=None):
        try:
            delete_menu_item(item_id=pk)
        except MenuItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except MenuItemInUseError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({'message': 'Menu item deleted successfully'})


class AdminMenuItemViewSet(MenuItemViewSet):
    """
    Back-office menu item management (admin only).

    list: Every item including unavailable ones
    create/update/destroy: Same rules as staff, with confirmation messages
    """

    permission_classes = [IsAuthenticated, IsAdmin]

    def get_permissions(self):
        return [permission() for permission in self.permission_classes]

    @extend_schema(responses={200: MenuItemSerializer(many=True)}, tags=['admin'])
    def list(self, request):
        return Response(MenuItemSerializer(list_all_menu_items(), many=True).data)

    @extend_schema(request=MenuItemCreateSerializer, responses={201: MenuItemMessageResponseSerializer}, tags=['admin'])
    def create(self, request):
        try:
            item = self._create(request)
        except InvalidCategoryError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            'message': 'Menu item created successfully',
            'data': MenuItemSerializer(item).data,
        }, status=status.HTTP_201_CREATED)

    @extend_schema(request=MenuItemUpdateSerializer, responses={200: MenuItemMessageResponseSerializer}, tags=['admin'])
    def update(self, request, pk=None):
        try:
            item = self._update(request, pk)
        except MenuItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidCategoryError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({
            'message': 'Menu item updated successfully',
            'data': MenuItemSerializer(item).data,
        })

    @extend_schema(responses={200: MessageResponseSerializer, 400: ErrorResponseSerializer}, tags=['admin'])
    def destroy(self, request, pk=None):
        try:
            name = delete_menu_item(item_id=pk)
        except MenuItemNotFoundError as e:
            return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)
        except MenuItemInUseError as e:
            return Response({'error': str(e)}, status=status.HTTP_400_BAD_REQUEST)

        return Response({'message': f'Menu item "{name}" deleted successfully'})

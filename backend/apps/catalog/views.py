from typing import Dict, Tuple, Type

from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from rest_framework import serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.api.schemas import ErrorResponseSerializer, FieldErrorSerializer
from apps.api.utils import error_response, extract_fields, validation_response
from apps.common import get_logger
from .commands import CategoryFields, ProductFields
from .container import build_category_service, build_product_service
from .dtos import ResultStatus, ServiceResult
from .serializers import (
    CategorySerializer,
    CategoryWriteSerializer,
    ProductReadSerializer,
    ProductWriteSerializer,
)

logger = get_logger(__name__).bind(component="catalog", layer="view")

PRODUCT_FIELDS = ("title", "price", "text", "imgurl", "category")
CATEGORY_FIELDS = ("category",)

NOT_FOUND_MESSAGE = "Item not found"

# Failed write outcome -> (status, message)
RESULT_ERRORS: Dict[ResultStatus, Tuple[int, str]] = {
    ResultStatus.NOT_FOUND: (status.HTTP_404_NOT_FOUND, NOT_FOUND_MESSAGE),
    ResultStatus.PRODUCT_EXISTS: (status.HTTP_400_BAD_REQUEST, "Product already exists"),
    ResultStatus.CATEGORY_MISSING: (status.HTTP_400_BAD_REQUEST, "Category does not exist"),
    ResultStatus.CATEGORY_EXISTS: (status.HTTP_400_BAD_REQUEST, "Category already exists"),
}

WRITE_ERRORS = {
    400: OpenApiResponse(
        response=FieldErrorSerializer(many=True),
        description="Field validation errors, or {error} for a uniqueness/reference conflict",
    ),
}


def result_response(
    result: ServiceResult, serializer_class: Type[serializers.Serializer]
) -> Response:
    """Map a write outcome to its HTTP response. Creates and updates both answer 201."""
    if result.success:
        return Response(serializer_class(result.item).data, status=status.HTTP_201_CREATED)
    if result.status is ResultStatus.VALIDATION_FAILED:
        return validation_response(result.validation)
    http_status, message = RESULT_ERRORS[result.status]
    return error_response(message, http_status)


def _id_parameter(name: str) -> OpenApiParameter:
    return OpenApiParameter(name, int, OpenApiParameter.PATH)


@extend_schema(tags=["Products"])
class ProductListView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductListView")

    @extend_schema(
        operation_id="products_list",
        summary="List products",
        description="Ordered by date. When `category` is given the listing is always ascending.",
        parameters=[
            OpenApiParameter(
                name="order",
                description="asc (default) or desc",
                required=False,
                type=str,
                enum=["asc", "desc"],
            ),
            OpenApiParameter(
                name="category",
                description="Only products in this category",
                required=False,
                type=str,
            ),
        ],
        responses={200: ProductReadSerializer(many=True)},
    )
    def get(self, request):
        order = request.query_params.get("order")
        category = request.query_params.get("category")
        self.log.debug("Handling product list request", order=order, category=category)
        products = self.service.list_products(order, category)
        return Response(ProductReadSerializer(products, many=True).data)

    @extend_schema(
        summary="Create product",
        request=ProductWriteSerializer,
        responses={201: ProductReadSerializer, **WRITE_ERRORS},
    )
    def post(self, request):
        fields = ProductFields.from_raw(extract_fields(request, PRODUCT_FIELDS))
        self.log.info("Creating product via API", title=fields.title)
        result = self.service.create_product(fields)
        if result.success:
            self.log.info("Product created via API", product_id=result.item.product_no)
        return result_response(result, ProductReadSerializer)


@extend_schema(tags=["Products"])
class ProductDetailView(APIView):
    service = build_product_service()
    log = logger.bind(view="ProductDetailView")

    @extend_schema(
        operation_id="products_retrieve",
        summary="Get product",
        parameters=[_id_parameter("product_id")],
        responses={
            200: ProductReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, product_id):
        self.log.debug("Fetching product detail", product_id=product_id)
        dto = self.service.get_product(product_id)
        if not dto:
            return error_response(NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)
        return Response(ProductReadSerializer(dto).data)

    @extend_schema(
        summary="Update product",
        description="Only the supplied fields change. Answers 201 with the updated row.",
        parameters=[_id_parameter("product_id")],
        request=ProductWriteSerializer(partial=True),
        responses={
            201: ProductReadSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
            **WRITE_ERRORS,
        },
    )
    def patch(self, request, product_id):
        self.log.info("Patching product", product_id=product_id)
        fields = ProductFields.from_raw(extract_fields(request, PRODUCT_FIELDS))
        result = self.service.update_product(product_id, fields)
        return result_response(result, ProductReadSerializer)

    @extend_schema(
        summary="Delete product",
        parameters=[_id_parameter("product_id")],
        responses={204: None, 404: OpenApiResponse(response=ErrorResponseSerializer)},
    )
    def delete(self, request, product_id):
        self.log.info("Deleting product", product_id=product_id)
        if not self.service.delete_product(product_id):
            return error_response(NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(tags=["Categories"])
class CategoryListView(APIView):
    service = build_category_service()
    log = logger.bind(view="CategoryListView")

    @extend_schema(
        summary="List categories", responses={200: CategorySerializer(many=True)}
    )
    def get(self, request):
        self.log.debug("Listing categories")
        data = self.service.list_categories()
        return Response(CategorySerializer(data, many=True).data)

    @extend_schema(
        summary="Create category",
        request=CategoryWriteSerializer,
        responses={201: CategorySerializer, **WRITE_ERRORS},
    )
    def post(self, request):
        fields = CategoryFields.from_raw(extract_fields(request, CATEGORY_FIELDS))
        result = self.service.create_category(fields)
        if result.success:
            self.log.info("Category created", category_id=result.item.id)
        return result_response(result, CategorySerializer)


@extend_schema(tags=["Categories"])
class CategoryDetailView(APIView):
    service = build_category_service()
    log = logger.bind(view="CategoryDetailView")

    @extend_schema(
        summary="Get category",
        parameters=[_id_parameter("category_id")],
        responses={
            200: CategorySerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
        },
    )
    def get(self, request, category_id):
        self.log.debug("Fetching category detail", category_id=category_id)
        dto = self.service.get_category(category_id)
        if not dto:
            return error_response(NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)
        return Response(CategorySerializer(dto).data)

    @extend_schema(
        summary="Rename category",
        parameters=[_id_parameter("category_id")],
        request=CategoryWriteSerializer,
        responses={
            201: CategorySerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer),
            **WRITE_ERRORS,
        },
    )
    def patch(self, request, category_id):
        self.log.info("Patching category", category_id=category_id)
        fields = CategoryFields.from_raw(extract_fields(request, CATEGORY_FIELDS))
        result = self.service.update_category(category_id, fields)
        return result_response(result, CategorySerializer)

    @extend_schema(
        summary="Delete category",
        description="Products that name the category are left untouched.",
        parameters=[_id_parameter("category_id")],
        responses={204: None, 404: OpenApiResponse(response=ErrorResponseSerializer)},
    )
    def delete(self, request, category_id):
        self.log.info("Deleting category", category_id=category_id)
        if not self.service.delete_category(category_id):
            return error_response(NOT_FOUND_MESSAGE, status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from django.db import DatabaseError, IntegrityError

from apps.common import get_logger
from apps.common.sanitizers import sanitize
from .commands import CategoryFields, ProductFields
from .dtos import CategoryDTO, FieldError, ProductDTO, ResultStatus, ServiceResult
from .mappers import CategoryMapper, ProductMapper
from .protocols import CategoryRepositoryProtocol, ProductRepositoryProtocol
from .validators import category_message, validate

logger = get_logger(__name__).bind(component="catalog", layer="service")

# Raised by the ORM for malformed ids (ValueError/TypeError), ids the backend
# cannot represent (OverflowError) and backend faults (DatabaseError).
LOOKUP_ERRORS = (DatabaseError, ValueError, TypeError, OverflowError)

MAX_ID = 2 ** 63 - 1


def parse_id(raw: Any) -> Optional[int]:
    """Integer id, or ``None`` for anything the store could never hold."""
    if isinstance(raw, bool):
        return None
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return None
    return value if -MAX_ID - 1 <= value <= MAX_ID else None


class ProductService:
    def __init__(
        self,
        products: ProductRepositoryProtocol,
        categories: CategoryRepositoryProtocol,
    ):
        self.products = products
        self.categories = categories
        self.logger = logger.bind(service="ProductService")

    def list_products(
        self, order: Optional[str] = "asc", category: Optional[str] = None
    ) -> List[ProductDTO]:
        descending = (order or "").lower() == "desc"
        self.logger.debug("Listing products", order=order, category=category)
        if category is not None:
            # Filtered listings are always ascending by date
            qs = self.products.list_by_category(sanitize(category))
        else:
            qs = self.products.list_by_date(descending=descending)
        return ProductMapper.many_to_dto(qs)

    def get_product(self, product_id: Any) -> Optional[ProductDTO]:
        """
        Fetch one product. A failing lookup is logged and reported exactly like
        a missing row, so callers cannot tell a bad id or a database fault
        apart from absence.
        """
        self.logger.debug("Fetching product", product_id=product_id)
        try:
            product = self.products.get(pk=product_id)
        except LOOKUP_ERRORS as exc:
            self.logger.warning(
                "Product lookup failed", product_id=product_id, error=str(exc)
            )
            return None
        if not product:
            self.logger.info("Product not found", product_id=product_id)
            return None
        return ProductMapper.to_dto(product)

    def create_product(
        self, data: Union[Dict[str, Any], ProductFields]
    ) -> ServiceResult:
        cmd = data if isinstance(data, ProductFields) else ProductFields.from_raw(data)
        validation = validate(cmd.as_dict(), is_create=True)
        if validation:
            self.logger.info(
                "Product create rejected by validation",
                fields=[e.field for e in validation],
            )
            return ServiceResult.invalid(validation)

        category = sanitize(cmd.category)
        if not self.categories.name_exists(category):
            self.logger.warning("Product create failed: unknown category", category=category)
            return ServiceResult.failure(ResultStatus.CATEGORY_MISSING)

        title = sanitize(cmd.title)
        if self.products.title_exists(title):
            self.logger.warning("Product create failed: title taken", title=title)
            return ServiceResult.failure(ResultStatus.PRODUCT_EXISTS)

        row: Dict[str, Any] = {
            "title": title,
            "price": sanitize(cmd.price),
            "text": sanitize(cmd.text),
            "category": category,
        }
        if cmd.imgurl:
            row["imgurl"] = sanitize(cmd.imgurl)

        self.logger.info("Creating product", title=title, category=category)
        try:
            product = self.products.create(**row)
        except IntegrityError:
            # A concurrent request inserted the same title after our check
            self.logger.warning("Product create lost race on title", title=title)
            return ServiceResult.failure(ResultStatus.PRODUCT_EXISTS)
        self.logger.info("Product created", product_id=product.product_no)
        return ServiceResult.ok(ProductMapper.to_dto(product))

    def update_product(
        self, product_id: Any, data: Union[Dict[str, Any], ProductFields]
    ) -> ServiceResult:
        cmd = data if isinstance(data, ProductFields) else ProductFields.from_raw(data)
        pk = parse_id(product_id)
        self.logger.info("Updating product", product_id=product_id)

        # An update naming a category that already exists is refused. Kept
        # as-is until the product owner confirms the intended rule.
        if cmd.category is not None and self.categories.name_exists(
            sanitize(cmd.category)
        ):
            self.logger.warning(
                "Product update refused: category already exists",
                product_id=product_id,
                category=cmd.category,
            )
            return ServiceResult.failure(ResultStatus.CATEGORY_EXISTS)

        if cmd.title is not None and self.products.title_exists(
            sanitize(cmd.title), exclude_pk=pk
        ):
            self.logger.warning(
                "Product update refused: title taken",
                product_id=product_id,
                title=cmd.title,
            )
            return ServiceResult.failure(ResultStatus.PRODUCT_EXISTS)

        validation = validate(cmd.as_dict())
        if validation:
            self.logger.info(
                "Product update rejected by validation",
                product_id=product_id,
                fields=[e.field for e in validation],
            )
            return ServiceResult.invalid(validation)

        if pk is None:
            self.logger.warning("Product update failed: not found", product_id=product_id)
            return ServiceResult.failure(ResultStatus.NOT_FOUND)

        changes = {name: sanitize(value) for name, value in cmd.present().items()}
        try:
            product = self.products.update_one({"pk": pk}, **changes)
        except IntegrityError:
            self.logger.warning(
                "Product update lost race on title", product_id=product_id
            )
            return ServiceResult.failure(ResultStatus.PRODUCT_EXISTS)
        if not product:
            self.logger.warning("Product update failed: not found", product_id=product_id)
            return ServiceResult.failure(ResultStatus.NOT_FOUND)
        self.logger.info(
            "Product updated", product_id=pk, fields=sorted(changes)
        )
        return ServiceResult.ok(ProductMapper.to_dto(product))

    def delete_product(self, product_id: Any) -> bool:
        self.logger.info("Deleting product", product_id=product_id)
        pk = parse_id(product_id)
        deleted = pk is not None and self.products.delete_where(pk=pk) == 1
        if not deleted:
            self.logger.warning("Product deletion failed: not found", product_id=product_id)
            return False
        self.logger.info("Product deleted", product_id=pk)
        return True


class CategoryService:
    def __init__(self, categories: CategoryRepositoryProtocol):
        self.categories = categories
        self.logger = logger.bind(service="CategoryService")

    def list_categories(self) -> List[CategoryDTO]:
        self.logger.debug("Listing categories")
        return CategoryMapper.many_to_dto(self.categories.list_ordered())

    def get_category(self, category_id: Any) -> Optional[CategoryDTO]:
        self.logger.debug("Fetching category", category_id=category_id)
        try:
            category = self.categories.get(pk=category_id)
        except LOOKUP_ERRORS as exc:
            self.logger.warning(
                "Category lookup failed", category_id=category_id, error=str(exc)
            )
            return None
        if not category:
            self.logger.info("Category not found", category_id=category_id)
            return None
        return CategoryMapper.to_dto(category)

    def create_category(
        self, data: Union[Dict[str, Any], CategoryFields]
    ) -> ServiceResult:
        cmd = data if isinstance(data, CategoryFields) else CategoryFields.from_raw(data)
        if cmd.category is None:
            self.logger.info("Category create rejected: name missing")
            return ServiceResult.invalid([FieldError("category", category_message())])

        validation = validate(cmd.as_dict())
        if validation:
            self.logger.info("Category create rejected by validation")
            return ServiceResult.invalid(validation)

        name = sanitize(cmd.category)
        if self.categories.name_exists(name):
            self.logger.warning("Category create failed: name taken", name=name)
            return ServiceResult.failure(ResultStatus.CATEGORY_EXISTS)

        self.logger.info("Creating category", name=name)
        try:
            category = self.categories.create(category=name)
        except IntegrityError:
            self.logger.warning("Category create lost race on name", name=name)
            return ServiceResult.failure(ResultStatus.CATEGORY_EXISTS)
        self.logger.info("Category created", category_id=category.id)
        return ServiceResult.ok(CategoryMapper.to_dto(category))

    def update_category(
        self, category_id: Any, data: Union[Dict[str, Any], CategoryFields]
    ) -> ServiceResult:
        cmd = data if isinstance(data, CategoryFields) else CategoryFields.from_raw(data)
        pk = parse_id(category_id)
        self.logger.info("Updating category", category_id=category_id)

        validation = validate(cmd.as_dict())
        if validation:
            self.logger.info(
                "Category update rejected by validation", category_id=category_id
            )
            return ServiceResult.invalid(validation)

        name = sanitize(cmd.category) if cmd.category is not None else None
        if name is not None and self.categories.name_exists(name):
            self.logger.warning(
                "Category update failed: name taken", category_id=category_id, name=name
            )
            return ServiceResult.failure(ResultStatus.CATEGORY_EXISTS)

        if pk is None:
            self.logger.warning("Category update failed: not found", category_id=category_id)
            return ServiceResult.failure(ResultStatus.NOT_FOUND)

        changes = {"category": name} if name is not None else {}
        try:
            category = self.categories.update_one({"pk": pk}, **changes)
        except IntegrityError:
            self.logger.warning(
                "Category update lost race on name", category_id=category_id
            )
            return ServiceResult.failure(ResultStatus.CATEGORY_EXISTS)
        if not category:
            self.logger.warning("Category update failed: not found", category_id=category_id)
            return ServiceResult.failure(ResultStatus.NOT_FOUND)
        self.logger.info("Category updated", category_id=pk)
        return ServiceResult.ok(CategoryMapper.to_dto(category))

    def delete_category(self, category_id: Any) -> bool:
        # Products keep their category name; nothing cascades
        self.logger.info("Deleting category", category_id=category_id)
        pk = parse_id(category_id)
        deleted = pk is not None and self.categories.delete_where(pk=pk) == 1
        if not deleted:
            self.logger.warning(
                "Category deletion failed: not found", category_id=category_id
            )
            return False
        self.logger.info("Category deleted", category_id=pk)
        return True

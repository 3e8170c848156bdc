from __future__ import annotations

from .repositories import CategoryRepository, ProductRepository
from .services import CategoryService, ProductService


def build_product_service(*, using: str = "default") -> ProductService:
    return ProductService(
        products=ProductRepository(using=using),
        categories=CategoryRepository(using=using),
    )


def build_category_service(*, using: str = "default") -> CategoryService:
    return CategoryService(categories=CategoryRepository(using=using))

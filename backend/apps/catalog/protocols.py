from __future__ import annotations

from typing import Iterable, Optional, Protocol

from .models import Category, Product


class CategoryRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional[Category]:
        ...

    def list_ordered(self) -> Iterable[Category]:
        ...

    def name_exists(self, name: str, *, exclude_id: Optional[int] = None) -> bool:
        ...

    def create(self, **data) -> Category:
        ...

    def update_one(self, filters: dict, **data) -> Optional[Category]:
        ...

    def delete_where(self, **filters) -> int:
        ...


class ProductRepositoryProtocol(Protocol):
    def get(self, **filters) -> Optional[Product]:
        ...

    def list_by_date(self, *, descending: bool = False) -> Iterable[Product]:
        ...

    def list_by_category(self, category_name: str) -> Iterable[Product]:
        ...

    def title_exists(self, title: str, *, exclude_pk: Optional[int] = None) -> bool:
        ...

    def create(self, **data) -> Product:
        ...

    def update_one(self, filters: dict, **data) -> Optional[Product]:
        ...

    def delete_where(self, **filters) -> int:
        ...

from typing import Iterable, Optional

from apps.common.repository import GenericRepository
from .models import Category, Product


class CategoryRepository(GenericRepository[Category]):
    def __init__(self, using: str = "default"):
        super().__init__(Category, using=using)

    def list_ordered(self) -> Iterable[Category]:
        return self.list("id")

    def name_exists(self, name: str, *, exclude_id: Optional[int] = None) -> bool:
        qs = self.objects.filter(category=name)
        if exclude_id is not None:
            qs = qs.exclude(id=exclude_id)
        return qs.exists()


class ProductRepository(GenericRepository[Product]):
    def __init__(self, using: str = "default"):
        super().__init__(Product, using=using)

    def list_by_date(self, *, descending: bool = False) -> Iterable[Product]:
        return self.list("-date" if descending else "date")

    def list_by_category(self, category_name: str) -> Iterable[Product]:
        """Exact category match, always oldest first."""
        return self.list("date", category=category_name)

    def title_exists(self, title: str, *, exclude_pk: Optional[int] = None) -> bool:
        qs = self.objects.filter(title=title)
        if exclude_pk is not None:
            qs = qs.exclude(pk=exclude_pk)
        return qs.exists()

from typing import Generic, Iterable, Optional, Type, TypeVar

from django.db import models, transaction

T = TypeVar('T', bound=models.Model)


class GenericRepository(Generic[T]):
    """Single-model data access. ``using`` selects the database alias."""

    def __init__(self, model: Type[T], using: str = 'default'):
        self.model = model
        self.using = using

    @property
    def objects(self) -> models.QuerySet:
        return self.model._default_manager.using(self.using)

    def get(self, **filters) -> Optional[T]:
        return self.objects.filter(**filters).first()

    def list(self, *ordering: str, **filters) -> Iterable[T]:
        qs = self.objects.filter(**filters)
        return qs.order_by(*ordering) if ordering else qs

    def exists(self, **filters) -> bool:
        return self.objects.filter(**filters).exists()

    def create(self, **data) -> T:
        # Insert and re-read share one savepoint
        with transaction.atomic(using=self.using):
            obj = self.objects.create(**data)
            obj.refresh_from_db(using=self.using)
        return obj

    def update_one(self, filters: dict, **data) -> Optional[T]:
        """
        Update ``data`` columns on the row matching ``filters`` and return it
        re-read, or ``None`` when nothing matched. With no ``data`` this is a
        plain lookup. The update is rolled back if the re-read fails.
        """
        with transaction.atomic(using=self.using):
            if data and not self.objects.filter(**filters).update(**data):
                return None
            return self.objects.filter(**filters).first()

    def delete_where(self, **filters) -> int:
        deleted, _ = self.objects.filter(**filters).delete()
        return deleted

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional


@dataclass
class CategoryDTO:
    id: int
    category: str


@dataclass
class ProductDTO:
    product_no: int
    title: str
    price: str
    text: str
    imgurl: Optional[str]
    category: str
    date: datetime


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str


class ResultStatus(str, Enum):
    SUCCESS = "success"
    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND = "not_found"
    PRODUCT_EXISTS = "product_exists"
    CATEGORY_EXISTS = "category_exists"
    CATEGORY_MISSING = "category_missing"


@dataclass
class ServiceResult:
    """Outcome of a catalog write. ``item`` is only set on success."""

    status: ResultStatus
    item: Optional[Any] = None
    validation: List[FieldError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.status is ResultStatus.SUCCESS

    @classmethod
    def ok(cls, item: Any) -> "ServiceResult":
        return cls(ResultStatus.SUCCESS, item=item)

    @classmethod
    def invalid(cls, errors: List[FieldError]) -> "ServiceResult":
        return cls(ResultStatus.VALIDATION_FAILED, validation=list(errors))

    @classmethod
    def failure(cls, status: ResultStatus) -> "ServiceResult":
        return cls(status)

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Optional


def _as_mapping(payload: Any) -> Mapping:
    # JSON arrays and scalars carry no fields
    return payload if isinstance(payload, Mapping) else {}


@dataclass
class ProductFields:
    """
    Partial product input. ``None`` means the field was not supplied; any
    other value (including ``""`` and ``0``) counts as present and is left for
    the validator to judge.
    """

    title: Any = None
    price: Any = None
    text: Any = None
    imgurl: Any = None
    category: Any = None

    @staticmethod
    def from_raw(payload: Any) -> "ProductFields":
        data = _as_mapping(payload)
        return ProductFields(
            title=data.get("title"),
            price=data.get("price"),
            text=data.get("text"),
            imgurl=data.get("imgurl"),
            category=data.get("category"),
        )

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def present(self) -> Dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass
class CategoryFields:
    category: Any = None

    @staticmethod
    def from_raw(payload: Any) -> "CategoryFields":
        return CategoryFields(category=_as_mapping(payload).get("category"))

    def as_dict(self) -> Dict[str, Optional[Any]]:
        return asdict(self)

    def present(self) -> Dict[str, Any]:
        return {} if self.category is None else {"category": self.category}

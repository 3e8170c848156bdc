from typing import Iterable, List

from .dtos import CategoryDTO, ProductDTO
from .models import Category, Product


class CategoryMapper:
    @staticmethod
    def to_dto(cat: Category) -> CategoryDTO:
        return CategoryDTO(id=cat.id, category=cat.category)

    @staticmethod
    def many_to_dto(categories: Iterable[Category]) -> List[CategoryDTO]:
        return [CategoryMapper.to_dto(c) for c in categories]


class ProductMapper:
    @staticmethod
    def to_dto(product: Product) -> ProductDTO:
        return ProductDTO(
            product_no=product.product_no,
            title=product.title,
            price=str(product.price),
            text=product.text,
            imgurl=product.imgurl,
            category=product.category,
            date=product.date,
        )

    @staticmethod
    def many_to_dto(products: Iterable[Product]) -> List[ProductDTO]:
        return [ProductMapper.to_dto(p) for p in products]

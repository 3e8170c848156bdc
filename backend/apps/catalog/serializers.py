from rest_framework import serializers

from .validators import (
    CATEGORY_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX,
    PRICE_MAX_DIGITS,
    TEXT_MAX_LENGTH,
    TITLE_MAX_LENGTH,
)


class CategorySerializer(serializers.Serializer):
    id = serializers.IntegerField(read_only=True)
    category = serializers.CharField()

    def to_representation(self, instance):
        if instance is None:
            return None
        if hasattr(instance, "__dataclass_fields__"):
            return {
                "id": getattr(instance, "id"),
                "category": getattr(instance, "category"),
            }
        return super().to_representation(instance)


class ProductReadSerializer(serializers.Serializer):
    # Mirrors a stored products row
    product_no = serializers.IntegerField()
    title = serializers.CharField()
    price = serializers.CharField()
    text = serializers.CharField()
    imgurl = serializers.CharField(allow_null=True)
    category = serializers.CharField()
    date = serializers.DateTimeField()


class ProductWriteSerializer(serializers.Serializer):
    """
    Documents the product write payload for the OpenAPI schema. Requests are
    checked by ``apps.catalog.validators.validate``, not by this serializer.
    """

    title = serializers.CharField(min_length=1, max_length=TITLE_MAX_LENGTH)
    price = serializers.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
        min_value=0,
        max_value=PRICE_MAX,
    )
    text = serializers.CharField(min_length=1, max_length=TEXT_MAX_LENGTH)
    imgurl = serializers.CharField(required=False)
    category = serializers.CharField(min_length=1, max_length=CATEGORY_MAX_LENGTH)


class CategoryWriteSerializer(serializers.Serializer):
    category = serializers.CharField(min_length=1, max_length=CATEGORY_MAX_LENGTH)

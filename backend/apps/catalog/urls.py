from django.urls import path
from .views import ProductListView, ProductDetailView, CategoryListView, CategoryDetailView

# Identifiers are matched as strings; malformed ids resolve to "Item not found"
urlpatterns = [
	path('products/', ProductListView.as_view(), name='api-products-list'),
	path('products/<str:product_id>/', ProductDetailView.as_view(), name='api-products-detail'),
	path('categories/', CategoryListView.as_view(), name='api-categories-list'),
	path('categories/<str:category_id>/', CategoryDetailView.as_view(), name='api-categories-detail'),
]

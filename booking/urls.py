from django.urls import path
from . import views

app_name = 'booking'

urlpatterns = [
    path('cart/', views.CartView.as_view(), name='cart'),

    # Cart API
    path('api/cart/add/', views.add_to_cart, name='add_to_cart'),
    path('api/cart/count/', views.get_cart_count, name='get_cart_count'),
]

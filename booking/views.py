from django.http import JsonResponse
from django.views.decorators.http import require_http_methods
from django.views.generic import TemplateView
from catalog.models import Product
from catalog.services import format_currency
import json
import logging

logger = logging.getLogger(__name__)

CART_SESSION_KEY = 'cart'


def get_cart(session):
    """Cart stored in the session as {product_id (str): quantity}"""
    return session.get(CART_SESSION_KEY, {})


def get_cart_lines(session):
    """
    Return [(product, quantity)] for active products in the cart.
    Lines for deleted or deactivated products are dropped from the session.
    """
    cart = get_cart(session)
    products = Product.objects.filter(pk__in=[int(pk) for pk in cart], is_active=True)
    lines = [(product, cart[str(product.pk)]) for product in products]

    stale = set(cart) - {str(product.pk) for product, _ in lines}
    if stale:
        logger.info(f"Removing stale cart lines: {sorted(stale)}")
        session[CART_SESSION_KEY] = {pk: quantity for pk, quantity in cart.items() if pk not in stale}
        session.modified = True
    return lines


def cart_count(session):
    return sum(quantity for _, quantity in get_cart_lines(session))


class CartView(TemplateView):
    template_name = 'booking/cart.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)

        cart_items = []
        total_cents = 0
        for product, quantity in get_cart_lines(self.request.session):
            line_cents = product.price_cents * quantity
            total_cents += line_cents
            cart_items.append({
                'product': product,
                'quantity': quantity,
                'unit_price': format_currency(product.price_cents),
                'total_price': format_currency(line_cents),
            })

        context.update({
            'cart_items': cart_items,
            'total_items': sum(item['quantity'] for item in cart_items),
            'total_amount': format_currency(total_cents),
        })

        return context


@require_http_methods(["POST"])
def add_to_cart(request):
    """API for the "Add to Cart" button on product cards"""
    try:
        data = json.loads(request.body)
        product_id = data.get('product_id')
        quantity = int(data.get('quantity', 1))
    except (json.JSONDecodeError, AttributeError, TypeError, ValueError):
        return JsonResponse({'success': False, 'message': 'Invalid request data'}, status=400)

    if not product_id:
        return JsonResponse({'success': False, 'message': 'Product ID is required'}, status=400)

    if quantity < 1:
        return JsonResponse({'success': False, 'message': 'Quantity must be at least 1'}, status=400)

    try:
        product = Product.objects.get(pk=int(product_id), is_active=True)
    except (Product.DoesNotExist, TypeError, ValueError):
        return JsonResponse({'success': False, 'message': 'Product not found'}, status=404)

    cart = get_cart(request.session)
    key = str(product.pk)
    cart[key] = cart.get(key, 0) + quantity
    request.session[CART_SESSION_KEY] = cart
    request.session.modified = True

    logger.info(f"Added {quantity} x product {product.pk} to cart")

    return JsonResponse({
        'success': True,
        'message': f'{product.name} added to cart!',
        'cart_count': cart_count(request.session),
        'item_quantity': cart[key],
        'total_price': format_currency(product.price_cents * cart[key]),
    })


@require_http_methods(["GET"])
def get_cart_count(request):
    """API for the cart badge"""
    return JsonResponse({
        'success': True,
        'cart_count': cart_count(request.session)
    })

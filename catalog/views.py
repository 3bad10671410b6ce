from django.shortcuts import render, get_object_or_404, redirect
from django.views.generic import ListView
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods
from django.contrib.admin.views.decorators import staff_member_required
from django.contrib import messages
import logging

from ratings.conf import get_max_stars, get_max_stars_limit
from ratings.stars import RatingRangeError, OUTPUT_FORMATS, render_stars
from .forms import ProductForm
from .models import Product
from .services import format_currency, product_card

logger = logging.getLogger(__name__)

CARD_STYLES = ('glyph', 'markup')


class ProductListView(ListView):
    model = Product
    template_name = 'catalog/product_list.html'
    context_object_name = 'products'
    paginate_by = 12

    def get_queryset(self):
        return Product.objects.filter(is_active=True)

    def get_style(self):
        style = self.request.GET.get('style', 'glyph')
        return style if style in CARD_STYLES else 'glyph'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        style = self.get_style()
        context['cards'] = [product_card(product, style) for product in context['products']]
        context['style'] = style
        return context


def product_detail(request, pk):
    """Function-based view for product detail page"""
    product = get_object_or_404(Product.objects.filter(is_active=True), pk=pk)

    context = {
        'product': product,
        'card': product_card(product, style='markup'),
    }

    return render(request, 'catalog/product_detail.html', context)


@staff_member_required
def add_product(request):
    """View for adding new products"""
    if request.method == 'POST':
        form = ProductForm(request.POST, request.FILES)
        if form.is_valid():
            product = form.save()
            logger.info(f"Product {product.pk} '{product.name}' created by {request.user}")
            messages.success(request, f'Product "{product.name}" created!')
            return redirect('catalog:product_list')
    else:
        form = ProductForm()

    return render(request, 'catalog/product_form.html', {
        'form': form,
        'title': 'Add product'
    })


@require_http_methods(["GET"])
def products_api(request):
    """API endpoint returning active products with their stars"""
    output = request.GET.get('format', 'glyph')
    if output not in OUTPUT_FORMATS:
        return JsonResponse({
            'success': False,
            'error': f'Unknown format "{output}". Use one of: {", ".join(OUTPUT_FORMATS)}'
        }, status=400)

    products_data = []
    for product in Product.objects.filter(is_active=True):
        try:
            stars = render_stars(product.rating_stars, get_max_stars(), output=output)
        except RatingRangeError as e:
            logger.warning(f"Skipping stars for product {product.pk}: {e.messages[0]}")
            stars = None

        products_data.append({
            'id': product.pk,
            'name': product.name,
            'image': product.image_src,
            'rating': {
                'value': float(product.rating_stars),
                'count': product.rating_count,
                'stars': str(stars) if output == 'markup' and stars is not None else stars,
            },
            'price_cents': product.price_cents,
            'price': format_currency(product.price_cents),
        })

    return JsonResponse({
        'success': True,
        'products': products_data
    })


@require_http_methods(["GET"])
def stars_api(request):
    """API endpoint rendering stars for an arbitrary rating"""
    output = request.GET.get('format', 'glyph')
    if output not in OUTPUT_FORMATS:
        return JsonResponse({
            'success': False,
            'error': f'Unknown format "{output}". Use one of: {", ".join(OUTPUT_FORMATS)}'
        }, status=400)

    try:
        rating = float(request.GET.get('rating', ''))
        max_stars = int(request.GET.get('max_stars', get_max_stars()))
    except ValueError:
        return JsonResponse({
            'success': False,
            'error': 'rating must be a number and max_stars an integer'
        }, status=400)

    limit = get_max_stars_limit()
    if not 1 <= max_stars <= limit:
        return JsonResponse({
            'success': False,
            'error': f'max_stars must be between 1 and {limit}'
        }, status=400)

    try:
        stars = render_stars(rating, max_stars, output=output)
    except RatingRangeError as e:
        return JsonResponse({
            'success': False,
            'error': e.messages[0]
        }, status=400)

    return JsonResponse({
        'success': True,
        'rating': rating,
        'max_stars': max_stars,
        'format': output,
        'stars': str(stars) if output == 'markup' else stars,
    })

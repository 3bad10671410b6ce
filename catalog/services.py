"""
Product card helpers shared by views, APIs and management commands.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP

from ratings.conf import get_max_stars
from ratings.stars import (
    RatingRangeError, classify, render_stars, to_glyph_string, to_markup_fragment,
)

logger = logging.getLogger(__name__)

CENT = Decimal('0.01')

SAMPLE_PRODUCTS = [
    {
        'id': '1',
        'name': 'Wireless Headphones',
        'image': 'https://via.placeholder.com/200x200',
        'rating': {'stars': 4.2, 'count': 156},
        'price_cents': 9999,
    },
    {
        'id': '2',
        'name': 'Smart Watch',
        'image': 'https://via.placeholder.com/200x200',
        'rating': {'stars': 3.8, 'count': 89},
        'price_cents': 19999,
    },
    {
        'id': '3',
        'name': 'Bluetooth Speaker',
        'image': 'https://via.placeholder.com/200x200',
        'rating': {'stars': 4.7, 'count': 234},
        'price_cents': 4999,
    },
]


def format_currency(price_cents):
    """Format an amount in cents as a two-decimal string: 9999 -> '99.99'"""
    amount = Decimal(int(price_cents)) / 100
    return str(amount.quantize(CENT, rounding=ROUND_HALF_UP))


def add_stars_to_product(product, rating_value, output='glyph'):
    """
    Attach `rating.value` and `rating.stars` to a product mapping.

    The mapping is updated in place and returned. RatingRangeError from
    the converter propagates; nothing is written in that case.
    """
    stars = render_stars(rating_value, get_max_stars(), output=output)
    rating = product.setdefault('rating', {})
    rating['value'] = rating_value
    rating['stars'] = stars
    return product


def product_card(product, style='glyph'):
    """
    Build the template context for one product card.

    An out-of-range stored rating is logged and the card is rendered
    without stars instead of failing the whole listing.
    """
    try:
        cells = classify(product.rating_stars, get_max_stars())
    except RatingRangeError as e:
        logger.warning(f"Product {product.pk} has invalid rating {product.rating_stars}: {e.messages[0]}")
        stars = ''
    else:
        stars = to_markup_fragment(cells) if style == 'markup' else to_glyph_string(cells)

    return {
        'id': product.pk,
        'name': product.name,
        'image': product.image_src,
        'rating_value': product.rating_stars,
        'rating_count': product.rating_count,
        'stars': stars,
        'style': style,
        'price': format_currency(product.price_cents),
        'url': product.get_absolute_url(),
    }

from django import template
import logging

from ratings.conf import get_max_stars
from ratings.stars import (
    RatingRangeError, classify, tally, to_glyph_string, to_markup_fragment, to_structured,
)

register = template.Library()

logger = logging.getLogger(__name__)


def _max_stars(max_stars):
    if max_stars is None:
        return get_max_stars()
    return int(max_stars)


def _cells(rating, max_stars=None):
    """
    Classify a template value, clamping out-of-range ratings into
    [0, max_stars] so one bad product never breaks a whole page.
    """
    max_stars = _max_stars(max_stars)
    try:
        r = float(rating or 0)
    except (TypeError, ValueError):
        r = 0.0

    try:
        return classify(r, max_stars)
    except RatingRangeError as e:
        logger.warning(f"Clamping rating {rating!r}: {e.messages[0]}")
        # NaN lands on 0
        r = max(0.0, min(r, float(max_stars))) if r == r else 0.0
        return classify(r, max_stars)


@register.filter
def stars(rating, max_stars=None):
    """
    Return a list of length `max_stars` of dicts with `position`, `type`
    ('filled', 'half', 'empty') and `is_filled`/`is_half`/`is_empty`.
    Example: {% for star in product.rating_stars|stars %}
    """
    return [star.as_dict() for star in to_structured(_cells(rating, max_stars))]


@register.filter
def star_glyphs(rating, max_stars=None):
    """Return the rating as ★/⯪/☆ characters"""
    return to_glyph_string(_cells(rating, max_stars))


@register.filter
def star_markup(rating, max_stars=None):
    """Return the rating as a styled <div class="star-rating"> fragment"""
    return to_markup_fragment(_cells(rating, max_stars))


@register.simple_tag
def star_breakdown(rating, max_stars=None):
    """Return a dict: {'filled': n, 'half': 0|1, 'empty': n}"""
    filled, half, empty = tally(_cells(rating, max_stars))
    return {'filled': filled, 'half': half, 'empty': empty}

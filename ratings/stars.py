"""
Star rating conversion.

A rating is classified once into a fixed-length tuple of StarCell values;
the glyph string, the HTML fragment and the structured list are all
projections of that tuple, so the three encodings can never disagree.
"""
import math
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from django.core.exceptions import ValidationError
from django.utils.html import format_html, format_html_join

DEFAULT_MAX_STARS = 5

OUTPUT_FORMATS = ('glyph', 'markup', 'structured')


class StarCell(str, Enum):
    FILLED = 'filled'
    HALF = 'half'
    EMPTY = 'empty'


# U+2BEA STAR WITH LEFT HALF BLACK, so a half star never looks like an empty one
GLYPHS = {
    StarCell.FILLED: '★',
    StarCell.HALF: '⯪',
    StarCell.EMPTY: '☆',
}


class RatingRangeError(ValidationError):
    """Raised when a rating falls outside [0, max_stars]."""

    def __init__(self, rating, max_stars, message=None):
        self.rating = rating
        self.max_stars = max_stars
        super().__init__(
            message or 'Rating must be between 0 and %(max_stars)s',
            code='rating_out_of_range',
            params={'max_stars': max_stars},
        )


@dataclass(frozen=True)
class StarPosition:
    """One classified star with its 1-based position."""
    position: int
    cell: StarCell

    @property
    def is_filled(self):
        return self.cell is StarCell.FILLED

    @property
    def is_half(self):
        return self.cell is StarCell.HALF

    @property
    def is_empty(self):
        return self.cell is StarCell.EMPTY

    def as_dict(self):
        return {
            'position': self.position,
            'type': self.cell.value,
            'is_filled': self.is_filled,
            'is_half': self.is_half,
            'is_empty': self.is_empty,
        }


def validate_rating(rating, max_stars=DEFAULT_MAX_STARS):
    """Return the rating as a float, or raise RatingRangeError."""
    if isinstance(max_stars, bool) or not isinstance(max_stars, int) or max_stars < 1:
        raise RatingRangeError(
            rating, max_stars,
            message='max_stars must be a positive integer, got %(max_stars)s',
        )

    if isinstance(rating, bool) or not isinstance(rating, (int, float, Decimal)):
        raise RatingRangeError(rating, max_stars)

    try:
        value = float(rating)
    except (TypeError, ValueError):
        raise RatingRangeError(rating, max_stars)

    # NaN fails both comparisons
    if not 0 <= value <= max_stars:
        raise RatingRangeError(rating, max_stars)
    return value


def classify(rating, max_stars=DEFAULT_MAX_STARS):
    """
    Classify every star position for `rating` on a 1..max_stars scale.

    Position i is FILLED when i <= rating, HALF when i - 0.5 <= rating,
    otherwise EMPTY. Only the first half candidate is kept.
    Example for rating=4.5 -> (FILLED, FILLED, FILLED, FILLED, HALF)
    """
    value = validate_rating(rating, max_stars)

    cells = []
    half_used = False
    for position in range(1, max_stars + 1):
        if position <= value:
            cells.append(StarCell.FILLED)
        elif position - 0.5 <= value and not half_used:
            cells.append(StarCell.HALF)
            half_used = True
        else:
            cells.append(StarCell.EMPTY)
    return tuple(cells)


def count_stars(rating, max_stars=DEFAULT_MAX_STARS):
    """Return (filled, half, empty) computed from floor and fraction."""
    value = validate_rating(rating, max_stars)
    filled = int(math.floor(value))
    half = 1 if value - filled >= 0.5 and filled < max_stars else 0
    return filled, half, max_stars - filled - half


def tally(cells):
    """Return (filled, half, empty) counts for classified cells."""
    return (
        sum(1 for cell in cells if cell is StarCell.FILLED),
        sum(1 for cell in cells if cell is StarCell.HALF),
        sum(1 for cell in cells if cell is StarCell.EMPTY),
    )


def to_glyph_string(cells):
    return ''.join(GLYPHS[cell] for cell in cells)


def to_markup_fragment(cells):
    """Render cells as <div class="star-rating"> with one <span> per star."""
    return format_html(
        '<div class="star-rating">{}</div>',
        format_html_join(
            '',
            '<span class="star {}">{}</span>',
            ((cell.value, GLYPHS[cell]) for cell in cells),
        ),
    )


def to_structured(cells):
    return [StarPosition(position, cell) for position, cell in enumerate(cells, start=1)]


def render_stars(rating, max_stars=DEFAULT_MAX_STARS, output='glyph'):
    """Classify `rating` and project it; unknown output names fall back to glyph."""
    cells = classify(rating, max_stars)
    if output == 'markup':
        return to_markup_fragment(cells)
    if output == 'structured':
        return [star.as_dict() for star in to_structured(cells)]
    return to_glyph_string(cells)

import json

from django.core.management.base import BaseCommand, CommandError

from ratings.conf import get_max_stars
from ratings.stars import RatingRangeError, classify, tally, to_glyph_string, to_markup_fragment, to_structured
from catalog.services import add_stars_to_product

DEMO_RATINGS = [0, 1.5, 2.5, 3, 4.2, 5]


class Command(BaseCommand):
    help = 'Prints glyph, markup and structured star output for sample ratings'

    def add_arguments(self, parser):
        parser.add_argument('ratings', nargs='*', type=float, help='Ratings to render instead of the samples')
        parser.add_argument('--max-stars', type=int, default=None, help='Defaults to STAR_RATING_MAX_STARS')

    def handle(self, *args, **options):
        ratings = options['ratings'] or DEMO_RATINGS
        max_stars = options['max_stars'] or get_max_stars()

        self.stdout.write(self.style.MIGRATE_HEADING('=== Star Rating Examples ==='))

        for rating in ratings:
            try:
                cells = classify(rating, max_stars)
            except RatingRangeError as e:
                raise CommandError(e.messages[0])
            filled, half, empty = tally(cells)
            self.stdout.write(f'Rating {rating}: {filled} filled, {half} half, {empty} empty')
            self.stdout.write(f'  Glyphs: {to_glyph_string(cells)}')
            self.stdout.write(f'  Markup: {to_markup_fragment(cells)}')
            self.stdout.write(f'  Structured: {[star.as_dict() for star in to_structured(cells)]}')

        product = add_stars_to_product({'name': 'Awesome Product', 'price': 29.99}, 4.2)
        self.stdout.write('')
        self.stdout.write(self.style.SUCCESS('Product with stars:'))
        self.stdout.write(json.dumps(product, indent=2, ensure_ascii=False))

from decimal import Decimal

from django.test import SimpleTestCase, TestCase

from catalog.models import Product
from catalog.services import add_stars_to_product, format_currency, product_card
from ratings.stars import RatingRangeError


class FormatCurrencyTests(SimpleTestCase):
    def test_formats_cents(self):
        self.assertEqual(format_currency(9999), '99.99')
        self.assertEqual(format_currency(19999), '199.99')
        self.assertEqual(format_currency(5), '0.05')
        self.assertEqual(format_currency(0), '0.00')
        self.assertEqual(format_currency(100), '1.00')


class AddStarsToProductTests(SimpleTestCase):
    def test_creates_rating_mapping(self):
        product = add_stars_to_product({'name': 'Awesome Product', 'price': 29.99}, 4.2)
        self.assertEqual(product['rating'], {'value': 4.2, 'stars': '★★★★☆'})

    def test_keeps_existing_rating_fields(self):
        product = {'rating': {'count': 12}}
        add_stars_to_product(product, 2.5, output='structured')
        self.assertEqual(product['rating']['count'], 12)
        self.assertEqual(product['rating']['stars'][2]['type'], 'half')

    def test_invalid_rating_leaves_product_untouched(self):
        product = {'name': 'Broken'}
        with self.assertRaises(RatingRangeError):
            add_stars_to_product(product, 9)
        self.assertNotIn('rating', product)


class ProductCardTests(TestCase):
    def setUp(self):
        self.product = Product.objects.create(
            name='Smart Watch',
            image_url='https://via.placeholder.com/200x200',
            rating_stars=Decimal('3.8'),
            rating_count=89,
            price_cents=19999,
        )

    def test_glyph_card(self):
        card = product_card(self.product)
        self.assertEqual(card['stars'], '★★★⯪☆')
        self.assertEqual(card['price'], '199.99')
        self.assertEqual(card['image'], 'https://via.placeholder.com/200x200')
        self.assertEqual(card['rating_count'], 89)

    def test_markup_card(self):
        card = product_card(self.product, style='markup')
        self.assertIn('<span class="star half">', card['stars'])

    def test_invalid_stored_rating_is_logged(self):
        Product.objects.filter(pk=self.product.pk).update(rating_stars=Decimal('7.5'))
        self.product.refresh_from_db()
        with self.assertLogs('catalog.services', level='WARNING'):
            card = product_card(self.product)
        self.assertEqual(card['stars'], '')

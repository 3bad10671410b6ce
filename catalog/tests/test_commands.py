from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from catalog.models import Product


class DemonstrateStarRatingTests(TestCase):
    def test_prints_sample_ratings(self):
        out = StringIO()
        call_command('demonstrate_star_rating', stdout=out)
        output = out.getvalue()
        self.assertIn('Rating 2.5: 2 filled, 1 half, 2 empty', output)
        self.assertIn('Glyphs: ★★★★☆', output)
        self.assertIn('"stars": "★★★★☆"', output)

    def test_custom_ratings(self):
        out = StringIO()
        call_command('demonstrate_star_rating', '7.5', '--max-stars', '10', stdout=out)
        self.assertIn('Rating 7.5: 7 filled, 1 half, 2 empty', out.getvalue())

    def test_out_of_range_rating(self):
        with self.assertRaisesMessage(CommandError, 'Rating must be between 0 and 5'):
            call_command('demonstrate_star_rating', '6', stdout=StringIO())


class LoadSampleProductsTests(TestCase):
    def test_loads_samples_once(self):
        call_command('load_sample_products', stdout=StringIO())
        call_command('load_sample_products', stdout=StringIO())
        self.assertEqual(Product.objects.count(), 3)
        watch = Product.objects.get(name='Smart Watch')
        self.assertEqual(watch.price_cents, 19999)
        self.assertEqual(watch.star_glyphs, '★★★⯪☆')

    def test_clear(self):
        Product.objects.create(name='Old', price_cents=1)
        call_command('load_sample_products', '--clear', stdout=StringIO())
        self.assertFalse(Product.objects.filter(name='Old').exists())

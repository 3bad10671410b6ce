from decimal import Decimal

from django.core.management.base import BaseCommand
from catalog.models import Product
from catalog.services import SAMPLE_PRODUCTS


class Command(BaseCommand):
    help = 'Creates the sample products (headphones, smart watch, speaker)'

    def add_arguments(self, parser):
        parser.add_argument('--clear', action='store_true', help='Delete all products first')

    def handle(self, *args, **options):
        """
        Safe to run repeatedly: products are matched by name and updated
        """
        if options['clear']:
            deleted, _ = Product.objects.all().delete()
            self.stdout.write(self.style.WARNING(f'Deleted {deleted} products'))

        created_count = 0
        for sample in SAMPLE_PRODUCTS:
            product, created = Product.objects.update_or_create(
                name=sample['name'],
                defaults={
                    'image_url': sample['image'],
                    'rating_stars': Decimal(str(sample['rating']['stars'])),
                    'rating_count': sample['rating']['count'],
                    'price_cents': sample['price_cents'],
                    'is_active': True,
                }
            )
            if created:
                created_count += 1
            self.stdout.write(f'  - {product.name} {product.star_glyphs} (${product.price_display})')

        self.stdout.write(
            self.style.SUCCESS(
                f'Loaded {len(SAMPLE_PRODUCTS)} sample products ({created_count} new)'
            )
        )

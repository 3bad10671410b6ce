from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.urls import reverse

from catalog.services import format_currency
from ratings.conf import get_max_stars
from ratings.stars import RatingRangeError, classify, validate_rating, to_glyph_string, to_markup_fragment


class Product(models.Model):
    name = models.CharField(max_length=200)
    image = models.ImageField(upload_to='product_images/', null=True, blank=True)
    image_url = models.URLField(blank=True, help_text="Remote image, used when no file is uploaded")
    rating_stars = models.DecimalField(
        max_digits=4,
        decimal_places=1,
        default=Decimal('0.0'),
        validators=[MinValueValidator(Decimal('0'))],
        help_text="Average rating from 0 to STAR_RATING_MAX_STARS",
    )
    rating_count = models.PositiveIntegerField(default=0)
    price_cents = models.PositiveIntegerField(help_text="Price in cents")
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at']

    def __str__(self):
        return self.name

    def clean(self):
        if self.rating_stars is not None:
            try:
                validate_rating(self.rating_stars, get_max_stars())
            except RatingRangeError as e:
                raise ValidationError({'rating_stars': e.messages})

    @property
    def image_src(self):
        """Uploaded image URL if present, otherwise the remote image URL"""
        if self.image:
            return self.image.url
        return self.image_url

    @property
    def price_display(self):
        return format_currency(self.price_cents)

    @property
    def star_cells(self):
        return classify(self.rating_stars, get_max_stars())

    @property
    def star_glyphs(self):
        return to_glyph_string(self.star_cells)

    @property
    def star_markup(self):
        return to_markup_fragment(self.star_cells)

    def get_absolute_url(self):
        return reverse('catalog:product_detail', args=[str(self.id)])

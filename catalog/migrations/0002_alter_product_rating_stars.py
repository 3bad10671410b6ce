from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('catalog', '0001_initial'),
    ]

    operations = [
        migrations.AlterField(
            model_name='product',
            name='rating_stars',
            field=models.DecimalField(decimal_places=1, default=Decimal('0.0'), help_text='Average rating from 0 to STAR_RATING_MAX_STARS', max_digits=4, validators=[django.core.validators.MinValueValidator(Decimal('0'))]),
        ),
    ]

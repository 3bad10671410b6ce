from django import forms
from crispy_forms.helper import FormHelper
from crispy_forms.layout import Layout, Row, Column, Submit, HTML
from crispy_forms.bootstrap import FormActions
from ratings.conf import get_max_stars
from ratings.stars import validate_rating
from .models import Product


class ProductForm(forms.ModelForm):
    """Form for creating/editing products"""

    class Meta:
        model = Product
        fields = ['name', 'image', 'image_url', 'rating_stars', 'rating_count', 'price_cents', 'is_active']
        widgets = {
            'rating_stars': forms.NumberInput(attrs={'step': '0.1', 'min': 0}),
            'price_cents': forms.NumberInput(attrs={'min': 0}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.helper = FormHelper()
        self.helper.form_method = 'post'
        self.helper.form_enctype = 'multipart/form-data'
        self.helper.layout = Layout(
            'name',
            Row(
                Column('image', css_class='form-group col-md-6 mb-3'),
                Column('image_url', css_class='form-group col-md-6 mb-3'),
                css_class='form-row'
            ),
            Row(
                Column('rating_stars', css_class='form-group col-md-4 mb-3'),
                Column('rating_count', css_class='form-group col-md-4 mb-3'),
                Column('price_cents', css_class='form-group col-md-4 mb-3'),
                css_class='form-row'
            ),
            'is_active',
            FormActions(
                Submit('submit', 'Save product', css_class='btn btn-primary btn-lg'),
                HTML('<a href="javascript:history.back()" class="btn btn-secondary btn-lg ms-2">Cancel</a>'),
                css_class='mt-3'
            )
        )

        self.fields['name'].widget.attrs.update({
            'class': 'form-control',
            'placeholder': 'Product name...'
        })
        self.fields['image_url'].widget.attrs.update({
            'class': 'form-control',
            'placeholder': 'https://...'
        })

    def clean_rating_stars(self):
        rating = self.cleaned_data.get('rating_stars')
        if rating is not None:
            # RatingRangeError is a ValidationError, so it becomes a field error
            validate_rating(rating, get_max_stars())
        return rating

    def clean(self):
        cleaned_data = super().clean()
        image = cleaned_data.get('image')
        image_url = cleaned_data.get('image_url')

        if not image and not image_url:
            raise forms.ValidationError('Upload an image or provide an image URL')

        return cleaned_data

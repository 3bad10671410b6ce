import json
from decimal import Decimal

from django.test import TestCase
from django.urls import reverse

from catalog.models import Product


class CartApiTests(TestCase):
    def setUp(self):
        self.product = Product.objects.create(
            name='Wireless Headphones',
            rating_stars=Decimal('4.2'),
            price_cents=9999,
        )

    def add(self, payload):
        return self.client.post(
            reverse('booking:add_to_cart'),
            data=json.dumps(payload),
            content_type='application/json',
        )

    def test_add_to_cart(self):
        response = self.add({'product_id': self.product.pk})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['cart_count'], 1)

        response = self.add({'product_id': str(self.product.pk), 'quantity': 2})
        data = response.json()
        self.assertEqual(data['cart_count'], 3)
        self.assertEqual(data['item_quantity'], 3)
        self.assertEqual(data['total_price'], '299.97')

        response = self.client.get(reverse('booking:get_cart_count'))
        self.assertEqual(response.json()['cart_count'], 3)

    def test_unknown_product(self):
        response = self.add({'product_id': 999})
        self.assertEqual(response.status_code, 404)
        self.assertFalse(response.json()['success'])

    def test_inactive_product(self):
        self.product.is_active = False
        self.product.save()
        response = self.add({'product_id': self.product.pk})
        self.assertEqual(response.status_code, 404)

    def test_bad_payloads(self):
        for payload in ({}, {'product_id': self.product.pk, 'quantity': 0}, {'product_id': self.product.pk, 'quantity': 'x'}):
            with self.subTest(payload=payload):
                self.assertEqual(self.add(payload).status_code, 400)

        response = self.client.post(reverse('booking:add_to_cart'), data='not json', content_type='application/json')
        self.assertEqual(response.status_code, 400)

    def test_get_not_allowed(self):
        response = self.client.get(reverse('booking:add_to_cart'))
        self.assertEqual(response.status_code, 405)

    def test_empty_cart_count(self):
        response = self.client.get(reverse('booking:get_cart_count'))
        self.assertEqual(response.json(), {'success': True, 'cart_count': 0})


class CartViewTests(TestCase):
    def test_cart_page_lists_items(self):
        product = Product.objects.create(name='Smart Watch', rating_stars=Decimal('3.8'), price_cents=19999)
        self.client.post(
            reverse('booking:add_to_cart'),
            data=json.dumps({'product_id': product.pk, 'quantity': 2}),
            content_type='application/json',
        )
        response = self.client.get(reverse('booking:cart'))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'Smart Watch')
        self.assertContains(response, '$399.98')
        self.assertEqual(response.context['total_items'], 2)

    def test_empty_cart(self):
        response = self.client.get(reverse('booking:cart'))
        self.assertContains(response, 'Your cart is empty.')


class CartCountConsistencyTests(TestCase):
    def setUp(self):
        self.watch = Product.objects.create(name='Smart Watch', rating_stars=Decimal('3.8'), price_cents=19999)
        self.speaker = Product.objects.create(name='Bluetooth Speaker', rating_stars=Decimal('4.7'), price_cents=4999)
        for product, quantity in ((self.watch, 2), (self.speaker, 1)):
            self.client.post(
                reverse('booking:add_to_cart'),
                data=json.dumps({'product_id': product.pk, 'quantity': quantity}),
                content_type='application/json',
            )

    def test_badge_shows_session_count(self):
        response = self.client.get(reverse('catalog:product_list'))
        self.assertContains(response, '<span class="js-cart-count">3</span>', html=False)

    def test_deactivated_product_is_dropped_everywhere(self):
        self.speaker.is_active = False
        self.speaker.save()

        response = self.client.get(reverse('booking:get_cart_count'))
        self.assertEqual(response.json()['cart_count'], 2)

        response = self.client.get(reverse('booking:cart'))
        self.assertEqual(response.context['total_items'], 2)
        self.assertContains(response, '<span class="js-cart-count">2</span>', html=False)
        self.assertEqual(self.client.session['cart'], {str(self.watch.pk): 2})

    def test_deleted_product_is_dropped(self):
        self.watch.delete()
        response = self.client.get(reverse('booking:get_cart_count'))
        self.assertEqual(response.json()['cart_count'], 1)

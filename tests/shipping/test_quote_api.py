from store_admin.shipping.models import ShippingRate
from tests import BaseTestCase

class TestShippingQuoteApi(BaseTestCase):
    def setUp(self):
        super().setUp()
        self.create_users('test_shipping_quote_api')
        self.try_add_entities([
            ShippingRate(id=1, name='Fort', pincode='400001', zone='West',
                         base_cost=40, estimated_delivery_min=1,
                         estimated_delivery_max=2),
            ShippingRate(id=2, pincode_prefix='4000', base_cost=60),
            ShippingRate(id=3, pincode_prefix='40', base_cost=80),
            ShippingRate(id=4, zone='Rest', base_cost=100, surcharge=20,
                         free_shipping_threshold=2000)
        ])

    def test_get_quote(self):
        res = self.client.get('/api/v1/shipping/quote?pincode=400001&subtotal=100')
        self.assertEqual(res.status_code, 200)
        self.assertEqual(res.json['data'], {
            'rate_id': 1,
            'name': 'Fort',
            'zone': 'West',
            'pincode': '400001',
            'pincode_prefix': None,
            'shipping_cost': 40.0,
            'is_free': False,
            'subtotal': 100.0,
            'free_shipping_threshold': None,
            'estimated_delivery_min': 1,
            'estimated_delivery_max': 2
        })
        res = self.client.get('/api/v1/shipping/quote?pincode=400099')
        self.assertEqual(res.json['data']['rate_id'], 2)
        self.assertEqual(res.json['data']['shipping_cost'], 60)
        res = self.client.get('/api/v1/shipping/quote?pincode=500001&subtotal=10')
        self.assertEqual(res.json['data']['rate_id'], 4)
        self.assertEqual(res.json['data']['shipping_cost'], 120)
        res = self.client.get('/api/v1/shipping/quote?pincode=500001&subtotal=2000')
        self.assertTrue(res.json['data']['is_free'])
        self.assertEqual(res.json['data']['shipping_cost'], 0)

    def test_get_quote_bad_request(self):
        res = self.client.get('/api/v1/shipping/quote')
        self.assertEqual(res.status_code, 400)
        res = self.client.get('/api/v1/shipping/quote?pincode=%20%20')
        self.assertEqual(res.status_code, 400)
        res = self.client.get('/api/v1/shipping/quote?pincode=400001&subtotal=-1')
        self.assertEqual(res.status_code, 400)
        res = self.client.get('/api/v1/shipping/quote?pincode=400001&subtotal=abc')
        self.assertEqual(res.status_code, 400)
        res = self.client.get('/api/v1/shipping/quote?pincode=400001&subtotal=nan')
        self.assertEqual(res.status_code, 400)

    def test_get_quote_not_found(self):
        self.as_admin(lambda client: client.delete('/api/v1/admin/shipping/rate/4'))
        res = self.client.get('/api/v1/shipping/quote?pincode=500001')
        self.assertEqual(res.status_code, 404)

    def test_rate_change_clears_cached_quotes(self):
        res = self.client.get('/api/v1/shipping/quote?pincode=400001&subtotal=0')
        self.assertEqual(res.json['data']['shipping_cost'], 40)
        res = self.as_admin(
            lambda client: client.post('/api/v1/admin/shipping/rate/1', json={
                'base_cost': 45
            }))
        self.assertEqual(res.status_code, 200)
        res = self.client.get('/api/v1/shipping/quote?pincode=400001&subtotal=0')
        self.assertEqual(res.json['data']['shipping_cost'], 45)

        self.as_admin(lambda client: client.delete('/api/v1/admin/shipping/rate/1'))
        res = self.client.get('/api/v1/shipping/quote?pincode=400001&subtotal=0')
        self.assertEqual(res.json['data']['rate_id'], 2)

'''Result of the shipping rate resolution'''
from __future__ import annotations
from decimal import Decimal

from .shipping_rate import ShippingRate

class ShippingQuote:
    rate: ShippingRate
    shipping_cost: Decimal
    is_free: bool
    subtotal: Decimal

    def __init__(self, rate: ShippingRate, shipping_cost: Decimal,
                 is_free: bool, subtotal: Decimal):
        self.rate = rate
        self.shipping_cost = shipping_cost
        self.is_free = is_free
        self.subtotal = subtotal

    def __repr__(self):
        return f"<ShippingQuote: {self.rate!r}/{self.shipping_cost}/free={self.is_free}>"

    def to_dict(self):
        return {
            'rate_id': self.rate.id,
            'name': self.rate.name,
            'zone': self.rate.zone,
            'pincode': self.rate.pincode,
            'pincode_prefix': self.rate.pincode_prefix,
            'shipping_cost': float(self.shipping_cost),
            'is_free': self.is_free,
            'subtotal': float(self.subtotal),
            'free_shipping_threshold': float(self.rate.free_shipping_threshold) \
                if self.rate.free_shipping_threshold is not None else None,
            'estimated_delivery_min': self.rate.estimated_delivery_min,
            'estimated_delivery_max': self.rate.estimated_delivery_max
        }

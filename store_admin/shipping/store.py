'''
Read access to the shipping rate rules used by the rate resolution
'''
from typing import Optional

from .models.shipping_rate import ShippingRate

class ShippingRateStore:
    '''Rule store backed by the application database.
    Only active rules are ever returned'''

    def find_exact(self, pincode: str) -> Optional[ShippingRate]:
        return ShippingRate.query \
            .filter_by(pincode=pincode, is_active=True) \
            .order_by(*ShippingRate.last_changed_first()) \
            .first()

    def find_with_prefix(self) -> list[ShippingRate]:
        return ShippingRate.query \
            .filter_by(is_active=True) \
            .filter(ShippingRate.pincode_prefix != None) \
            .order_by(*ShippingRate.last_changed_first()) \
            .all()

    def find_default(self) -> Optional[ShippingRate]:
        return ShippingRate.query \
            .filter_by(pincode=None, pincode_prefix=None, is_active=True) \
            .order_by(*ShippingRate.last_changed_first()) \
            .first()

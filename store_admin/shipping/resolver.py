'''
Shipping rate resolution by destination pincode.

A rule is looked up in three tiers, the first tier with a match wins:

1. an active rule for exactly this pincode;
2. an active rule whose pincode prefix matches, the longest prefix wins;
3. an active default rule having neither pincode nor prefix.

Each tier is queried only when the previous one has no match.
'''
from __future__ import annotations
from decimal import Decimal
import logging
from typing import Any, Optional

from store_admin.exceptions import NoShippingRateError

from .models import ShippingQuote, ShippingRate
from .store import ShippingRateStore

def _to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))

class ShippingRateResolver:
    '''Finds the shipping rate applicable to a pincode and quotes the cost'''

    def __init__(self, store=None):
        self._store = store if store is not None else ShippingRateStore()

    def resolve(self, pincode: Optional[str], subtotal) -> Optional[ShippingQuote]:
        '''
        Returns shipping quote for provided pincode and order subtotal
        or None if no rule is applicable to the pincode

        :param pincode: destination pincode, surrounding whitespace is ignored
        :param subtotal: order subtotal, used for free shipping eligibility
        '''
        logger = logging.getLogger('ShippingRateResolver::resolve()')
        pincode = str(pincode).strip() if pincode is not None else ''
        if not pincode:
            logger.debug("No pincode is provided")
            return None

        rate = self._store.find_exact(pincode)
        if rate is not None:
            logger.debug("Exact rate %s matches pincode %s", rate, pincode)
            return self._build_quote(rate, subtotal)

        rate = self._find_by_prefix(pincode)
        if rate is not None:
            logger.debug("Prefix rate %s matches pincode %s", rate, pincode)
            return self._build_quote(rate, subtotal)

        rate = self._store.find_default()
        if rate is not None:
            logger.debug("Default rate %s is used for pincode %s", rate, pincode)
            return self._build_quote(rate, subtotal)

        logger.info("No shipping rate is found for pincode %s", pincode)
        return None

    def get_quote(self, pincode: Optional[str], subtotal) -> ShippingQuote:
        '''Same as resolve() but raises NoShippingRateError instead of returning None'''
        quote = self.resolve(pincode, subtotal)
        if quote is None:
            raise NoShippingRateError(pincode)
        return quote

    def _find_by_prefix(self, pincode: str) -> Optional[ShippingRate]:
        matching = [rate for rate in self._store.find_with_prefix()
                    if rate.pincode_prefix and pincode.startswith(rate.pincode_prefix)]
        if not matching:
            return None
        # max() keeps the first of equally long prefixes, which is the most
        # recently updated one as the store returns them in that order
        return max(matching, key=lambda rate: len(rate.pincode_prefix))

    @staticmethod
    def _build_quote(rate: ShippingRate, subtotal) -> ShippingQuote:
        subtotal = _to_decimal(subtotal)
        threshold = rate.free_shipping_threshold
        is_free = threshold is not None and subtotal >= _to_decimal(threshold)
        if is_free:
            shipping_cost = Decimal(0)
        else:
            shipping_cost = max(
                Decimal(0),
                _to_decimal(rate.base_cost) + _to_decimal(rate.surcharge))
        return ShippingQuote(rate=rate, shipping_cost=shipping_cost,
                             is_free=is_free, subtotal=subtotal)

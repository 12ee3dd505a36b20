from .shipping_rate import RateTier, ShippingRate
from .shipping_quote import ShippingQuote

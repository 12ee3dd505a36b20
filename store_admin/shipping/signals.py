"""Defines shipping rates signals"""
from store_admin import signals

# The signal is sent after a shipping rate is created or modified
# The argument is the shipping rate object
shipping_rate_saved = signals.signal("shipping.shipping_rate.saved")
# The signal is sent after a shipping rate is deleted
shipping_rate_deleted = signals.signal("shipping.shipping_rate.deleted")

__all__ = [
    'shipping_rate_deleted',
    'shipping_rate_saved',
]

'''Reactions of the shipping component to its own signals'''
import logging

from store_admin import cache

def on_shipping_rate_changed(sender, **_extra):
    '''Drops all cached quotes'''
    logging.getLogger('on_shipping_rate_changed()') \
        .debug("%s has changed. Clearing cached quotes", sender)
    cache.clear()

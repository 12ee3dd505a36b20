'''
Shipping rate rule model
'''
from __future__ import annotations
import enum

from sqlalchemy import Boolean, Column, Integer, Numeric, String, Text, or_

from store_admin import db
from store_admin.models.base import BaseModel

class RateTier(enum.Enum):
    '''Specificity of a shipping rate rule. Exact rules win over prefix ones,
    prefix rules win over the default one'''
    EXACT = 'exact'
    PREFIX = 'prefix'
    DEFAULT = 'default'

class ShippingRate(BaseModel, db.Model): #type: ignore
    '''
    Cost of shipping to a destination pincode, pincode prefix or anywhere else
    '''
    __tablename__ = 'shipping_rates'

    name = Column(String(128))
    pincode = Column(String(16), index=True)
    pincode_prefix = Column(String(16), index=True)
    zone = Column(String(64), index=True)
    base_cost = Column(Numeric(10, 2), nullable=False, default=0)
    surcharge = Column(Numeric(10, 2), nullable=False, default=0)
    free_shipping_threshold = Column(Numeric(10, 2))
    estimated_delivery_min = Column(Integer)
    estimated_delivery_max = Column(Integer)
    is_active = Column(Boolean, nullable=False, default=True)
    notes = Column(Text)

    @property
    def tier(self) -> RateTier:
        if self.pincode:
            return RateTier.EXACT
        if self.pincode_prefix:
            return RateTier.PREFIX
        return RateTier.DEFAULT

    @classmethod
    def get_filter(cls, base_filter, column=None, filter_value=None):
        '''Case insensitive search over the targeting fields of the rate'''
        if filter_value is None:
            return base_filter
        return base_filter.filter(or_(
            cls.name.ilike(f'%{filter_value}%'),
            cls.zone.ilike(f'%{filter_value}%'),
            cls.pincode.ilike(f'%{filter_value}%'),
            cls.pincode_prefix.ilike(f'%{filter_value}%')
        ))

    def __repr__(self):
        target = self.pincode or self.pincode_prefix or '*'
        return f"<ShippingRate {self.id}: {self.tier.value}/{target}/{self.base_cost}>"

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'pincode': self.pincode,
            'pincode_prefix': self.pincode_prefix,
            'zone': self.zone,
            'tier': self.tier.value,
            'base_cost': float(self.base_cost) \
                if self.base_cost is not None else None,
            'surcharge': float(self.surcharge) \
                if self.surcharge is not None else 0.0,
            'free_shipping_threshold': float(self.free_shipping_threshold) \
                if self.free_shipping_threshold is not None else None,
            'estimated_delivery_min': self.estimated_delivery_min,
            'estimated_delivery_max': self.estimated_delivery_max,
            'is_active': self.is_active,
            'notes': self.notes,
            'when_created': self.when_created.strftime('%Y-%m-%d %H:%M:%S') \
                if self.when_created else None,
            'when_changed': self.when_changed.strftime('%Y-%m-%d %H:%M:%S') \
                if self.when_changed else None
        }

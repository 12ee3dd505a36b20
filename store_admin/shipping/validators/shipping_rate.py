'''Validator for shipping rate input'''
from __future__ import annotations
from decimal import Decimal
from typing import Any, Optional as Opt

from werkzeug.datastructures import MultiDict
from wtforms import BooleanField, DecimalField, Form, IntegerField, StringField
from wtforms.validators import Length, NumberRange, Optional, Regexp

from ..models.shipping_rate import ShippingRate

TARGETING_FIELDS = ('pincode', 'pincode_prefix', 'zone')
REQUIRED_MONEY_FIELDS = ('base_cost', 'surcharge')

def _strip(value):
    if value is None:
        return None
    value = str(value).strip()
    return value or None

def _round_money(value):
    if value is None:
        return None
    if not value.is_finite():
        raise ValueError('Not a valid decimal value.')
    return value.quantize(Decimal('0.01'))

class _MoneyField(DecimalField):
    def process_formdata(self, valuelist):
        # JSON floats are converted through str() so 59.99 stays 59.99
        super().process_formdata([str(v) for v in valuelist])

class ShippingRateValidator(Form):
    '''Validator for shipping rate JSON payload.
    Fields absent from the payload are taken from the existing rate'''
    name = StringField(validators=[Optional(), Length(max=128)], filters=[_strip])
    pincode = StringField(
        validators=[Optional(), Length(max=16), Regexp(r'^[0-9A-Za-z-]+$')],
        filters=[_strip])
    pincode_prefix = StringField(
        validators=[Optional(), Length(max=16), Regexp(r'^[0-9A-Za-z-]+$')],
        filters=[_strip])
    zone = StringField(validators=[Optional(), Length(max=64)], filters=[_strip])
    base_cost = _MoneyField(
        validators=[Optional(), NumberRange(min=0)], filters=[_round_money])
    surcharge = _MoneyField(validators=[Optional()], filters=[_round_money])
    free_shipping_threshold = _MoneyField(
        validators=[Optional(), NumberRange(min=0)], filters=[_round_money])
    estimated_delivery_min = IntegerField(validators=[Optional(), NumberRange(min=0)])
    estimated_delivery_max = IntegerField(validators=[Optional(), NumberRange(min=0)])
    is_active = BooleanField(false_values=(False, 'false', 'False', '0', 0, ''))
    notes = StringField(validators=[Optional()])

    def __init__(self, payload: dict[str, Any], rate: Opt[ShippingRate]=None):
        self._payload = payload
        self._rate = rate
        super().__init__(MultiDict(
            {key: value for key, value in payload.items() if value is not None}
        ))

    def __enter__(self):
        return self

    def __exit__(self, *_args):
        del self

    def get_values(self) -> dict[str, Any]:
        '''Returns cleaned values of the fields present in the payload.
        Cleared base cost and surcharge become 0'''
        values = {name: field.data for name, field in self._fields.items()
                  if name in self._payload}
        for name in REQUIRED_MONEY_FIELDS:
            if name in values and values[name] is None:
                values[name] = Decimal(0)
        return values

    def _effective(self, name):
        if name in self._payload:
            return self[name].data
        return getattr(self._rate, name) if self._rate is not None else None

    def validate(self, extra_validators=None):
        is_valid = super().validate(extra_validators)
        if self._effective('pincode') and self._effective('pincode_prefix'):
            self.form_errors.append(
                'Specify either a full pincode or a prefix, not both')
            is_valid = False
        touches_targeting = any(f in self._payload for f in TARGETING_FIELDS)
        if (self._rate is None or touches_targeting) \
           and not any(self._effective(f) for f in TARGETING_FIELDS):
            self.form_errors.append(
                'Shipping rate must target at least a pincode, prefix, or zone')
            is_valid = False
        delivery_min = self._effective('estimated_delivery_min')
        delivery_max = self._effective('estimated_delivery_max')
        if delivery_min is not None and delivery_max is not None \
           and delivery_min > delivery_max:
            self.form_errors.append(
                'Minimum delivery estimate must not be more than maximum')
            is_valid = False
        return is_valid

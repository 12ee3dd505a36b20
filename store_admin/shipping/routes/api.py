from __future__ import annotations
import logging
import math

from flask import Response, abort, jsonify, request
from flask_security import roles_required  # type: ignore

from store_admin import cache, db
from store_admin.exceptions import FilterError, NoShippingRateError
from store_admin.shipping import bp_api_admin, bp_api_user
from store_admin.shipping.models import ShippingRate
from store_admin.shipping.resolver import ShippingRateResolver
from store_admin.shipping.signals import shipping_rate_deleted, shipping_rate_saved
from store_admin.shipping.validators.shipping_rate import ShippingRateValidator
from store_admin.tools import get_bool, modify_object, paginate_query

EDITABLE_ATTRIBUTES = [
    'name', 'pincode', 'pincode_prefix', 'zone', 'base_cost', 'surcharge',
    'free_shipping_threshold', 'estimated_delivery_min',
    'estimated_delivery_max', 'is_active', 'notes'
]


@bp_api_user.route("/quote")
@cache.cached(query_string=True)
def get_shipping_quote():
    """
    Returns shipping quote for provided pincode and order subtotal
    Accepts parameters:
        pincode - destination pincode
        subtotal - order subtotal, 0 if not provided
    Returns JSON
    """
    logger = logging.getLogger("get_shipping_quote()")
    pincode = (request.args.get("pincode") or "").strip()
    if not pincode:
        return jsonify({"error": "pincode query parameter is required"}), 400
    try:
        subtotal = float(request.args.get("subtotal") or 0)
    except ValueError:
        subtotal = -1
    if not math.isfinite(subtotal) or subtotal < 0:
        return jsonify({"error": "subtotal must be a positive number"}), 400

    logger.info("Calculating shipping quote to %s for subtotal %s", pincode, subtotal)
    try:
        quote = ShippingRateResolver().get_quote(pincode, subtotal)
    except NoShippingRateError:
        return jsonify({"error": "No shipping rate configured for this pincode"}), 404
    return jsonify({"data": quote.to_dict()})


@bp_api_admin.route("/rate")
@roles_required("admin")
def admin_get_rates():
    """Returns list of shipping rates filtered, sorted and paginated
    according to query parameters"""
    rates = ShippingRate.query
    if request.args.get("zone"):
        rates = rates.filter_by(zone=request.args["zone"])
    is_active = get_bool(request.args.get("is_active"))
    if is_active is not None:
        rates = rates.filter_by(is_active=is_active)
    if request.args.get("search"):
        rates = ShippingRate.get_filter(
            rates, filter_value=request.args["search"].strip())
    try:
        rates, pagination = paginate_query(rates, request.args)
    except FilterError as ex:
        return jsonify({"error": str(ex)}), 400
    return jsonify({
        "data": [rate.to_dict() for rate in rates],
        "pagination": pagination
    })


@bp_api_admin.route("/rate/<int:rate_id>")
@roles_required("admin")
def admin_get_rate(rate_id):
    """Returns a single shipping rate"""
    rate = ShippingRate.query.get(rate_id)
    if rate is None:
        abort(Response(f"No shipping rate <{rate_id}> was found", status=404))
    return jsonify({"data": [rate.to_dict()]})


@bp_api_admin.route("/rate/<int:rate_id>", methods=["POST"])
@bp_api_admin.route("/rate", methods=["POST"], defaults={"rate_id": None})
@roles_required("admin")
def admin_save_rate(rate_id):
    """Creates or modifies existing shipping rate"""
    logger = logging.getLogger("admin_save_rate()")
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return jsonify({"error": "No payload"}), 400
    if rate_id is None:
        rate = None
    else:
        rate = ShippingRate.query.get(rate_id)
        if rate is None:
            return jsonify({"error": f"No shipping rate <{rate_id}> was found"}), 404

    with ShippingRateValidator(payload, rate) as validator:
        if not validator.validate():
            return jsonify({
                "data": [],
                "error": "; ".join(
                    ["Couldn't save a shipping rate"] + validator.form_errors),
                "fieldErrors": [{"name": name, "status": "; ".join(errors)}
                                for name, errors in validator.errors.items()
                                if name is not None]
            }), 400
        values = validator.get_values()

    if rate is None:
        rate = ShippingRate()
        db.session.add(rate)
    modify_object(rate, values, EDITABLE_ATTRIBUTES)
    try:
        db.session.commit()
    except Exception as ex:
        logger.exception("Couldn't save shipping rate %s", rate_id)
        db.session.rollback()
        return jsonify({"error": str(ex)}), 500
    logger.info("Shipping rate %s is saved", rate)
    shipping_rate_saved.send(rate)
    return jsonify({"data": [rate.to_dict()]}), (200 if rate_id else 201)


@bp_api_admin.route("/rate/<int:rate_id>", methods=["DELETE"])
@roles_required("admin")
def admin_delete_rate(rate_id):
    """Deletes existing shipping rate"""
    rate = ShippingRate.query.get(rate_id)
    if rate is None:
        abort(Response(f"No shipping rate <{rate_id}> was found", status=404))
    logger = logging.getLogger("admin_delete_rate()")
    rate.delete()
    try:
        db.session.commit()
    except Exception as ex:
        logger.exception("Couldn't delete shipping rate %s", rate_id)
        db.session.rollback()
        return jsonify({"error": str(ex)}), 500
    logger.info("Shipping rate %s is deleted", rate_id)
    shipping_rate_deleted.send(ShippingRate, rate_id=rate_id)
    return jsonify({"status": "success"})

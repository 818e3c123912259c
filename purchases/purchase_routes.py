from flask import Blueprint, request, jsonify
from purchases.purchase_service import PurchaseService
from purchases.purchase_item import format_purchase_item
from line_items.exceptions import InvalidLineItemException, InvalidProductException
from routes.payload import get_item, get_items, get_product, get_round_off
from src.serializers import serialize_for_json

bp = Blueprint("purchases", __name__)


@bp.route("/items/calculate", methods=["POST"])
def calculate_purchase_item():
    payload = request.get_json(silent=True) or {}
    try:
        item = get_item(payload)
    except InvalidLineItemException as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(serialize_for_json(PurchaseService.calculate_purchase_item_values(item))), 200


@bp.route("/items/from-product", methods=["POST"])
def purchase_item_from_product():
    payload = request.get_json(silent=True) or {}
    try:
        product = get_product(payload)
    except InvalidProductException as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(serialize_for_json(format_purchase_item(product))), 201


@bp.route("/item-totals", methods=["POST"])
def purchase_item_totals():
    payload = request.get_json(silent=True) or {}
    try:
        items = get_items(payload)
    except InvalidLineItemException as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(serialize_for_json(PurchaseService.calculate_purchase_item_totals(items))), 200


@bp.route("/totals", methods=["POST"])
def purchase_totals():
    payload = request.get_json(silent=True) or {}
    try:
        items = get_items(payload)
    except InvalidLineItemException as e:
        return jsonify({"error": str(e)}), 400

    totals = PurchaseService.calculate_purchase_totals(items, get_round_off(payload))
    return jsonify(serialize_for_json(totals)), 200

from flask import Blueprint, request, jsonify
from invoices.invoice_service import InvoiceService
from invoices.invoice_item import format_invoice_item
from invoices.discount_display import format_discount_display
from line_items.exceptions import InvalidLineItemException, InvalidProductException
from routes.payload import get_item, get_items, get_product, get_round_off
from src.serializers import serialize_for_json

bp = Blueprint("invoices", __name__)


@bp.route("/items/calculate", methods=["POST"])
def calculate_item():
    payload = request.get_json(silent=True) or {}
    try:
        item = get_item(payload)
    except InvalidLineItemException as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(serialize_for_json(InvoiceService.calculate_item_values(item))), 200


@bp.route("/items/from-product", methods=["POST"])
def item_from_product():
    payload = request.get_json(silent=True) or {}
    try:
        product = get_product(payload)
    except InvalidProductException as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(serialize_for_json(format_invoice_item(product))), 201


@bp.route("/items/discount-display", methods=["POST"])
def discount_display():
    payload = request.get_json(silent=True) or {}
    try:
        item = get_item(payload)
    except InvalidLineItemException as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(format_discount_display(item)), 200


@bp.route("/item-totals", methods=["POST"])
def item_totals():
    payload = request.get_json(silent=True) or {}
    try:
        items = get_items(payload)
    except InvalidLineItemException as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(serialize_for_json(InvoiceService.calculate_item_totals(items))), 200


@bp.route("/totals", methods=["POST"])
def invoice_totals():
    payload = request.get_json(silent=True) or {}
    try:
        items = get_items(payload)
    except InvalidLineItemException as e:
        return jsonify({"error": str(e)}), 400

    totals = InvoiceService.calculate_invoice_totals(items, get_round_off(payload))
    return jsonify(serialize_for_json(totals)), 200

from flask import Blueprint, jsonify, request
from steam_relay.errors import NotFound
from steam_relay.extensions import get_catalog, get_partner_client

catalog_bp = Blueprint('catalog', __name__)


@catalog_bp.route('/GetItemPrices', methods=['GET'])
def get_item_prices():
    """
    List item prices, or a single item when itemId is given
    ---
    tags:
      - Catalog
    parameters:
      - name: itemId
        in: query
        type: integer
        required: false
    responses:
      200:
        description: Full product list, or one product
      404:
        description: Item not found
      500:
        description: Catalog could not be read
    """
    catalog = get_catalog()
    item_id = request.args.get('itemId')

    if item_id:
        product = catalog.find(item_id)
        if not product:
            raise NotFound('Item not found')
        return jsonify({'success': True, 'product': product}), 200

    return jsonify({'success': True, 'products': catalog.load()}), 200


@catalog_bp.route('/GetAssetPrices', methods=['GET'])
def get_asset_prices():
    """
    Relay Steam asset prices for the configured app
    ---
    tags:
      - Catalog
    parameters:
      - name: currency
        in: query
        type: string
        required: true
    responses:
      200:
        description: Raw Steam reply under data
      400:
        description: Currency missing
      500:
        description: Steam error
    """
    currency = request.args.get('currency')
    if not currency:
        return jsonify({'success': False, 'message': 'Currency is required.'}), 400

    data = get_partner_client().get_asset_prices(currency)
    return jsonify({'success': True, 'data': data}), 200

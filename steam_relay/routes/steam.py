from flask import Blueprint, jsonify
from steam_relay.extensions import get_partner_client
from steam_relay.validation import (
    CHECK_APP_OWNERSHIP_FIELDS,
    CHECK_PURCHASE_STATUS_FIELDS,
    FINALIZE_PURCHASE_FIELDS,
    GET_RELIABLE_USER_INFO_FIELDS,
    INIT_PURCHASE_FIELDS,
    request_body,
    require_fields,
)

steam_bp = Blueprint('steam', __name__)


def relay_success(data):
    return jsonify({**data, 'success': True}), 200


@steam_bp.route('/GetReliableUserInfo', methods=['POST'])
@require_fields(*GET_RELIABLE_USER_INFO_FIELDS)
def get_reliable_user_info():
    """
    Check whether a user can be trusted for a microtransaction
    ---
    tags:
      - Steam
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - steamId
          properties:
            steamId:
              type: string
    responses:
      200:
        description: Partner reply relayed
      400:
        description: Missing field
      500:
        description: Steam error
    """
    data = request_body()
    result = get_partner_client().get_reliable_user_info(data['steamId'])
    return relay_success(result)


@steam_bp.route('/CheckAppOwnership', methods=['POST'])
@require_fields(*CHECK_APP_OWNERSHIP_FIELDS)
def check_app_ownership():
    """
    Check whether a user owns the app
    ---
    tags:
      - Steam
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - steamId
            - appId
          properties:
            steamId:
              type: string
            appId:
              type: string
    responses:
      200:
        description: Ownership relayed
      400:
        description: Missing field
      500:
        description: Steam error
    """
    data = request_body()
    result = get_partner_client().check_app_ownership(data['steamId'], data['appId'])
    return relay_success(result)


@steam_bp.route('/InitPurchase', methods=['POST'])
@require_fields(*INIT_PURCHASE_FIELDS)
def init_purchase():
    """
    Start a microtransaction; Steam then asks the user to authorize it in the overlay
    ---
    tags:
      - Purchase
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - appId
            - category
            - itemDescription
            - itemId
            - orderId
            - steamId
          properties:
            appId:
              type: string
            category:
              type: string
            itemDescription:
              type: string
            itemId:
              type: string
            orderId:
              type: string
            steamId:
              type: string
            currencyAmount:
              type: integer
              description: Price in cents
            currency:
              type: string
            language:
              type: string
            qty:
              type: integer
    responses:
      200:
        description: Transaction created, body includes transid
      400:
        description: Missing field
      500:
        description: Steam error
    """
    result = get_partner_client().init_purchase(request_body())
    return relay_success(result)


@steam_bp.route('/FinalizePurchase', methods=['POST'])
@require_fields(*FINALIZE_PURCHASE_FIELDS)
def finalize_purchase():
    """
    Complete a transaction the user has authorized
    ---
    tags:
      - Purchase
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - appId
            - orderId
          properties:
            appId:
              type: string
            orderId:
              type: string
    responses:
      200:
        description: Transaction finalized
      400:
        description: Missing field
      500:
        description: Steam error (including not yet authorized)
    """
    data = request_body()
    result = get_partner_client().finalize_purchase(data['appId'], data['orderId'])
    return relay_success(result)


@steam_bp.route('/CheckPurchaseStatus', methods=['POST'])
@require_fields(*CHECK_PURCHASE_STATUS_FIELDS)
def check_purchase_status():
    """
    Query the current status of a transaction
    ---
    tags:
      - Purchase
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required:
            - appId
            - orderId
            - transId
          properties:
            appId:
              type: string
            orderId:
              type: string
            transId:
              type: string
    responses:
      200:
        description: Transaction status with per-item status
      400:
        description: Missing field
      500:
        description: Steam error
    """
    data = request_body()
    result = get_partner_client().check_purchase_status(data['appId'], data['orderId'], data['transId'])
    return relay_success(result)

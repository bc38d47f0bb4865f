"""
HTTP client for the relay's lifecycle routes.
Every call carries the game's appId, the way the game adds it to each request.
"""

import logging
import requests

logger = logging.getLogger(__name__)


class RelayClientError(Exception):
    def __init__(self, message, status_code=None, body=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


class RelayClient:
    def __init__(self, base_url, app_id, session=None, timeout=10.0):
        self.base_url = base_url.rstrip("/")
        self.app_id = str(app_id)
        self.session = session or requests.Session()
        self.timeout = timeout

    def call(self, endpoint, data=None):
        payload = dict(data or {})
        payload["appId"] = self.app_id
        url = f"{self.base_url}/{endpoint}"

        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("Relay call %s failed: %s", endpoint, e)
            raise RelayClientError(str(e))

        try:
            body = response.json()
        except ValueError:
            raise RelayClientError(
                f"{endpoint} returned a non-JSON body", status_code=response.status_code
            )

        if response.status_code >= 400 or not isinstance(body, dict):
            message = (body.get("error") or body.get("message")) if isinstance(body, dict) else None
            raise RelayClientError(
                message or f"{endpoint} failed with status {response.status_code}",
                status_code=response.status_code,
                body=body,
            )
        return body

    def init_purchase(self, order_id, steam_id, item):
        data = {
            "orderId": str(order_id),
            "steamId": str(steam_id),
            "itemId": item.item_id,
            "itemDescription": item.description,
            "category": item.category,
            "currencyAmount": item.amount,
            "qty": item.qty,
        }
        if item.currency:
            data["currency"] = item.currency
        return self.call("InitPurchase", data)

    def finalize_purchase(self, order_id):
        return self.call("FinalizePurchase", {"orderId": str(order_id)})

    def check_purchase_status(self, order_id, trans_id):
        return self.call("CheckPurchaseStatus", {"orderId": str(order_id), "transId": str(trans_id)})

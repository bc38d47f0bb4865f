"""
Steam Service — Relay to the Steam partner Web API
Attaches the web API key and app id to each call, makes exactly one
outbound request and unwraps the partner reply. No retries.
"""

import logging
import requests
from steam_relay.errors import UpstreamError

logger = logging.getLogger(__name__)

UPSTREAM_ERROR_MESSAGE = "Error communicating with Steam."
ASSET_PRICES_ERROR_MESSAGE = "Error fetching asset prices."


class SteamPartnerClient:
    def __init__(self, config, session=None):
        self.config = config
        self.session = session or requests.Session()

    # --- transport ------------------------------------------------------

    def _url(self, interface, method, version):
        return f"{self.config.partner_base_url.rstrip('/')}/{interface}/{method}/v{version}/"

    def request_raw(self, http_method, interface, method, version, params, app_id=None,
                    error_message=UPSTREAM_ERROR_MESSAGE):
        """
        Call the partner API and return its decoded JSON body untouched.
        Raises UpstreamError on transport failure, non-2xx status or non-JSON body.
        """
        payload = {"key": self.config.web_api_key, "appid": app_id or self.config.app_id}
        payload.update(params)
        url = self._url(interface, method, version)

        try:
            if http_method == "POST":
                response = self.session.post(url, data=payload, timeout=self.config.timeout)
            else:
                response = self.session.get(url, params=payload, timeout=self.config.timeout)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            logger.error("Steam %s/%s request failed: %s", interface, method, e)
            raise UpstreamError(error_message, detail=str(e))
        except ValueError as e:
            logger.error("Steam %s/%s returned a malformed body: %s", interface, method, e)
            raise UpstreamError(error_message, detail=str(e))

    def request(self, http_method, interface, method, version, params, app_id=None):
        body = self.request_raw(http_method, interface, method, version, params, app_id=app_id)
        return unwrap_reply(body, f"{interface}/{method}")

    # --- operations -----------------------------------------------------

    def get_reliable_user_info(self, steam_id):
        return self.request(
            "GET", self.config.microtxn_interface, "GetReliableUserInfo", 1,
            {"steamid": steam_id},
        )

    def check_app_ownership(self, steam_id, app_id):
        return self.request(
            "GET", "ISteamUser", "CheckAppOwnership", 4,
            {"steamid": steam_id}, app_id=app_id,
        )

    def init_purchase(self, data):
        params = {
            "orderid": data["orderId"],
            "steamid": data["steamId"],
            "itemcount": 1,
            "language": data.get("language") or self.config.default_language,
            "currency": data.get("currency") or self.config.default_currency,
            "itemid[0]": data["itemId"],
            "qty[0]": data.get("qty") or 1,
            "amount[0]": data.get("currencyAmount") or 0,
            "description[0]": data["itemDescription"],
            "category[0]": data["category"],
        }
        return self.request(
            "POST", self.config.microtxn_interface, "InitTxn", 3,
            params, app_id=data["appId"],
        )

    def finalize_purchase(self, app_id, order_id):
        return self.request(
            "POST", self.config.microtxn_interface, "FinalizeTxn", 2,
            {"orderid": order_id}, app_id=app_id,
        )

    def check_purchase_status(self, app_id, order_id, trans_id):
        return self.request(
            "GET", self.config.microtxn_interface, "QueryTxn", 3,
            {"orderid": order_id, "transid": trans_id}, app_id=app_id,
        )

    def get_asset_prices(self, currency):
        return self.request_raw(
            "GET", "ISteamEconomy", "GetAssetPrices", 1,
            {"currency": currency},
            error_message=ASSET_PRICES_ERROR_MESSAGE,
        )


def unwrap_reply(body, operation):
    """
    Steam nests every reply under a single key, e.g.
        {"response": {"result": "OK", "params": {...}}}
        {"appownership": {"ownsapp": true, "result": "OK", ...}}
    Returns the params (or the inner object) for an OK result.
    """
    if not isinstance(body, dict) or len(body) != 1:
        logger.error("Steam %s reply has unexpected shape: %r", operation, body)
        raise UpstreamError(UPSTREAM_ERROR_MESSAGE, detail="unexpected reply shape")

    inner = next(iter(body.values()))
    if not isinstance(inner, dict):
        logger.error("Steam %s reply has unexpected shape: %r", operation, body)
        raise UpstreamError(UPSTREAM_ERROR_MESSAGE, detail="unexpected reply shape")

    result = inner.get("result")
    if result is not None and result != "OK":
        error = inner.get("error") or {}
        detail = f"{error.get('errorcode')}: {error.get('errordesc')}"
        logger.error("Steam %s reported %s (%s)", operation, result, detail)
        raise UpstreamError(UPSTREAM_ERROR_MESSAGE, detail=detail)

    params = inner.get("params")
    if isinstance(params, dict):
        return params
    return {k: v for k, v in inner.items() if k != "result"}

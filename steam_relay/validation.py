"""
Required-field checks for inbound request bodies.
Presence only: a field that is absent, null, empty or otherwise falsy is missing.
"""

from functools import wraps
from flask import request
from steam_relay.errors import ValidationError

GET_RELIABLE_USER_INFO_FIELDS = ("steamId",)
CHECK_APP_OWNERSHIP_FIELDS = ("steamId", "appId")
INIT_PURCHASE_FIELDS = ("appId", "category", "itemDescription", "itemId", "orderId", "steamId")
FINALIZE_PURCHASE_FIELDS = ("appId", "orderId")
CHECK_PURCHASE_STATUS_FIELDS = ("appId", "orderId", "transId")


def request_body():
    """JSON body of the current request, or {} when it is missing or not an object."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return {}
    return data


def check_required_fields(fields, data):
    # First missing field in listed order wins
    for field_name in fields:
        if not data.get(field_name):
            raise ValidationError(field_name)


def require_fields(*fields):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            check_required_fields(fields, request_body())
            return view(*args, **kwargs)
        return wrapper
    return decorator

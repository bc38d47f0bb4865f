import json
import os
import tempfile
from unittest import mock

import requests

from steam_relay.app import create_app
from steam_relay.config import RelayConfig

TEST_KEY = "test-web-api-key"
TEST_APP_ID = "1432860"

PRODUCTS = [
    {"id": 1, "name": "1000 Coins", "price": 199},
    {"id": 2, "name": "5000 Coins", "price": 899},
]


def fake_response(body, status=200):
    resp = requests.Response()
    resp.status_code = status
    if isinstance(body, (bytes, str)):
        resp._content = body.encode() if isinstance(body, str) else body
    else:
        resp._content = json.dumps(body).encode()
    resp.headers["Content-Type"] = "application/json"
    return resp


def steam_ok(params):
    return {"response": {"result": "OK", "params": params}}


def steam_failure(code, desc):
    return {"response": {"result": "Failure", "error": {"errorcode": code, "errordesc": desc}}}


class RelayTestMixin:
    """Builds an app whose outbound Steam session is a mock."""

    environment = "production"

    def setUp(self):
        tmp = tempfile.NamedTemporaryFile("w", suffix=".json", delete=False)
        json.dump(PRODUCTS, tmp)
        tmp.close()
        self.products_file = tmp.name
        self.addCleanup(os.remove, self.products_file)

        self.session = mock.Mock(spec=requests.Session)
        self.config = RelayConfig(
            web_api_key=TEST_KEY,
            app_id=TEST_APP_ID,
            products_file=self.products_file,
            environment=self.environment,
        )
        self.app = create_app(self.config, session=self.session)
        self.client = self.app.test_client()

    def outbound_calls(self):
        return self.session.get.call_args_list + self.session.post.call_args_list

    def assert_no_outbound_call(self):
        self.session.get.assert_not_called()
        self.session.post.assert_not_called()

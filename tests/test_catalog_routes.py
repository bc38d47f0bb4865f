import unittest

import requests

from tests.support import PRODUCTS, TEST_APP_ID, TEST_KEY, RelayTestMixin, fake_response


class TestGetItemPrices(RelayTestMixin, unittest.TestCase):
    def test_without_item_id_returns_full_catalog(self):
        resp = self.client.get("/GetItemPrices")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json(), {"success": True, "products": PRODUCTS})

    def test_known_item_id_returns_that_record(self):
        resp = self.client.get("/GetItemPrices?itemId=2")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json(), {"success": True, "product": PRODUCTS[1]})

    def test_unknown_item_id_is_404(self):
        resp = self.client.get("/GetItemPrices?itemId=99")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.get_json(), {"success": False, "message": "Item not found"})

    def test_non_numeric_item_id_is_404(self):
        resp = self.client.get("/GetItemPrices?itemId=coins")
        self.assertEqual(resp.status_code, 404)

    def test_unreadable_catalog_is_500(self):
        self.app.extensions["price_catalog"].path = self.products_file + ".missing"

        resp = self.client.get("/GetItemPrices")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.get_json(), {"success": False, "message": "Error retrieving prices."})

    def test_corrupt_catalog_is_500(self):
        with open(self.products_file, "w") as f:
            f.write("{not json")

        resp = self.client.get("/GetItemPrices?itemId=1")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.get_json(), {"success": False, "message": "Error processing data."})

    def test_catalog_that_is_not_a_list_is_500(self):
        with open(self.products_file, "w") as f:
            f.write("{}")

        resp = self.client.get("/GetItemPrices")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.get_json(), {"success": False, "message": "Error processing data."})

    def test_catalog_is_read_on_every_request(self):
        with open(self.products_file, "w") as f:
            f.write('[{"id": 7, "price": 1}]')

        resp = self.client.get("/GetItemPrices?itemId=7")
        self.assertEqual(resp.status_code, 200)

    def test_item_prices_never_call_steam(self):
        self.client.get("/GetItemPrices")
        self.client.get("/GetItemPrices?itemId=1")
        self.assert_no_outbound_call()


class TestGetAssetPrices(RelayTestMixin, unittest.TestCase):
    def test_missing_currency_is_400_without_outbound_call(self):
        resp = self.client.get("/GetAssetPrices")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.get_json(), {"success": False, "message": "Currency is required."})
        self.assert_no_outbound_call()

    def test_currency_triggers_one_call_with_app_id_and_key(self):
        steam_body = {"result": {"success": True, "assets": [{"name": "item_id_1", "prices": {"USD": 199}}]}}
        self.session.get.return_value = fake_response(steam_body)

        resp = self.client.get("/GetAssetPrices?currency=USD")

        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json(), {"success": True, "data": steam_body})
        self.assertEqual(len(self.outbound_calls()), 1)
        args, kwargs = self.session.get.call_args
        self.assertTrue(args[0].endswith("/ISteamEconomy/GetAssetPrices/v1/"))
        self.assertEqual(
            kwargs["params"], {"key": TEST_KEY, "appid": TEST_APP_ID, "currency": "USD"}
        )

    def test_upstream_error_is_500(self):
        self.session.get.side_effect = requests.Timeout("timed out")

        resp = self.client.get("/GetAssetPrices?currency=EUR")

        self.assertEqual(resp.status_code, 500)
        self.assertEqual(
            resp.get_json(), {"success": False, "message": "Error fetching asset prices."}
        )


if __name__ == '__main__':
    unittest.main()

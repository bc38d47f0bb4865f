"""
Catalog Service — static item price list
Reads products.json on every lookup; the file is never written.
"""

import json
import logging
from steam_relay.errors import CatalogError

logger = logging.getLogger(__name__)


class PriceCatalog:
    def __init__(self, path):
        self.path = path

    def load(self):
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            logger.error("Error reading %s: %s", self.path, e)
            raise CatalogError("Error retrieving prices.")

        try:
            products = json.loads(raw)
        except ValueError as e:
            logger.error("Error parsing %s: %s", self.path, e)
            raise CatalogError("Error processing data.")

        if not isinstance(products, list):
            logger.error("Error parsing %s: expected a list, got %s", self.path, type(products).__name__)
            raise CatalogError("Error processing data.")
        return products

    def find(self, item_id):
        """Product whose integer id equals item_id, or None (also for non-numeric ids)."""
        products = self.load()
        try:
            wanted = int(item_id)
        except (TypeError, ValueError):
            return None

        for product in products:
            if isinstance(product, dict) and product.get("id") == wanted:
                return product
        return None

"""
Per-app service objects, attached in create_app() and looked up by routes.
"""

from flask import current_app

PARTNER_KEY = "steam_partner"
CATALOG_KEY = "price_catalog"


def init_extensions(app, partner_client, catalog):
    app.extensions[PARTNER_KEY] = partner_client
    app.extensions[CATALOG_KEY] = catalog


def get_partner_client():
    return current_app.extensions[PARTNER_KEY]


def get_catalog():
    return current_app.extensions[CATALOG_KEY]

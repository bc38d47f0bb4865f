"""
Steam Relay — Flask application
Validates purchase requests from the game client and relays them to the
Steam partner API with the server-held web API key.
"""

import logging
import os
import traceback
from datetime import datetime, timezone
from flask import Flask, jsonify
from flasgger import Swagger
from werkzeug.exceptions import HTTPException
from steam_relay.config import RelayConfig
from steam_relay.errors import RelayError
from steam_relay.extensions import init_extensions
from steam_relay.services.catalog_service import PriceCatalog
from steam_relay.services.steam_service import SteamPartnerClient

logger = logging.getLogger(__name__)


def create_app(config=None, session=None):
    config = config or RelayConfig.from_env()

    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=logging.DEBUG if config.is_development else logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    app = Flask(__name__)
    app.config['RELAY'] = config
    app.json.sort_keys = False

    init_extensions(
        app,
        partner_client=SteamPartnerClient(config, session=session),
        catalog=PriceCatalog(config.products_file),
    )

    # Initialize Swagger
    swagger_config = {
        "headers": [],
        "specs": [
            {
                "endpoint": 'apispec_1',
                "route": '/apispec_1.json',
                "rule_filter": lambda rule: True,  # all in
                "model_filter": lambda tag: True,  # all in
            }
        ],
        "static_url_path": "/flasgger_static",
        "swagger_ui": True,
        "specs_route": "/apidocs/"
    }
    Swagger(app, config=swagger_config)

    # --- Status / health ------------------------------------------------
    @app.route("/", methods=["GET"])
    def status():
        return jsonify({"status": True}), 200

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({
            "status": "healthy",
            "service": "steam-relay",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }), 200

    # --- Register Blueprints --------------------------------------------
    from steam_relay.routes.steam import steam_bp
    app.register_blueprint(steam_bp)

    from steam_relay.routes.catalog import catalog_bp
    app.register_blueprint(catalog_bp)

    register_error_handlers(app)

    logger.info(
        "steam relay ready (app_id=%s, sandbox=%s, env=%s)",
        config.app_id, config.use_sandbox, config.environment,
    )
    return app


def register_error_handlers(app):
    @app.errorhandler(RelayError)
    def handle_relay_error(e):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        # Unmatched routes (any method) get an empty 404
        if e.code in (404, 405):
            return "", 404
        return e

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception("Unhandled error")
        body = {
            "error": 500,
            "message": str(e) or "Something went wrong",
        }
        if app.config['RELAY'].is_development:
            body["stack"] = "".join(traceback.format_exception(type(e), e, e.__traceback__))
        return jsonify(body), 500


if __name__ == '__main__':
    app = create_app()
    app.run(
        host=os.environ.get('LISTEN_HOST', '0.0.0.0'),
        port=int(os.environ.get('LISTEN_PORT', '5000')),
        debug=app.config['RELAY'].is_development,
    )

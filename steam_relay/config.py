"""
Relay configuration.
Built once (usually from the environment) and passed into create_app().
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv

DEFAULT_PRODUCTS_FILE = os.path.join(os.path.dirname(__file__), "products.json")


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class RelayConfig:
    web_api_key: str = field(default="", repr=False)
    app_id: str = "1432860"
    partner_base_url: str = "https://partner.steam-api.com"
    use_sandbox: bool = False
    timeout: float = 10.0
    default_currency: str = "USD"
    default_language: str = "en"
    products_file: str = DEFAULT_PRODUCTS_FILE
    environment: str = "production"

    @property
    def is_development(self):
        return self.environment == "development"

    @property
    def microtxn_interface(self):
        return "ISteamMicroTxnSandbox" if self.use_sandbox else "ISteamMicroTxn"

    @classmethod
    def from_env(cls, dotenv_path=None):
        load_dotenv(dotenv_path)

        return cls(
            web_api_key=os.environ.get("STEAM_WEB_API_KEY", ""),
            app_id=os.environ.get("STEAM_APP_ID", "1432860"),
            partner_base_url=os.environ.get("STEAM_PARTNER_URL", "https://partner.steam-api.com"),
            use_sandbox=_env_bool("STEAM_USE_SANDBOX"),
            timeout=float(os.environ.get("STEAM_TIMEOUT", "10")),
            default_currency=os.environ.get("STEAM_CURRENCY", "USD"),
            default_language=os.environ.get("STEAM_LANGUAGE", "en"),
            products_file=os.environ.get("PRODUCTS_FILE", DEFAULT_PRODUCTS_FILE),
            environment=os.environ.get("APP_ENV", "production"),
        )

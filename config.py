import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./zzp_billing.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", 0))
    FORWARDED_ALLOW_IPS = data.get("FORWARDED_ALLOW_IPS", "127.0.0.1")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))

    # Dutch BTW (VAT)
    VAT_RATE = str(data.get("VAT_RATE", "0.21"))
    DEFAULT_CURRENCY = data.get("DEFAULT_CURRENCY", "EUR")

    # Legal invoice numbering: {PREFIX}-{year}-{sequence:04d}
    INVOICE_NUMBER_PREFIX = data.get("INVOICE_NUMBER_PREFIX", "FACT")
    INVOICE_ISSUE_MAX_ATTEMPTS = int(data.get("INVOICE_ISSUE_MAX_ATTEMPTS", 5))

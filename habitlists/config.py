import os

# ── Configuration ─────────────────────────────────────────────────────────
BASE_DIR    = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DB_PATH     = os.environ.get("DATABASE_PATH", os.path.join(BASE_DIR, "db.sqlite"))
LOG_DIR     = os.environ.get("LOG_DIR", os.path.join(BASE_DIR, "logs"))
LOG_LEVEL   = os.environ.get("LOG_LEVEL", "INFO").upper()
ENV         = os.environ.get("FLASK_ENV", "development")
IS_PROD     = ENV == "production"
PORT        = int(os.environ.get("PORT", 3000))

SEED_SAMPLE_DATA   = os.environ.get("SEED_SAMPLE_DATA", "1").lower() not in ("0", "false", "no")
MAX_CONTENT_LENGTH = int(os.environ.get("MAX_CONTENT_LENGTH", 2 * 1024 * 1024))  # 2 MB


def as_flask_config():
    return {
        "DATABASE_PATH": DB_PATH,
        "LOG_DIR": LOG_DIR,
        "LOG_LEVEL": LOG_LEVEL,
        "ENV_NAME": ENV,
        "IS_PROD": IS_PROD,
        "SEED_SAMPLE_DATA": SEED_SAMPLE_DATA,
        "MAX_CONTENT_LENGTH": MAX_CONTENT_LENGTH,
    }

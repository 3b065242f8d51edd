import logging
import os
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

STORE_VARS = ["SUPABASE_URL", "SUPABASE_ANON_KEY"]


def _optional_float(value):
    if value in (None, ""):
        return None
    return float(value)


class Config:
    """Settings read from the environment (and a local .env file)."""

    def __init__(self, **values):
        self.values = values

    @classmethod
    def from_env(cls):
        load_dotenv()

        # Missing store credentials are reported on each submission, not at startup
        missing_vars = [var for var in STORE_VARS if not os.getenv(var)]
        if missing_vars and not os.getenv("DATABASE_URL"):
            logger.warning(f"Consultation store is not configured; missing: {', '.join(missing_vars)}")

        return cls(
            SUPABASE_URL=os.getenv("SUPABASE_URL", ""),
            SUPABASE_ANON_KEY=os.getenv("SUPABASE_ANON_KEY", ""),
            SUPABASE_TIMEOUT=_optional_float(os.getenv("SUPABASE_TIMEOUT")),
            SQLALCHEMY_DATABASE_URI=os.getenv("DATABASE_URL"),
            DEBUG=os.getenv("FLASK_DEBUG", "False").lower() == "true",
        )

    def apply(self, app):
        app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
        app.config.update(self.values)

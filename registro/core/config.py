# ===========================================================================
# File: registro/core/config.py
# ===========================================================================
import logging
from pathlib import Path

from dotenv import load_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load env vars
load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_ADMIN_PASS = "cambia-esto"


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    ADMIN_USER: str = "admin"
    ADMIN_PASS: str = DEFAULT_ADMIN_PASS
    # Refuse to start while ADMIN_PASS is still the placeholder
    REQUIRE_SECURE_ADMIN_PASS: bool = False

    DATA_FILE: Path = Path("registro_estudiantes.json")
    STATIC_DIR: Path = PACKAGE_DIR / "static"

    MAX_BODY_BYTES: int = 1_000_000
    SUBMIT_RATE_LIMIT: str = "30/minute"
    RATE_LIMIT_ENABLED: bool = True

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")


settings = Settings()

# Logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("registro")

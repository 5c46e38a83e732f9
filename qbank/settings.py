import os

from starlette.config import Config

# 🌐 Load environment configuration
if os.path.exists(".env"):
    # Loading configuration from .env file 📂
    config = Config(".env")
else:
    # No .env present, fall back to process environment 🛠️
    config = Config()


# 🗂️ Where the scraped JSON question files live
DATA_DIR = config("DATA_DIR", cast=str, default=os.getcwd())

# 🔧 "development" exposes error details in 500 envelopes
APP_ENV = config("APP_ENV", cast=str, default="production")
PORT = config("PORT", cast=int, default=5000)

# 🕷️ Scraper defaults
SCRAPER_USER_AGENT = config(
    "SCRAPER_USER_AGENT",
    cast=str,
    default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
)
# empty means the requests default (no timeout)
SCRAPER_TIMEOUT = config("SCRAPER_TIMEOUT", cast=str, default="")
IMAGE_BASE_URL = config(
    "IMAGE_BASE_URL", cast=str, default="https://www.examsnet.com/images/questions/"
)
IMAGE_EXTENSION = config("IMAGE_EXTENSION", cast=str, default=".png")


def is_development() -> bool:
    return APP_ENV.lower() == "development"


def scraper_timeout():
    """Return the configured request timeout in seconds, or None."""
    return float(SCRAPER_TIMEOUT) if SCRAPER_TIMEOUT else None

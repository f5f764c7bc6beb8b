import os

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    # Comma-separated list
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "5000"))

    # Templates are cached after first load unless reloading is switched on
    TEMPLATES_AUTO_RELOAD = _env_flag("TEMPLATES_AUTO_RELOAD")

    # Shown on the index page; there is no real signed-in user
    DISPLAY_USERNAME = os.getenv("DISPLAY_USERNAME", "Matthew")
    USERNAME_COOKIE = "cafego_username"

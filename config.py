import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./travelcraft.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 5000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["http://localhost:5173"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "travelcraft.sid")
    SESSION_WINDOW_MINUTES = int(data.get("SESSION_WINDOW_MINUTES", 30))
    SESSION_COOKIE_SECURE = bool(data.get("SESSION_COOKIE_SECURE", False))
    SESSION_SWEEP_INTERVAL_SECONDS = int(data.get("SESSION_SWEEP_INTERVAL_SECONDS", 300))

    GEMINI_API_KEY = data.get("GEMINI_API_KEY", os.getenv("GEMINI_API_KEY", ""))
    GEMINI_MODEL = data.get("GEMINI_MODEL", "gemini-1.5-flash")
    DEEPSEEK_API_KEY = data.get("DEEPSEEK_API_KEY", os.getenv("DEEPSEEK_API_KEY", ""))
    VENICE_API_KEY = data.get("VENICE_API_KEY", os.getenv("VENICE_API_KEY", ""))
    CHAT_TIMEOUT_SECONDS = float(data.get("CHAT_TIMEOUT_SECONDS", 30))

import os
from dotenv import load_dotenv
load_dotenv()


def _env_bool(name, default):
    val = os.getenv(name)
    if val is None or val == "":
        return default
    return val.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:54321")
    BACKEND_KEY = os.getenv("BACKEND_KEY")
    BACKEND_TIMEOUT = float(os.getenv("BACKEND_TIMEOUT", "15"))
    # empty REDIS_URL runs background jobs inline
    REDIS_URL = os.getenv("REDIS_URL", "")
    HIRING_RATE_ASYNC = _env_bool("HIRING_RATE_ASYNC", True)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    WTF_CSRF_ENABLED = _env_bool("WTF_CSRF_ENABLED", True)

# robust .env loading
import os
from pathlib import Path

from dotenv import load_dotenv

# 1) load from CWD (project root when you run commands there)
load_dotenv(override=False)
# 2) also try repo root even if code runs from src/
REPO_ROOT = Path(__file__).resolve().parents[2]
_env_path = REPO_ROOT / ".env"
if _env_path.exists():
    load_dotenv(dotenv_path=_env_path, override=True)

# --- Flask / server ---
FLASK_ENV = os.getenv("FLASK_ENV", "production")
CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
STATIC_DIR = os.getenv("STATIC_DIR", str(REPO_ROOT / "public"))

# --- MongoDB: registration store (registrations + enrollment flag) ---
REGISTRATION_MONGODB_URI = os.getenv("REGISTRATION_MONGODB_URI") or os.getenv("MONGO_URI")
REGISTRATION_DB = os.getenv("REGISTRATION_DB", "registrations")

# --- MongoDB: news store ---
NEWS_MONGODB_URI = os.getenv("NEWS_MONGODB_URI")
NEWS_DB = os.getenv("NEWS_DB", "news")

MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

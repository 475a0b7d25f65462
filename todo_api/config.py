from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the repo root .env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")

PRIVATE_KEY_PATH = os.getenv("PRIVATE_KEY_PATH", str(REPO_ROOT / "keys" / "app.rsa"))
PUBLIC_KEY_PATH = os.getenv("PUBLIC_KEY_PATH", str(REPO_ROOT / "keys" / "app.rsa.pub"))

# The single accepted login pair.
LOGIN_USER = os.getenv("LOGIN_USER", "test")
LOGIN_PASSWORD = os.getenv("LOGIN_PASSWORD", "known")

ACCESS_TOKEN_EXPIRE_HOURS = int(os.getenv("ACCESS_TOKEN_EXPIRE_HOURS", "10"))

_cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:3000")
CORS_ORIGINS = [origin.strip() for origin in _cors_origins.split(",") if origin.strip()]

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the repo root .env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./kanban.db")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Base URL the board client talks to
API_URL = os.getenv("API_URL", "http://localhost:8000")

_cors_origins = os.getenv("CORS_ORIGINS", "http://localhost:3000")
CORS_ORIGINS = [origin.strip() for origin in _cors_origins.split(",") if origin.strip()]

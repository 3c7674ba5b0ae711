import os
from dotenv import load_dotenv

# Load .env from the backend directory
load_dotenv(os.path.join(os.path.dirname(__file__), "..", "..", ".env"))

SECRET_KEY: str = os.getenv("SECRET_KEY", "embed-filter-dev-secret-change-in-prod")
ALGORITHM: str = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "1440"))  # 24h

# Database — stored in backend/data/
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
BACKEND_DIR = os.path.abspath(os.path.join(BASE_DIR, "..", ".."))

DATABASE_PATH: str = os.getenv(
    "DATABASE_PATH",
    os.path.join(BACKEND_DIR, "data", "embed.db"),
)

# The front page course
SITE_ID: int = int(os.getenv("SITE_ID", "1"))

FILTER_NAME: str = os.getenv("FILTER_NAME", "embedquestion")
FILTER_COMPONENT: str = "filter_" + FILTER_NAME

# Comma separated behaviour names hidden from the archetypal list
DISABLED_BEHAVIOURS: list[str] = [
    b.strip() for b in os.getenv("DISABLED_BEHAVIOURS", "").split(",") if b.strip()
]

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

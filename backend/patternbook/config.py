import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./patternbook.db")
CATALOG_EXTRA_PATH = os.getenv("CATALOG_EXTRA_PATH", "")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",") if o.strip()]
DEMO_OUTPUT_LIMIT = int(os.getenv("DEMO_OUTPUT_LIMIT", "20000"))
RECENT_RUNS_LIMIT = int(os.getenv("RECENT_RUNS_LIMIT", "20"))

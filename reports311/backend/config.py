import os
from pathlib import Path

# Repo root is always the parent of /backend (i.e., reports311/)
repo_root = Path(__file__).resolve().parent.parent

# Load local environment variables from reports311/.env when present.
try:
    from dotenv import load_dotenv  # type: ignore

    load_dotenv(repo_root / ".env", override=False)
except ImportError:
    # python-dotenv missing: continue with process env.
    pass
from dataclasses import dataclass


def _get_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


@dataclass(frozen=True)
class Settings:
    app_name: str = os.getenv("APP_NAME", "Reports311 Backend")
    env: str = os.getenv("APP_ENV", os.getenv("ENV", "local"))

    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:3000")

    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./reports.db")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Upper bound for `limit` on every paginated endpoint.
    max_query_limit: int = int(os.getenv("MAX_QUERY_LIMIT", "50000"))
    # When true, an unparsable filter JSON is rejected with 400 instead of being treated as "no filter".
    strict_filters: bool = _get_bool("STRICT_FILTERS", "false")

    # Seeding (startup only, table must be empty)
    seed_sample_data: bool = _get_bool("SEED_SAMPLE_DATA", "true")
    sample_csv_path: str = os.getenv("SAMPLE_CSV_PATH", str((repo_root / "data/sample_reports.csv").resolve()))

    recreate_db_on_startup: bool = _get_bool("RECREATE_DB_ON_STARTUP", "false")


settings = Settings()

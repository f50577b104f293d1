from __future__ import annotations

import os
from pathlib import Path
from typing import List


class Settings:
    """Centralized configuration for the FitTrack backend."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        repo_root = base_dir.parent
        data_root_default = repo_root / "data"

        self.data_root: Path = Path(
            os.environ.get("FITTRACK_DATA_ROOT") or data_root_default
        ).expanduser()
        self.app_db_path: Path = Path(
            os.environ.get("FITTRACK_DB_PATH") or (self.data_root / "fittrack.db")
        ).expanduser()
        # In production you MUST set FITTRACK_JWT_SECRET.
        self.jwt_secret: str = os.environ.get("FITTRACK_JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(os.environ.get("FITTRACK_TOKEN_TTL_DAYS") or "7")
        self.cookie_secure: bool = (os.environ.get("FITTRACK_COOKIE_SECURE") or "").strip() in {"1", "true", "True"}
        self.max_upload_mb: int = int(os.environ.get("FITTRACK_MAX_UPLOAD_MB") or "5")
        self.locale: str = (os.environ.get("FITTRACK_LOCALE") or "en").strip().lower()
        self.log_level: str = (os.environ.get("FITTRACK_LOG_LEVEL") or "INFO").strip().upper()

        # ---- External collaborators ----
        self.exercisedb_host: str = os.environ.get("EXERCISEDB_HOST", "exercisedb.p.rapidapi.com")
        self.exercisedb_base_url: str = os.environ.get(
            "EXERCISEDB_BASE_URL", f"https://{self.exercisedb_host}"
        )
        self.exercisedb_api_key: str | None = os.environ.get("EXERCISEDB_API_KEY")
        self.spoonacular_base_url: str = os.environ.get(
            "SPOONACULAR_BASE_URL", "https://api.spoonacular.com"
        )
        self.spoonacular_api_key: str | None = os.environ.get("SPOONACULAR_API_KEY")
        self.who_base_url: str = os.environ.get("WHO_BASE_URL", "https://ghoapi.azureedge.net/api")
        self.world_bank_base_url: str = os.environ.get(
            "WORLD_BANK_BASE_URL", "https://api.worldbank.org/v2"
        )
        self.http_timeout: float = float(os.environ.get("FITTRACK_HTTP_TIMEOUT") or "15")
        self.dataset_cache_ttl: int = int(os.environ.get("FITTRACK_DATASET_CACHE_TTL") or "3600")

        cors = os.environ.get("FITTRACK_CORS_ORIGINS", "*")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        else:
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]


settings = Settings()

import json

from pydantic_settings import BaseSettings
from pydantic import field_validator
from pathlib import Path

_PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    countries_data_path: Path = _PACKAGE_DIR / "data" / "countries.json"
    cors_origins: list[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]
    search_rate_limit: str = "60/minute"
    log_level: str = "INFO"

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            # Accept JSON array or comma-separated string
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "COUNTRYATLAS_",
        # The .env may belong to the host application.
        "extra": "ignore",
    }


settings = Settings()

"""
Settings for the Intelligence Reports engine.

Values are read from the environment (and a local .env file) once per
process. Every collaborator takes a ReportSettings instance so tests can
pass their own.
"""
import os
import logging
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class ReportSettings(BaseModel):
    """Runtime configuration for the report lifecycle engine."""
    app_name: str = "Intelligence Reports"

    # External collaborators
    generation_service_url: str = "http://localhost:3000"
    directory_service_url: str = "http://localhost:3000"
    public_base_url: str = "http://localhost:3000"

    # The generation call is long-running; expiry is treated as a transport failure
    generation_timeout_seconds: float = Field(default=300.0, gt=0)

    # Entity search
    search_debounce_seconds: float = Field(default=0.3, ge=0)
    search_min_query_length: int = Field(default=2, ge=1)
    search_result_limit: int = Field(default=10, ge=1)
    search_timeout_seconds: float = Field(default=10.0, gt=0)

    output_dir: str = "output"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "ReportSettings":
        """Create settings from environment variables, loading .env first."""
        load_dotenv(dotenv_path=env_file, override=False)

        values = {}
        mapping = {
            "INTEL_REPORTS_APP_NAME": "app_name",
            "INTEL_REPORTS_GENERATION_URL": "generation_service_url",
            "INTEL_REPORTS_DIRECTORY_URL": "directory_service_url",
            "INTEL_REPORTS_PUBLIC_BASE_URL": "public_base_url",
            "INTEL_REPORTS_GENERATION_TIMEOUT": "generation_timeout_seconds",
            "INTEL_REPORTS_SEARCH_DEBOUNCE": "search_debounce_seconds",
            "INTEL_REPORTS_SEARCH_MIN_QUERY": "search_min_query_length",
            "INTEL_REPORTS_SEARCH_LIMIT": "search_result_limit",
            "INTEL_REPORTS_SEARCH_TIMEOUT": "search_timeout_seconds",
            "INTEL_REPORTS_OUTPUT_DIR": "output_dir",
            "INTEL_REPORTS_LOG_LEVEL": "log_level",
        }
        for env_name, field_name in mapping.items():
            value = os.environ.get(env_name)
            if value is not None and value != "":
                values[field_name] = value

        settings = cls(**values)
        logger.debug(f"Loaded settings: generation={settings.generation_service_url}, "
                     f"directory={settings.directory_service_url}")
        return settings


_settings: Optional[ReportSettings] = None


def get_settings() -> ReportSettings:
    """Get the process-wide settings instance."""
    global _settings
    if _settings is None:
        _settings = ReportSettings.from_env()
    return _settings

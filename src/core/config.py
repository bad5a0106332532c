"""Configuration management"""
import os
from pathlib import Path
from typing import List, Optional
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Environment
    environment: str = "development"
    log_level: str = "INFO"

    # CitObs (SYKE citizen observations open-data API)
    citobs_api_url: str = "https://rajapinnat.ymparisto.fi/api/kansalaishavainnot/1.0/requests.json"
    citobs_service_code: str = "algaebloom_service_code_201808151546171"
    # Extended attribute carrying the algae severity code (1-6)
    citobs_severity_attribute: str = "hisp_algaebloom_singlevaluelist_202201051826220"
    # Request timeout (seconds) for CitObs calls.
    citobs_timeout: float = 15.0
    # Set CITOBS_ENABLED=0 to always serve the static-file summary.
    citobs_enabled: bool = True
    citobs_sample_size: int = 20

    # Web
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"]
    )

    # Paths
    project_root: Path = Field(default_factory=lambda: Path(__file__).parent.parent.parent)
    data_dir: Optional[Path] = None
    config_dir: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('citobs_timeout')
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("CITOBS_TIMEOUT must be positive")
        return v

    @model_validator(mode='after')
    def setup_paths(self):
        if self.data_dir is None:
            self.data_dir = self.project_root / "data"
        if self.config_dir is None:
            self.config_dir = self.project_root / "config"

        # Live lookups are never made from the test environment
        if os.getenv("ENVIRONMENT") == "test":
            self.citobs_enabled = False

        return self

# Instantiate settings
settings = Settings()

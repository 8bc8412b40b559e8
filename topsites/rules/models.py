import logging

from pydantic import BaseModel, Field, field_validator


class TelemetryRules(BaseModel):
    enabled: bool = True
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

class BackgroundRules(BaseModel):
    max_workers: int = Field(default=2, ge=1)
    thread_name_prefix: str = "top-sites"
    shutdown_timeout_seconds: float = Field(default=5.0, ge=0)

class TopSitesRules(BaseModel):
    telemetry: TelemetryRules = Field(default_factory=TelemetryRules)
    background: BackgroundRules = Field(default_factory=BackgroundRules)

class Rules(BaseModel):
    top_sites: TopSitesRules = Field(default_factory=TopSitesRules)

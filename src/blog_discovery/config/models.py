"""Pydantic configuration models for blog discovery components."""

from pydantic import BaseModel, Field, field_validator

# ============================================================
# Content Config
# ============================================================


class ContentConfig(BaseModel):
    """Where article markdown files live."""

    directory: str = "content/blog"

    model_config = {"frozen": True}


# ============================================================
# Controller Config
# ============================================================


class ControllerConfig(BaseModel):
    """Configuration for InteractionController."""

    debounce_seconds: float = Field(default=0.3, ge=0.0)

    model_config = {"frozen": True}


# ============================================================
# URL Config
# ============================================================


class UrlConfig(BaseModel):
    """Configuration for StateCodec."""

    base_path: str = "/blog"

    model_config = {"frozen": True}

    @field_validator("base_path")
    @classmethod
    def base_path_must_be_absolute(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError(f"base_path must start with '/': {v!r}")
        if "?" in v or "#" in v:
            raise ValueError(f"base_path must not contain a query or fragment: {v!r}")
        return v


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-evaluation pipeline logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class DiscoveryConfig(BaseModel):
    """Root configuration for blog discovery."""

    content: ContentConfig = Field(default_factory=ContentConfig)
    controller: ControllerConfig = Field(default_factory=ControllerConfig)
    url: UrlConfig = Field(default_factory=UrlConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}

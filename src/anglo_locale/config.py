"""
Runtime settings read from the environment (and an optional ``.env`` file).
"""

import os
from pathlib import Path
from typing import Any, Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, model_validator


class Settings(BaseModel):
    """Process settings for the HTTP and MCP surfaces."""

    host: str = Field(default="127.0.0.1", description="Interface the HTTP server binds to")
    port: int = Field(default=3000, ge=1, le=65535, description="Port the HTTP server listens on")
    transport: Literal["http", "mcp"] = Field(
        default="http",
        description="Serve the HTTP API or the MCP stdio tools"
    )
    data_dir: Optional[Path] = Field(
        default=None,
        description="Directory holding dictionary YAML files (packaged data when unset)"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root logging level"
    )

    @model_validator(mode="before")
    @classmethod
    def _upper_log_level(cls, data: Any) -> Any:
        """Accept logging levels in any case."""
        if isinstance(data, dict) and isinstance(data.get("log_level"), str):
            data = {**data, "log_level": data["log_level"].upper()}
        return data

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """Build settings from ``ANGLO_LOCALE_*`` environment variables.

        Unset or empty variables fall back to the field defaults.
        """
        if load_env_file:
            load_dotenv()

        values: dict[str, str] = {}
        for field_name in cls.model_fields:
            raw = os.getenv(f"ANGLO_LOCALE_{field_name.upper()}", "").strip()
            if raw:
                values[field_name] = raw
        return cls(**values)

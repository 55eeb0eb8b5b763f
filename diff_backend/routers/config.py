"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any, Literal

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr

from diff_backend.services.config_manager import ConfigManager

router = APIRouter()


class ServerSettings(BaseModel):
    """Server section of the configuration"""

    model_config = ConfigDict(extra="forbid")

    host: StrictStr | None = None
    port: StrictInt | None = Field(default=None, ge=1, le=65535)


class LimitSettings(BaseModel):
    """Document limits enforced before diffing"""

    model_config = ConfigDict(extra="forbid")

    maxDocumentBytes: StrictInt | None = Field(default=None, ge=0)
    rejectBinary: StrictBool | None = None


class LoggingSettings(BaseModel):
    """Logging section of the configuration"""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] | None = None


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    server: ServerSettings | None = None
    limits: LimitSettings | None = None
    logging: LoggingSettings | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    server: dict
    limits: dict
    logging: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        server=config.get("server", {}),
        limits=config.get("limits", {}),
        logging=config.get("logging", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided keys, merging them into the stored sections
    for section in ("server", "limits", "logging"):
        settings = getattr(request, section)
        values = settings.model_dump(exclude_unset=True) if settings else {}
        if values:
            current_config[section] = {**current_config.get(section, {}), **values}

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return {"status": "success", "message": "Configuration updated"}

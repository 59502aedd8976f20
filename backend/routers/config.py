"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from services.config_manager import ConfigManager

router = APIRouter()


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    server: dict | None = None
    diff: dict | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    server: dict
    diff: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()

    return ConfigResponse(
        server=config.get("server", {}),
        diff=config.get("diff", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    if request.diff and "maxInputLength" in request.diff:
        limit = request.diff["maxInputLength"]
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
            raise HTTPException(
                status_code=400,
                detail="maxInputLength must be a non-negative integer",
            )

    # Update only provided fields
    if request.server:
        current_config["server"] = {**current_config.get("server", {}), **request.server}
    if request.diff:
        current_config["diff"] = {**current_config.get("diff", {}), **request.diff}

    config_manager.save_config(current_config)

    return {"status": "success", "message": "Configuration updated"}

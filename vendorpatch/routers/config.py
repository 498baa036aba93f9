"""Configuration API endpoints"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from vendorpatch.services.config_manager import ConfigManager

router = APIRouter()


class DiffSettingsUpdate(BaseModel):
    """Partial update of the diff section"""

    contextLines: int | None = Field(None, ge=0)
    lookahead: int | None = Field(None, ge=1)


class OutputSettingsUpdate(BaseModel):
    """Partial update of the output section"""

    patchesDir: str | None = None


class ConfigUpdateRequest(BaseModel):
    """Request to update configuration"""

    diff: DiffSettingsUpdate | None = None
    output: OutputSettingsUpdate | None = None


class ConfigResponse(BaseModel):
    """Configuration response"""

    diff: dict
    output: dict


@router.get("", response_model=ConfigResponse)
async def get_config() -> ConfigResponse:
    """Get current configuration"""
    config = ConfigManager.get_instance().get_config()
    return ConfigResponse(
        diff=config.get("diff", {}),
        output=config.get("output", {}),
    )


@router.put("")
async def update_config(request: ConfigUpdateRequest) -> dict[str, Any]:
    """Update configuration"""
    config_manager = ConfigManager.get_instance()
    current_config = config_manager.get_config()

    # Update only provided fields
    if request.diff:
        current_config["diff"] = {
            **current_config.get("diff", {}),
            **request.diff.model_dump(exclude_none=True),
        }
    if request.output:
        current_config["output"] = {
            **current_config.get("output", {}),
            **request.output.model_dump(exclude_none=True),
        }

    try:
        config_manager.save_config(current_config)
    except RuntimeError as e:
        raise HTTPException(status_code=500, detail=str(e))

    print("[Config] Configuration updated")
    return {"status": "success", "message": "Configuration updated"}

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SelectionSettings(BaseModel):
    poll_ms: float = Field(default=5.0, ge=0.0)
    timeout_s: float | None = 60.0  # None or 0 waits forever


class CaptureSettings(BaseModel):
    adapter: Literal["mss"] = "mss"
    parallel: bool = False  # capture monitors concurrently in "all" mode


class DecoderSettings(BaseModel):
    adapter: Literal["opencv"] = "opencv"


class OutputSettings(BaseModel):
    clipboard: bool = False
    notify: bool = True
    # X11 drops clipboard contents when the owning process exits
    clipboard_hold_s: float = Field(default=0.0, ge=0.0)


class QrSnapSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="QRSNAP_", extra="ignore")

    log_level: str = "WARNING"
    selection: SelectionSettings = Field(default_factory=SelectionSettings)
    capture: CaptureSettings = Field(default_factory=CaptureSettings)
    decoder: DecoderSettings = Field(default_factory=DecoderSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

ScanMode = Literal["select", "all"]


class ScanReport(BaseModel):
    api: Literal["v1"] = "v1"
    mode: ScanMode
    monitor: int | None = None
    payloads: list[str] = Field(default_factory=list)
    ts: float
    error: str | None = None  # name of the error that ended the attempt, if any

    @property
    def found(self) -> bool:
        return bool(self.payloads)

    def joined(self) -> str:
        return " ".join(self.payloads)

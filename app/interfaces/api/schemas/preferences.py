"""Schemas for per-user notification preferences."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PreferencesRead(BaseModel):
    user_id: str
    push_enabled: bool
    marketing_enabled: bool
    news_enabled: bool
    reminder_enabled: bool
    quiet_hours_start: str | None
    quiet_hours_end: str | None
    timezone: str | None
    created_at: datetime | None
    updated_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class PreferencesUpdate(BaseModel):
    push_enabled: bool | None = None
    marketing_enabled: bool | None = None
    news_enabled: bool | None = None
    reminder_enabled: bool | None = None
    quiet_hours_start: str | None = Field(default=None, description="Start of quiet hours, HH:MM")
    quiet_hours_end: str | None = Field(default=None, description="End of quiet hours, HH:MM")
    timezone: str | None = None

    model_config = ConfigDict(extra="forbid")


__all__ = ["PreferencesRead", "PreferencesUpdate"]

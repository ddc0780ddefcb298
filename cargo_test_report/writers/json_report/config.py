"""Configuration for the JSON writer."""

from pydantic import BaseModel, Field


class JsonReportConfig(BaseModel):
    """Configuration for the JSON writer."""

    indent: int | None = Field(default=2, ge=0)

"""Configuration for the JUnit XML writer."""

from pydantic import BaseModel


class JUnitConfig(BaseModel):
    """Configuration for the JUnit XML writer."""

    name: str = "cargo test"
    pretty: bool = True

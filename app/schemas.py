from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProviderConfig(BaseModel):
    """Credential/endpoint pair consumed once to build a client."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(repr=False)
    base_url: Optional[str] = None

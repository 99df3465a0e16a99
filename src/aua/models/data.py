"""Content models returned by the ``data/*`` endpoints."""

from pydantic import BaseModel, ConfigDict


class UpdateContent(BaseModel):
    """Response content of ``data/update``: the latest client package."""

    model_config = ConfigDict(populate_by_name=True)

    url: str
    version: str

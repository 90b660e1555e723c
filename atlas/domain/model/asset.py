"""Uploaded asset entities."""

from typing import Optional

from atlas.domain.model.common import DomainModel
from atlas.domain.value import AssetFileId, AssetId


class Asset(DomainModel):
    """Logical asset (e.g. an avatar) pointing at its stored file."""

    id: AssetId
    file_id: Optional[AssetFileId] = None


class AssetFile(DomainModel):
    """Stored file behind an asset."""

    id: AssetFileId
    public_url: Optional[str] = None

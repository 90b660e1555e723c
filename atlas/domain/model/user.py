"""User entity as seen by the comment moderation API."""

from typing import Optional

from atlas.domain.model.common import DomainModel
from atlas.domain.value import AssetId, UserId, UserRole


class User(DomainModel):
    """Comment author.

    Only the fields needed for an author preview are modelled. The avatar
    is a reference to an asset, not a URL.
    """

    id: UserId
    name: str
    role: UserRole = UserRole.TRAVELLER
    avatar_asset_id: Optional[AssetId] = None

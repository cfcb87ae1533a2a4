from app.repositories.base.base_repository import (
    BaseRepository,
    OwnedRepository,
    apply_owner_scope,
)

__all__ = ["BaseRepository", "OwnedRepository", "apply_owner_scope"]

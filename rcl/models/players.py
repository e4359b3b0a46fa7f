from pydantic import BaseModel

from rcl.models.db.player import Player, PlayerWithClub


class PlayerSearchResult(BaseModel):
    players: list[PlayerWithClub]
    total: int
    page: int
    limit: int
    total_pages: int


class PlayerCreateResult(BaseModel):
    player: Player
    already_exists: bool = False

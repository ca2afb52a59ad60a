"""Game configuration registry."""

from dataclasses import dataclass

from lotto_picker.exceptions import UnknownGame


@dataclass(frozen=True)
class GameConfig:
    """Rules of one game variant: pick_count regular numbers from 1..max_num,
    plus one secondary number from 1..secondary_max when the game has one."""

    game_id: str
    name: str
    pick_count: int
    max_num: int
    secondary_max: int | None = None

    @property
    def has_secondary(self) -> bool:
        return self.secondary_max is not None


GAME_CONFIG = {
    "lotto": GameConfig(game_id="lotto", name="Lotto Texas", pick_count=6, max_num=54),
    "powerball": GameConfig(
        game_id="powerball", name="Powerball", pick_count=5, max_num=69, secondary_max=26,
    ),
}

GAME_ALIASES = {
    "lottotexas": "lotto",
    "lotto_texas": "lotto",
}

VALID_GAMES = set(GAME_CONFIG.keys())


def resolve_game_id(game: str) -> str:
    """Map a requested identifier (or alias) to its canonical game id."""
    key = (game or "").strip().lower()
    key = GAME_ALIASES.get(key, key)
    if key not in GAME_CONFIG:
        raise UnknownGame(game, VALID_GAMES)
    return key


def get_game_config(game: str) -> GameConfig:
    """Get the configuration for a game id or alias."""
    return GAME_CONFIG[resolve_game_id(game)]

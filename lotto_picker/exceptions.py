"""Error taxonomy for analysis and pick generation."""


class LottoPickerError(Exception):
    """Base for all application errors."""


class UnknownGame(LottoPickerError, ValueError):
    """Requested game identifier has no configuration."""

    def __init__(self, game: str, valid: set[str] | None = None):
        self.game = game
        message = f"Unknown game: {game}"
        if valid:
            message += f". Valid: {sorted(valid)}"
        super().__init__(message)


class EmptyDataset(LottoPickerError, ValueError):
    """No draw survived normalization, so nothing can be analyzed."""

    def __init__(self, game: str, dropped: int = 0):
        self.game = game
        self.dropped = dropped
        super().__init__(
            f"No valid draws available for {game} ({dropped} rows dropped)"
        )


class DatasetNotFound(LottoPickerError, LookupError):
    """The dataset source has no data for a game."""

    def __init__(self, game: str, location: str | None = None):
        self.game = game
        self.location = location
        message = f"No data file found for game: {game}"
        if location:
            message += f" ({location})"
        super().__init__(message)


class CollaboratorFailure(LottoPickerError):
    """An external collaborator (text generation, persistence) failed."""

"""Historical draw CSV files.

Two shapes are accepted:
    with a header:   Year,Month,Day,Num1,Num2,...,Num6[,BonusBall][,Powerball]
    state export:    Lotto Texas,5,1,2004,3,12,20,33,40,51
                     Powerball,1,7,2015,1,13,27,41,59,23,2
The headerless export is mapped positionally onto the header labels.
"""

import csv
from pathlib import Path

from loguru import logger

from lotto_picker.config import settings
from lotto_picker.exceptions import DatasetNotFound
from lotto_picker.games import get_game_config
from lotto_picker.sources.base import BaseDatasetSource

_HEADER_MARKERS = {"num1", "year", "date"}


def _positional_labels(game_id: str) -> list[str]:
    game = get_game_config(game_id)
    labels = ["Game", "Month", "Day", "Year"]
    labels += [f"Num{i}" for i in range(1, game.pick_count + 1)]
    if game.has_secondary:
        labels.append("Powerball")
    return labels


def read_rows(path: Path, game_id: str) -> list[dict]:
    """Read a CSV file into a list of label -> value dicts."""
    with path.open(newline="", encoding="utf-8-sig") as f:
        raw = [row for row in csv.reader(f) if any(cell.strip() for cell in row)]
    if not raw:
        return []

    first = [cell.strip() for cell in raw[0]]
    if _HEADER_MARKERS & {cell.lower() for cell in first}:
        header, body = first, raw[1:]
    else:
        header, body = _positional_labels(game_id), raw

    rows = []
    for record in body:
        cells = [cell.strip() for cell in record]
        # zip drops surplus cells (e.g. Power Play multiplier)
        rows.append(dict(zip(header, cells)))
    return rows


class CsvDatasetSource(BaseDatasetSource):
    """Dataset source backed by one CSV file per game under a directory."""

    def __init__(self, data_dir: Path | None = None):
        self.data_dir = Path(data_dir) if data_dir is not None else settings.DATA_DIR

    def path_for(self, game_id: str) -> Path:
        return self.data_dir / settings.data_file_for(game_id).name

    def load_rows(self, game_id: str) -> list[dict]:
        path = self.path_for(game_id)
        if not path.exists():
            raise DatasetNotFound(game_id, str(path))

        rows = read_rows(path, game_id)
        logger.info("Loaded {} raw rows for {} from {}", len(rows), game_id, path)
        return rows

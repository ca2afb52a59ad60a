"""Record normalizer: raw CSV rows -> validated DrawRecords.

Historical files are dirty. Rows with missing or out-of-range values are
dropped and counted instead of failing the whole load.

Row shapes seen in the wild:
    lotto, older years:  {'Year': '2004', 'Month': '5', 'Day': '1',
                          'Num1': '3', ..., 'Num5': '40', 'BonusBall': '12'}
    lotto, current:      {'Year': ..., 'Num1': ..., 'Num6': '51'}
    powerball:           {'Year': ..., 'Num1': ..., 'Num5': ..., 'Powerball': '7'}
"""

import re
from datetime import date, datetime
from typing import Any, Iterable, Mapping

from loguru import logger

from lotto_picker.analysis.records import DrawRecord, NormalizationResult
from lotto_picker.exceptions import EmptyDataset
from lotto_picker.games import GameConfig

_INT_CELL_RE = re.compile(r"[+-]?\d+(?:\.0*)?", re.ASCII)
_DATE_FORMATS = ("%Y-%m-%d", "%m/%d/%Y", "%Y/%m/%d")


class InvalidRow(ValueError):
    """A raw row failed validation and will be dropped."""


def parse_int(value: Any) -> int | None:
    """Parse an integer-valued cell, or None when it is not one."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None

    text = str(value).strip()
    if not _INT_CELL_RE.fullmatch(text):
        return None
    return int(text.split(".")[0])


def _has_value(row: Mapping[str, Any], key: str) -> bool:
    value = row.get(key)
    return value is not None and str(value).strip() != ""


def _parse_date(row: Mapping[str, Any]) -> date:
    if _has_value(row, "Year") and _has_value(row, "Month") and _has_value(row, "Day"):
        year, month, day = (parse_int(row.get(k)) for k in ("Year", "Month", "Day"))
        if year is None or month is None or day is None:
            raise InvalidRow("non-numeric date parts")
        try:
            return date(year, month, day)
        except ValueError as e:
            raise InvalidRow(f"invalid date: {e}") from e

    if _has_value(row, "Date"):
        text = str(row["Date"]).strip()
        for fmt in _DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        raise InvalidRow(f"unparseable date: {text!r}")

    raise InvalidRow("missing date")


def _number_columns(row: Mapping[str, Any], game: GameConfig) -> list[str]:
    columns = [f"Num{i}" for i in range(1, game.pick_count + 1)]
    # Older lotto rows carry the last regular number as a "bonus ball".
    if game.game_id == "lotto" and _has_value(row, "BonusBall"):
        columns[-1] = "BonusBall"
    return columns


def _checked(value: Any, column: str, upper: int) -> int:
    number = parse_int(value)
    if number is None:
        raise InvalidRow(f"{column} is missing or not an integer: {value!r}")
    if not 1 <= number <= upper:
        raise InvalidRow(f"{column}={number} outside 1..{upper}")
    return number


def normalize_row(row: Mapping[str, Any], game: GameConfig) -> DrawRecord:
    """Convert one raw row. Raises InvalidRow when it can't be used."""
    draw_date = _parse_date(row)

    numbers = tuple(
        _checked(row.get(column), column, game.max_num)
        for column in _number_columns(row, game)
    )
    if len(set(numbers)) != len(numbers):
        raise InvalidRow(f"duplicate regular numbers: {numbers}")

    secondary = None
    if game.has_secondary:
        secondary = _checked(row.get("Powerball"), "Powerball", game.secondary_max)

    return DrawRecord(draw_date=draw_date, numbers=numbers, secondary=secondary)


def normalize_rows(
    rows: Iterable[Mapping[str, Any]], game: GameConfig
) -> NormalizationResult:
    """Normalize raw rows, dropping invalid ones.

    Raises:
        EmptyDataset: no row survived.
    """
    draws = []
    dropped = 0
    for row in rows:
        try:
            draws.append(normalize_row(row, game))
        except InvalidRow as e:
            dropped += 1
            logger.debug("[{}] dropping row {}: {}", game.game_id, dict(row), e)

    if dropped:
        logger.warning(
            "[{}] normalization dropped {} of {} rows",
            game.game_id, dropped, dropped + len(draws),
        )
    if not draws:
        raise EmptyDataset(game.game_id, dropped=dropped)

    return NormalizationResult(draws=tuple(draws), dropped=dropped)

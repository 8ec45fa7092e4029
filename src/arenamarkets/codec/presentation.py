"""Display metadata derived from parsed market IDs: URLs, badges, outcome labels."""

from __future__ import annotations

import re

from arenamarkets.models import Badge, DataSource, ParsedMarketId, ResolutionMethod

POLYMARKET_EVENT_URL = "https://polymarket.com/event/"
COINGECKO_COIN_URL = "https://www.coingecko.com/en/coins/"
NO_URL = "#"

_SOURCE_BADGES: dict[str, Badge] = {
    DataSource.POLYMARKET: Badge(
        label="Polymarket",
        icon="\U0001f4ca",
        bg_color="bg-purple-100 dark:bg-purple-900/30",
        text_color="text-purple-700 dark:text-purple-300",
    ),
    DataSource.COINGECKO: Badge(
        label="CoinGecko",
        icon="\U0001f98e",
        bg_color="bg-green-100 dark:bg-green-900/30",
        text_color="text-green-700 dark:text-green-300",
    ),
}

_RESOLUTION_BADGES: dict[str, Badge] = {
    ResolutionMethod.KEEPER: Badge(
        label="Keeper Vote",
        icon="\U0001f5f3\ufe0f",
        bg_color="bg-blue-100 dark:bg-blue-900/30",
        text_color="text-blue-700 dark:text-blue-300",
    ),
    ResolutionMethod.DETERMINISTIC: Badge(
        label="Auto-Resolve",
        icon="\u26a1",
        bg_color="bg-amber-100 dark:bg-amber-900/30",
        text_color="text-amber-700 dark:text-amber-300",
    ),
}

UNKNOWN_BADGE = Badge(
    label="Unknown",
    icon="\u2753",
    bg_color="bg-gray-100 dark:bg-gray-800",
    text_color="text-gray-700 dark:text-gray-300",
)

# (positive, negative)
_DIRECTIONAL_LABELS = ("LONG", "SHORT")
_BINARY_LABELS = ("YES", "NO")

# Leading ASCII integer, as a lenient int parse would read it ("1", " +1", "1abc")
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def get_market_url(parsed: ParsedMarketId) -> str:
    """URL to view a market on its source platform. Unknown sources get '#'."""
    match parsed.data_source:
        case DataSource.POLYMARKET:
            return f"{POLYMARKET_EVENT_URL}{parsed.raw_id}"
        case DataSource.COINGECKO:
            return f"{COINGECKO_COIN_URL}{parsed.raw_id}"
        case _:
            return NO_URL


def get_source_badge(data_source: DataSource | str) -> Badge:
    return _SOURCE_BADGES.get(data_source, UNKNOWN_BADGE)


def get_resolution_badge(method: ResolutionMethod | str) -> Badge:
    return _RESOLUTION_BADGES.get(method, UNKNOWN_BADGE)


def get_outcome_labels(data_source: DataSource | str) -> tuple[str, str]:
    """(positive, negative) labels: LONG/SHORT for price feeds, YES/NO for prediction markets."""
    if data_source == DataSource.COINGECKO:
        return _DIRECTIONAL_LABELS
    return _BINARY_LABELS


def _position_value(position: int | float | str) -> int | float | None:
    if isinstance(position, str):
        m = _LEADING_INT.match(position)
        return int(m.group(1)) if m else None
    return position


def format_position(position: int | float | str, data_source: DataSource | str) -> str:
    """Label a position indicator. Only a value of 1 is the positive side.

    Strings are read by their leading integer; unparsable strings count as
    the negative side rather than raising.
    """
    positive, negative = get_outcome_labels(data_source)
    return positive if _position_value(position) == 1 else negative

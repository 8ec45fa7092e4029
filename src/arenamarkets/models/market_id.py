"""DataSource, ResolutionMethod, ParsedMarketId, Badge - market identifier entities."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class DataSource(StrEnum):
    """External platform a raw market identifier belongs to."""

    POLYMARKET = "polymarket"
    COINGECKO = "coingecko"


class ResolutionMethod(StrEnum):
    """How a market's outcome is settled: keeper vote or automatic rule."""

    KEEPER = "keeper"
    DETERMINISTIC = "deterministic"


class ParsedMarketId(BaseModel):
    """Structured form of a `{source}:{resolution}:{raw_id}` market identifier."""

    model_config = ConfigDict(frozen=True)

    data_source: DataSource
    resolution_method: ResolutionMethod
    raw_id: str  # condition_id for Polymarket, coin_id for CoinGecko; may contain ':'
    full_encoded: str


class Badge(BaseModel):
    """Display metadata: label, glyph and light/dark theme class strings."""

    model_config = ConfigDict(frozen=True)

    label: str
    icon: str
    bg_color: str
    text_color: str

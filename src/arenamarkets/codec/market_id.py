"""Market ID parsing and encoding.

Market IDs use the format `{source}:{resolution}:{raw_id}`, e.g.

- `polymarket:keeper:0x123abc...` - Polymarket with keeper voting
- `coingecko:deterministic:bitcoin` - CoinGecko with auto-resolution

Plain strings without the prefix are legacy IDs and are read as
`polymarket:keeper:{raw_id}`. Parsing never fails: unrecognised source or
resolution tags fall back to `polymarket` / `keeper`.
"""

from __future__ import annotations

import structlog

from arenamarkets.models import DataSource, ParsedMarketId, ResolutionMethod

log = structlog.get_logger(__name__)

DELIMITER = ":"

DEFAULT_DATA_SOURCE = DataSource.POLYMARKET
DEFAULT_RESOLUTION_METHOD = ResolutionMethod.KEEPER

_DATA_SOURCES = {s.value: s for s in DataSource}
_RESOLUTION_METHODS = {m.value: m for m in ResolutionMethod}


def parse_data_source(s: str) -> DataSource:
    """Case-insensitive source tag lookup. Unknown tags map to polymarket."""
    source = _DATA_SOURCES.get(s.lower())
    if source is None:
        log.debug("market_id_tag_defaulted", field="data_source", value=s)
        return DEFAULT_DATA_SOURCE
    return source


def parse_resolution_method(s: str) -> ResolutionMethod:
    """Case-insensitive resolution tag lookup. Unknown tags map to keeper."""
    method = _RESOLUTION_METHODS.get(s.lower())
    if method is None:
        log.debug("market_id_tag_defaulted", field="resolution_method", value=s)
        return DEFAULT_RESOLUTION_METHOD
    return method


def encode_market_id(
    source: DataSource | str,
    method: ResolutionMethod | str,
    raw_id: str,
) -> str:
    """Build `{source}:{method}:{raw_id}`. raw_id is not escaped and may contain ':'."""
    return f"{source}{DELIMITER}{method}{DELIMITER}{raw_id}"


def parse_market_id(market_id: str) -> ParsedMarketId:
    """Parse a market ID string into its components.

    Three or more segments: source and resolution tags come from the first two,
    and the rest are rejoined as the raw id so raw ids may contain ':'.
    `full_encoded` is the input unchanged.

    Fewer segments: legacy ID. The whole string is the raw id, source and
    method take their defaults and `full_encoded` is the canonical re-encoding.
    """
    parts = market_id.split(DELIMITER)

    if len(parts) >= 3:
        return ParsedMarketId(
            data_source=parse_data_source(parts[0]),
            resolution_method=parse_resolution_method(parts[1]),
            raw_id=DELIMITER.join(parts[2:]),
            full_encoded=market_id,
        )

    return ParsedMarketId(
        data_source=DEFAULT_DATA_SOURCE,
        resolution_method=DEFAULT_RESOLUTION_METHOD,
        raw_id=market_id,
        full_encoded=encode_market_id(DEFAULT_DATA_SOURCE, DEFAULT_RESOLUTION_METHOD, market_id),
    )


def canonicalize_market_id(market_id: str) -> str:
    """Return the canonical form to persist; upgrades legacy IDs."""
    return parse_market_id(market_id).full_encoded


def is_polymarket(market_id: str) -> bool:
    """Check if a market ID is from Polymarket."""
    return parse_market_id(market_id).data_source == DataSource.POLYMARKET


def is_coingecko(market_id: str) -> bool:
    """Check if a market ID is from CoinGecko."""
    return parse_market_id(market_id).data_source == DataSource.COINGECKO

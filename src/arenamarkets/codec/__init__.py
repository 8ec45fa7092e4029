"""Market identifier codec: parse/encode `{source}:{resolution}:{raw_id}` and derive display metadata."""

from arenamarkets.codec.market_id import (
    canonicalize_market_id,
    encode_market_id,
    is_coingecko,
    is_polymarket,
    parse_data_source,
    parse_market_id,
    parse_resolution_method,
)
from arenamarkets.codec.presentation import (
    format_position,
    get_market_url,
    get_outcome_labels,
    get_resolution_badge,
    get_source_badge,
)

__all__ = [
    "parse_market_id",
    "encode_market_id",
    "canonicalize_market_id",
    "parse_data_source",
    "parse_resolution_method",
    "is_polymarket",
    "is_coingecko",
    "get_market_url",
    "get_source_badge",
    "get_resolution_badge",
    "get_outcome_labels",
    "format_position",
]

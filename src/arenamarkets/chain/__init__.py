"""Base mainnet deployment constants and BaseScan links."""

from arenamarkets.chain.contracts import (
    BASE_CHAIN_ID,
    CONTRACT_ADDRESS,
    MIN_BET_AMOUNT,
    RESOLUTION_CONTRACT_ADDRESS,
    USDC_ADDRESS,
    USDC_DECIMALS,
    get_address_url,
    get_contract_url,
    get_tx_url,
    usdc_to_base_units,
)

__all__ = [
    "BASE_CHAIN_ID",
    "CONTRACT_ADDRESS",
    "RESOLUTION_CONTRACT_ADDRESS",
    "USDC_ADDRESS",
    "USDC_DECIMALS",
    "MIN_BET_AMOUNT",
    "get_tx_url",
    "get_address_url",
    "get_contract_url",
    "usdc_to_base_units",
]

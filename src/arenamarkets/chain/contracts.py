"""Contract addresses (Base mainnet) and BaseScan URL helpers."""

from __future__ import annotations

from decimal import Decimal

BASE_CHAIN_ID = 8453

CONTRACT_ADDRESS = "0xcb6C040bd4E1742840AD5542C6fDDaF74dB73AF6"
RESOLUTION_CONTRACT_ADDRESS = "0x2A57a0420be53C235b28681760cAE868FFb85118"
USDC_ADDRESS = "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"

USDC_DECIMALS = 6
MIN_BET_AMOUNT = 10_000  # base units, $0.01

BASESCAN_URL = "https://basescan.org"


def usdc_to_base_units(amount: Decimal | int | str) -> int:
    """Convert a USDC amount (dollars) to integer base units, truncating dust."""
    return int(Decimal(amount).scaleb(USDC_DECIMALS))


def get_tx_url(tx_hash: str) -> str:
    return f"{BASESCAN_URL}/tx/{tx_hash}"


def get_address_url(address: str) -> str:
    return f"{BASESCAN_URL}/address/{address}"


def get_contract_url(address: str) -> str:
    return f"{BASESCAN_URL}/address/{address}#code"

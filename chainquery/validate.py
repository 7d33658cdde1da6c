"""
Format validators for values handed to the provider.

Each validator takes one string and returns a ValidationResult: the value
on success, or an unraised DataError subclass describing the failure.
Expected bad input is data, not an exceptional condition.

Validators do not normalise. Chain names must already be canonical
lower-case identifiers (the extractor resolves case and aliases).
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chainquery.exceptions import (
    DataError,
    InvalidAddressError,
    InvalidTxHashError,
    UnsupportedChainError,
)

ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}\Z")
TX_HASH_RE = re.compile(r"^0x[0-9a-fA-F]{64}\Z")

SUPPORTED_CHAINS = ("ethereum", "polygon", "base", "arbitrum", "optimism", "bsc")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single validation. Exactly one of value / error is set."""

    value: str | None = None
    error: DataError | None = None

    @property
    def success(self) -> bool:
        return self.error is None


def validate_address(value: str) -> ValidationResult:
    """Accept exactly 0x + 40 hex chars (either case)."""
    if ADDRESS_RE.match(value):
        return ValidationResult(value=value)
    return ValidationResult(
        error=InvalidAddressError(
            f"Invalid address: {value!r}. Must be 0x + 40 hex chars.",
            details={"value": value},
        )
    )


def validate_tx_hash(value: str) -> ValidationResult:
    """Accept exactly 0x + 64 hex chars (either case)."""
    if TX_HASH_RE.match(value):
        return ValidationResult(value=value)
    return ValidationResult(
        error=InvalidTxHashError(
            f"Invalid transaction hash: {value!r}. Must be 0x + 64 hex chars.",
            details={"value": value},
        )
    )


def validate_chain(value: str) -> ValidationResult:
    """Accept one of SUPPORTED_CHAINS, case-sensitively."""
    if value in SUPPORTED_CHAINS:
        return ValidationResult(value=value)
    return ValidationResult(
        error=UnsupportedChainError(
            f"Unsupported chain: {value!r}. Supported: {', '.join(SUPPORTED_CHAINS)}",
            details={"value": value, "supported": list(SUPPORTED_CHAINS)},
        )
    )

"""
Free-text extraction of addresses, transaction hashes, and chain names.

Hex values are found in a single tokenizing pass: every "0x" prefix is
followed by its maximal hex run, and the run is classified by exact
length (40 → address, 64 → transaction hash, anything else → ignored).
A "0x" followed by another hex digit closes the run, so back-to-back
values such as "0x<40 hex>0x<64 hex>" split into two tokens.

Chain names are matched as whole words, case-insensitively. The aliases
"eth" and "matic" are rewritten to their canonical names; every other
match passes through lower-cased, supported or not.
"""

from __future__ import annotations

import re

from chainquery.models import ExtractedData

ADDRESS_HEX_LEN = 40
TX_HASH_HEX_LEN = 64

# 0x + maximal hex run; a "0x" followed by hex inside the run starts the next token
HEX_TOKEN_RE = re.compile(r"0x([0-9a-fA-F]*?)(?=0x[0-9a-fA-F]|[^0-9a-fA-F]|$)")

CHAIN_RE = re.compile(
    r"\b(ethereum|polygon|base|arbitrum|optimism|bsc|eth|matic)\b",
    re.IGNORECASE,
)

CHAIN_ALIASES = {
    "eth": "ethereum",
    "matic": "polygon",
}


def extract_blockchain_data(text: str) -> ExtractedData:
    """
    Scan text for addresses, transaction hashes, and chain names.

    Never fails: text without matches yields empty sequences. Duplicates
    are kept and each sequence preserves order of appearance.
    """
    data = ExtractedData()

    for match in HEX_TOKEN_RE.finditer(text):
        digits = match.group(1)
        if len(digits) == ADDRESS_HEX_LEN:
            data.addresses.append(match.group(0))
        elif len(digits) == TX_HASH_HEX_LEN:
            data.tx_hashes.append(match.group(0))

    for match in CHAIN_RE.finditer(text):
        chain = match.group(0).lower()
        data.chains.append(CHAIN_ALIASES.get(chain, chain))

    return data


def contains_any(text: str, keywords: tuple[str, ...]) -> bool:
    """Case-insensitive substring check used by the action intent predicates."""
    lowered = text.lower()
    return any(keyword in lowered for keyword in keywords)

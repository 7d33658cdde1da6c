"""Tests for chainquery/extract.py — address, hash, and chain extraction."""

from __future__ import annotations

import re

from chainquery.extract import contains_any, extract_blockchain_data
from conftest import ADDRESS, TOKEN_ADDRESS, TX_HASH

ADDR_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")
HASH_RE = re.compile(r"^0x[0-9a-fA-F]{64}$")


# ── Hex values ────────────────────────────────────────────────────────────────


def test_extract_address_and_chain() -> None:
    data = extract_blockchain_data(f"show me recent activity for {ADDRESS} on ethereum")
    assert data.addresses == [ADDRESS]
    assert data.tx_hashes == []
    assert data.chains == ["ethereum"]


def test_extract_tx_hash_is_not_an_address() -> None:
    """A 64-hex hash must never yield its 40-hex prefix as an address."""
    data = extract_blockchain_data(f"explain this transaction {TX_HASH} on ethereum")
    assert data.tx_hashes == [TX_HASH]
    assert data.addresses == []


def test_extract_preserves_order_and_duplicates() -> None:
    text = f"{TOKEN_ADDRESS} then {ADDRESS} then {TOKEN_ADDRESS}"
    data = extract_blockchain_data(text)
    assert data.addresses == [TOKEN_ADDRESS, ADDRESS, TOKEN_ADDRESS]


def test_extract_wrong_lengths_ignored() -> None:
    text = "0x" + "a" * 39 + " 0x" + "b" * 41 + " 0x" + "c" * 63 + " 0x" + "d" * 65
    data = extract_blockchain_data(text)
    assert data.addresses == []
    assert data.tx_hashes == []


def test_extract_adjacent_address_and_hash_split() -> None:
    """0x<40>0x<64> back to back yields one of each."""
    text = f"{ADDRESS}{TX_HASH}"
    data = extract_blockchain_data(text)
    assert data.addresses == [ADDRESS]
    assert data.tx_hashes == [TX_HASH]


def test_extract_adjacent_hash_and_address_split() -> None:
    text = f"{TX_HASH}{ADDRESS} on base"
    data = extract_blockchain_data(text)
    assert data.tx_hashes == [TX_HASH]
    assert data.addresses == [ADDRESS]


def test_extract_104_hex_run_is_neither() -> None:
    """A single 0x + 104 hex run is not split into 40 + 64."""
    text = "0x" + "ab" * 52
    data = extract_blockchain_data(text)
    assert len(data.addresses) + len(data.tx_hashes) == 0


def test_extract_values_are_well_formed() -> None:
    text = (
        f"noise 0xZZ {ADDRESS}, 0x123 {TX_HASH}. 0x{'f' * 40}x "
        f"({TOKEN_ADDRESS}) 0x"
    )
    data = extract_blockchain_data(text)
    assert all(ADDR_RE.match(a) for a in data.addresses)
    assert all(HASH_RE.match(h) for h in data.tx_hashes)
    assert ADDRESS in data.addresses and TOKEN_ADDRESS in data.addresses
    assert data.tx_hashes == [TX_HASH]


def test_extract_empty_and_plain_text() -> None:
    for text in ("", "show me recent activity", "0x", "\n\n"):
        data = extract_blockchain_data(text)
        assert data.addresses == []
        assert data.tx_hashes == []


# ── Chains ────────────────────────────────────────────────────────────────────


def test_extract_chain_aliases() -> None:
    assert extract_blockchain_data("on eth").chains == ["ethereum"]
    assert extract_blockchain_data("on matic").chains == ["polygon"]


def test_extract_chains_case_insensitive_and_ordered() -> None:
    data = extract_blockchain_data("Polygon, then BASE, then ETH and Arbitrum")
    assert data.chains == ["polygon", "base", "ethereum", "arbitrum"]


def test_extract_chains_whole_words_only() -> None:
    data = extract_blockchain_data("basement ethernet bscscan database")
    assert data.chains == []


def test_extract_chain_duplicates_kept() -> None:
    data = extract_blockchain_data("ethereum or eth on bsc")
    assert data.chains == ["ethereum", "ethereum", "bsc"]


# ── contains_any ──────────────────────────────────────────────────────────────


def test_contains_any_is_case_insensitive_substring() -> None:
    assert contains_any("Show me RECENT stuff", ("recent",))
    assert contains_any("transactions please", ("transaction",))
    assert not contains_any("hello", ("price", "value"))


def test_extract_address_followed_by_x() -> None:
    """A trailing "0" before a plain letter x is part of the address."""
    address = ADDRESS[:-1] + "0"
    data = extract_blockchain_data(f"{address}xyz on ethereum")
    assert data.addresses == [address]
    data = extract_blockchain_data(f"{address}x marks the spot")
    assert data.addresses == [address]


def test_extract_doubled_prefix_keeps_address() -> None:
    data = extract_blockchain_data("0x0x" + ADDRESS[2:])
    assert data.addresses == [ADDRESS]


def test_extract_bare_prefix_before_hash() -> None:
    data = extract_blockchain_data(f"0x {TX_HASH}")
    assert data.tx_hashes == [TX_HASH]
    assert data.addresses == []

"""chainquery — blockchain query actions for conversational agents."""

__version__ = "0.1.0"

from chainquery.actions import (
    GetRecentTxsAction,
    GetTokenPriceAction,
    GetTranslatedTxAction,
)
from chainquery.config import ChainqueryConfig, load_config
from chainquery.extract import extract_blockchain_data
from chainquery.models import ExtractedData, PriceInfo, TokenPriceParams, Transaction
from chainquery.plugin import Plugin, build_plugin
from chainquery.provider import IntentProvider, NovesClient
from chainquery.ratelimit import RateLimiter
from chainquery.runtime import Message, Response
from chainquery.validate import (
    SUPPORTED_CHAINS,
    ValidationResult,
    validate_address,
    validate_chain,
    validate_tx_hash,
)

__all__ = [
    "__version__",
    "build_plugin",
    "Plugin",
    "ChainqueryConfig",
    "load_config",
    "GetRecentTxsAction",
    "GetTranslatedTxAction",
    "GetTokenPriceAction",
    "extract_blockchain_data",
    "ExtractedData",
    "PriceInfo",
    "TokenPriceParams",
    "Transaction",
    "IntentProvider",
    "NovesClient",
    "RateLimiter",
    "Message",
    "Response",
    "SUPPORTED_CHAINS",
    "ValidationResult",
    "validate_address",
    "validate_chain",
    "validate_tx_hash",
]

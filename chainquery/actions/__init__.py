"""The provider-backed actions exposed to the host runtime."""

from chainquery.actions.base import ProviderAction
from chainquery.actions.recent_txs import GetRecentTxsAction
from chainquery.actions.token_price import GetTokenPriceAction
from chainquery.actions.translated_tx import GetTranslatedTxAction

__all__ = [
    "ProviderAction",
    "GetRecentTxsAction",
    "GetTranslatedTxAction",
    "GetTokenPriceAction",
]

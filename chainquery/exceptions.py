"""
Custom exception hierarchy for chainquery.

Provider and config failures are raised as ChainqueryError subclasses.
Action handlers catch them at the handler boundary and turn them into a
user-facing reply; nothing here ever reaches the host runtime.

Validation failures are not raised: the validators in validate.py return
an unraised DataError subclass inside a ValidationResult.

Error code mapping:
  api_error         — APIError (bad response, rate limit, invalid key)
  network_error     — NetworkError (timeout, connection refused)
  data_error        — DataError (invalid address, hash, or chain)
  config_error      — ConfigError (malformed config)
"""


class ChainqueryError(Exception):
    """Base exception for all chainquery errors."""

    error_code: str = "unknown_error"

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict:
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class APIError(ChainqueryError):
    """Upstream provider returned an error response."""

    error_code = "api_error"


class InvalidAPIKeyError(APIError):
    """Provider rejected the configured API key."""

    error_code = "invalid_api_key"


class RateLimitError(APIError):
    """Provider-side rate limit exceeded."""

    error_code = "rate_limited"

    def __init__(self, message: str, retry_after: int = 60) -> None:
        super().__init__(message, details={"retry_after_seconds": retry_after})
        self.retry_after = retry_after


class NetworkError(ChainqueryError):
    """Network connectivity issue — timeout or connection failure."""

    error_code = "network_error"


class NetworkTimeoutError(NetworkError):
    """Request timed out."""

    error_code = "network_timeout"


class ConnectionFailedError(NetworkError):
    """Could not connect to the provider endpoint."""

    error_code = "connection_failed"


class DataError(ChainqueryError):
    """Input data failed validation."""

    error_code = "data_error"


class InvalidAddressError(DataError):
    """Address is not 0x + 40 hex chars."""

    error_code = "invalid_address"


class InvalidTxHashError(DataError):
    """Transaction hash is not 0x + 64 hex chars."""

    error_code = "invalid_tx_hash"


class UnsupportedChainError(DataError):
    """Chain is not one of the supported canonical identifiers."""

    error_code = "unsupported_chain"


class ConfigError(ChainqueryError):
    """Config file or environment override is malformed."""

    error_code = "config_error"


class ConfigInvalidError(ConfigError):
    """Config file exists but contains invalid TOML or invalid values."""

    error_code = "config_invalid"

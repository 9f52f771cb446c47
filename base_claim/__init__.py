from .config import Config, load_config
from .errors import ConfigurationError, classify_error
from .payload import ClaimPayload, load_claim_data
from .runner import claim_tokens, main

__all__ = [
    "ClaimPayload",
    "Config",
    "ConfigurationError",
    "claim_tokens",
    "classify_error",
    "load_claim_data",
    "load_config",
    "main",
]

from __future__ import annotations

import sys
from typing import Dict, List

import requests
from pydantic import ValidationError
from web3.exceptions import ContractLogicError, ProviderConnectionError, TimeExhausted


CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
CALL_EXCEPTION = "CALL_EXCEPTION"
INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
NETWORK_ERROR = "NETWORK_ERROR"
UNKNOWN_ERROR = "UNKNOWN_ERROR"

HINTS: Dict[str, List[str]] = {
    CONFIGURATION_ERROR: [
        "⚙️  Configuration problem, check PRIVATE_KEY, .env and the claim data file",
    ],
    CALL_EXCEPTION: [
        "📋 Contract call reverted, possible reasons:",
        "  - already claimed",
        "  - invalid proof",
        "  - bad parameters",
    ],
    INSUFFICIENT_FUNDS: [
        "💰 Insufficient balance, top up ETH to cover gas and the claim value",
    ],
    NETWORK_ERROR: [
        "🌐 Network error, check the RPC_URL setting",
    ],
}


class ConfigurationError(Exception):
    """Local setup is incomplete; raised before anything is sent."""


def classify_error(exc: BaseException) -> str:
    if isinstance(exc, (ConfigurationError, ValidationError)):
        return CONFIGURATION_ERROR
    if isinstance(exc, ContractLogicError):
        return CALL_EXCEPTION
    # nodes report this as a plain JSON-RPC error, only the message identifies it
    if "insufficient funds" in str(exc).lower():
        return INSUFFICIENT_FUNDS
    if isinstance(exc, (
        requests.exceptions.ConnectionError,
        requests.exceptions.Timeout,
        ProviderConnectionError,
        TimeExhausted,
        ConnectionError,
    )):
        return NETWORK_ERROR
    return UNKNOWN_ERROR


def print_hints(code: str) -> None:
    for line in HINTS.get(code, []):
        print(line, file=sys.stderr)


def report_error(exc: BaseException) -> str:
    code = classify_error(exc)
    print(f"💥 Claim failed: {exc}", file=sys.stderr)
    print_hints(code)
    return code

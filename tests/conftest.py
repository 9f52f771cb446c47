"""Shared fixtures: a config with a throwaway key and a fake web3 handle."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from eth_account import Account
from web3.datastructures import AttributeDict
from web3.exceptions import Web3RPCError

from base_claim.config import ENV_KEYS, Config
from base_claim.payload import ClaimPayload

TEST_KEY = "0x" + "11" * 32
TEST_ADDRESS = Account.from_key(TEST_KEY).address
CONTRACT = "0x6A3044c1Cf077F386c9345eF84f2518A2682Dfff"
TX_HASH = b"\x12" * 32


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Empty env and cwd; values load_dotenv writes are undone after each test."""
    monkeypatch.chdir(tmp_path)
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)


@pytest.fixture
def cfg() -> Config:
    return Config.model_validate({"PRIVATE_KEY": TEST_KEY})


@pytest.fixture
def payload() -> ClaimPayload:
    return ClaimPayload(proof=["0x" + "aa" * 32, "0x" + "bb" * 32], amount=1500 * 10**18)


def make_receipt(status: int = 1, **fields) -> AttributeDict:
    receipt = {
        "status": status,
        "blockNumber": 21_000_000,
        "gasUsed": 95_000,
        "effectiveGasPrice": 5_000_000,
        "transactionHash": TX_HASH,
    }
    receipt.update(fields)
    return AttributeDict({k: v for k, v in receipt.items() if v is not None})


def insufficient_funds_error() -> Web3RPCError:
    return Web3RPCError(
        "{'code': -32000, 'message': 'insufficient funds for gas * price + value: "
        "balance 0, tx cost 30000125000000000'}"
    )


@pytest.fixture
def fake_w3():
    """MagicMock standing in for Web3; build_transaction returns a signable dict."""
    w3 = MagicMock(name="w3")
    w3.eth.get_balance.return_value = 10**16
    w3.eth.get_transaction_count.return_value = 7
    w3.eth.send_raw_transaction.return_value = TX_HASH
    w3.eth.wait_for_transaction_receipt.return_value = make_receipt()

    fn = w3.eth.contract.return_value.functions.claim.return_value
    fn.build_transaction.side_effect = lambda opts: {**opts, "to": CONTRACT, "data": "0xdeadbeef"}
    fn.estimate_gas.return_value = 180_000
    return w3


def claim_fn(w3):
    return w3.eth.contract.return_value.functions.claim.return_value

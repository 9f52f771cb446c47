from __future__ import annotations

import sys
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv
from eth_account import Account
from web3 import Web3
from web3.middleware import ExtraDataToPOAMiddleware

from .abi import CLAIM_ABI
from .config import (
    CLAIM_VALUE_WEI,
    GAS_LIMIT,
    MAX_FEE_PER_GAS,
    MAX_PRIORITY_FEE_PER_GAS,
    Config,
    load_config,
)
from .errors import CALL_EXCEPTION, ConfigurationError, print_hints, report_error
from .payload import ClaimPayload, load_claim_data


def connect(rpc_url: str) -> Web3:
    w3 = Web3(Web3.HTTPProvider(rpc_url, request_kwargs={"timeout": 60}))
    # Harmless on chains without the long extraData field
    w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)
    return w3


def tx_options(sender: str, nonce: int, chain_id: int) -> Dict[str, Any]:
    return {
        "from": sender,
        "nonce": nonce,
        "chainId": chain_id,
        "gas": GAS_LIMIT,
        "maxFeePerGas": MAX_FEE_PER_GAS,
        "maxPriorityFeePerGas": MAX_PRIORITY_FEE_PER_GAS,
        "value": CLAIM_VALUE_WEI,
    }


def claim_tokens(cfg: Config, w3: Optional[Web3] = None, payload: Optional[ClaimPayload] = None):
    """Send one claim transaction and wait for its receipt.

    Any failure is reported on stderr and ``None`` is returned; the receipt is
    returned otherwise, whatever its status.
    """
    try:
        print("🚀 Starting claim...")

        if not cfg.private_key:
            raise ConfigurationError("Set PRIVATE_KEY in the environment or .env")

        if w3 is None:
            w3 = connect(cfg.rpc_url)
        acct = Account.from_key(cfg.private_key)
        print("📮 Wallet address:", acct.address)

        balance = w3.eth.get_balance(acct.address)
        print("💰 ETH balance:", Web3.from_wei(balance, "ether"))

        contract = w3.eth.contract(address=cfg.contract_address, abi=CLAIM_ABI)

        if payload is None:
            payload = load_claim_data(cfg.claim_data_path)
        proof, to, amount, season, duration, signature = payload.call_args(acct.address)

        print("📋 Claim parameters:")
        print("  - Recipient:", to)
        print("  - Amount:", Web3.from_wei(amount, "ether"), "tokens")
        print("  - Proof length:", len(proof))
        print("  - Season:", season)
        print("  - Duration:", duration)

        fn = contract.functions.claim(proof, to, amount, season, duration, signature)

        if cfg.estimate_gas:
            print("⛽ Estimating gas...")
            estimate = fn.estimate_gas({"from": acct.address, "value": CLAIM_VALUE_WEI})
            print("📊 Estimated gas:", estimate, f"(sending with limit {GAS_LIMIT})")

        print("📤 Sending claim transaction...")
        nonce = w3.eth.get_transaction_count(acct.address)
        tx = fn.build_transaction(tx_options(acct.address, nonce, cfg.chain_id))
        signed = acct.sign_transaction(tx)
        tx_hash = w3.eth.send_raw_transaction(signed.raw_transaction)

        print("🔗 Tx hash:", Web3.to_hex(tx_hash))
        print("⏳ Waiting for confirmation...")
        receipt = w3.eth.wait_for_transaction_receipt(
            tx_hash, timeout=cfg.confirm_timeout, poll_latency=cfg.poll_latency
        )

        if receipt.status == 1:
            gas_price = receipt.get("effectiveGasPrice") or receipt.get("gasPrice")
            print("✅ Claim succeeded!")
            print("🎉 Confirmed in block:", receipt.blockNumber)
            print("⛽ Gas used:", receipt.gasUsed)
            if gas_price is None:
                print("💸 Gas fee: unavailable (receipt has no gas price)")
            else:
                print("💸 Gas fee:", Web3.from_wei(receipt.gasUsed * gas_price, "ether"), "ETH")
        else:
            # fixed gas means no preflight, so reverts only show up here
            print("❌ Transaction failed")
            print(f"💥 Claim reverted in block {receipt.blockNumber}: {Web3.to_hex(tx_hash)}", file=sys.stderr)
            print_hints(CALL_EXCEPTION)
        return receipt

    except Exception as exc:
        report_error(exc)
        return None


def main() -> int:
    # console-script entry has no claim.py in front of it; read .env from the cwd
    load_dotenv(find_dotenv(usecwd=True))
    print("🎯 Base mainnet token claim")
    try:
        cfg = load_config()
    except Exception as exc:
        report_error(exc)
        return 0
    print("📄 Contract address:", cfg.contract_address)
    print("=" * 50)

    claim_tokens(cfg)
    return 0

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from web3 import Web3


BASE_CHAIN_ID = 8453

# Static transaction parameters, not configurable
GAS_LIMIT = 300_000
MAX_FEE_PER_GAS = Web3.to_wei("0.1", "gwei")
MAX_PRIORITY_FEE_PER_GAS = Web3.to_wei("0.001", "gwei")
CLAIM_VALUE_WEI = 125_000_000_000_000

# Placeholders until the distributor publishes per-claim values
DEFAULT_SEASON = 0
DEFAULT_DURATION = 0
DEFAULT_SIGNATURE = "0x"

ENV_KEYS = (
    "RPC_URL",
    "CONTRACT_ADDRESS",
    "PRIVATE_KEY",
    "CHAIN_ID",
    "CLAIM_DATA_PATH",
    "ESTIMATE_GAS",
    "CONFIRM_TIMEOUT",
    "POLL_LATENCY",
)


class Config(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    rpc_url: str = Field("https://mainnet.base.org", alias="RPC_URL")
    contract_address: str = Field("0x6A3044c1Cf077F386c9345eF84f2518A2682Dfff", alias="CONTRACT_ADDRESS")
    private_key: Optional[str] = Field(None, alias="PRIVATE_KEY", repr=False)
    chain_id: int = Field(BASE_CHAIN_ID, alias="CHAIN_ID")
    claim_data_path: str = Field("claim_data.json", alias="CLAIM_DATA_PATH")
    estimate_gas: bool = Field(False, alias="ESTIMATE_GAS")
    confirm_timeout: Optional[float] = Field(None, alias="CONFIRM_TIMEOUT")
    poll_latency: float = Field(2.0, alias="POLL_LATENCY")

    @field_validator("private_key")
    @classmethod
    def _pk_hex(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        if not v.startswith("0x"):
            v = "0x" + v
        if len(v) != 66:
            raise ValueError("PRIVATE_KEY must be 0x + 64 hex")
        int(v[2:], 16)  # will raise if invalid
        return v

    @field_validator("contract_address")
    @classmethod
    def _addr_hex(cls, v: str) -> str:
        if not Web3.is_address(v):
            raise ValueError("CONTRACT_ADDRESS must be hex address")
        return Web3.to_checksum_address(v)


def load_config() -> Config:
    # dotenv is loaded by the entry script before this runs
    env = {k: os.getenv(k) for k in ENV_KEYS}
    return Config.model_validate({k: v for k, v in env.items() if v not in (None, "")})

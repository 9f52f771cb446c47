from __future__ import annotations

import json
import os
from typing import List, Tuple

from pydantic import BaseModel, Field, field_validator
from web3 import Web3

from .config import DEFAULT_DURATION, DEFAULT_SEASON, DEFAULT_SIGNATURE
from .errors import ConfigurationError


def _strip_0x(h: str) -> str:
    return h[2:] if h[:2].lower() == "0x" else h


class ClaimPayload(BaseModel):
    """Operator-supplied claim data, copied from the distributor's site.

    Only the shape is checked here. Whether the proof and amount are right,
    and whether the address already claimed, is decided by the contract.
    """

    proof: List[str]
    amount: int = Field(..., ge=0)
    season: int = Field(DEFAULT_SEASON, ge=0, le=255)
    duration: int = Field(DEFAULT_DURATION, ge=0)
    signature: str = DEFAULT_SIGNATURE

    @field_validator("proof")
    @classmethod
    def _bytes32(cls, v: List[str]) -> List[str]:
        for h in v:
            # to_bytes left-pads odd-length hex, check digits first
            if len(_strip_0x(h)) != 64:
                raise ValueError(f"proof entry {h} is not 32 bytes")
            Web3.to_bytes(hexstr=h)
        return v

    @field_validator("signature")
    @classmethod
    def _hex(cls, v: str) -> str:
        if len(_strip_0x(v)) % 2:
            raise ValueError("signature has an odd number of hex digits")
        Web3.to_bytes(hexstr=v)
        return v

    def call_args(self, recipient: str) -> Tuple[list, str, int, int, int, bytes]:
        return (
            [Web3.to_bytes(hexstr=h) for h in self.proof],
            Web3.to_checksum_address(recipient),
            self.amount,
            self.season,
            self.duration,
            Web3.to_bytes(hexstr=self.signature),
        )


def load_claim_data(path: str) -> ClaimPayload:
    if not os.path.exists(path):
        raise ConfigurationError(f"Claim data file not found: {path} (set CLAIM_DATA_PATH)")
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Claim data file {path} is not valid JSON: {exc}") from exc
    return ClaimPayload.model_validate(data)

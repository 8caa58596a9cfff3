"""Domain models for quotes, rates and transaction descriptors."""

import base64
import json
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional

BPS_DENOMINATOR = 10_000


class OperationKind(str, Enum):
    """Stablecoin operations that can be quoted and built."""

    MINT = "mint"
    REDEEM = "redeem"
    BURN = "burn"


class Cluster(str, Enum):
    """Target network for transaction descriptors."""

    MAINNET = "mainnet"
    DEVNET = "devnet"


@dataclass(frozen=True)
class Asset:
    """A stablecoin identified by its protocol index."""

    index: int
    symbol: str
    name: str
    enabled: bool = True


@dataclass(frozen=True)
class OperationRequest:
    """Unvalidated operation input, as decoded from the wire.

    ``params`` is keyed by wire name (``signer``, ``minimumReceived``...).
    ``required`` lists the params this endpoint cannot do without.
    """

    stablecoin_index: Optional[int]
    amount: Optional[int]
    operation: Optional[str]
    amount_field: str = "depositAmount"
    params: Mapping[str, Any] = field(default_factory=dict)
    required: tuple[str, ...] = ()


@dataclass(frozen=True)
class ValidatedRequest:
    """Operation input that passed every validation rule."""

    asset: Asset
    amount: int
    operation: OperationKind
    params: Mapping[str, Any] = field(default_factory=dict)

    @property
    def minimum_received(self) -> Optional[int]:
        return self.params.get("minimumReceived")


@dataclass(frozen=True)
class ExchangeRateSnapshot:
    """Base and receipt token value of a stablecoin, in basis points."""

    id: int
    stablecoin_index: int
    base_value_bps: int
    receipt_value_bps: int
    timestamp: datetime


@dataclass(frozen=True)
class ApySnapshot:
    """Annual percentage yield of a stablecoin, in basis points."""

    stablecoin_index: int
    apy_bps: int
    timestamp: datetime


@dataclass(frozen=True)
class SupplyCap:
    """Supply cap of a stablecoin with derived capacity figures."""

    stablecoin_index: int
    cap: int
    current_supply: int
    remaining: int
    utilization_percent: int

    @classmethod
    def from_supply(cls, stablecoin_index: int, cap: int, current_supply: int) -> "SupplyCap":
        """Derive remaining capacity and utilization from cap and supply.

        Raises:
            ValueError: if the figures are negative or supply exceeds the cap
        """
        if cap < 0 or current_supply < 0:
            raise ValueError(
                f"negative supply figures for stablecoin {stablecoin_index}: "
                f"cap={cap} current={current_supply}"
            )
        if current_supply > cap:
            raise ValueError(
                f"supply {current_supply} exceeds cap {cap} for stablecoin {stablecoin_index}"
            )
        utilization = current_supply * 100 // cap if cap else 0
        return cls(
            stablecoin_index=stablecoin_index,
            cap=cap,
            current_supply=current_supply,
            remaining=cap - current_supply,
            utilization_percent=utilization,
        )


@dataclass(frozen=True)
class Quote:
    """A deterministic fee quote for a mint, redeem or burn."""

    stablecoin_index: int
    operation: OperationKind
    gross: int
    fee: int
    net: int
    fee_bps: int
    base_value_bps: int
    receipt_value_bps: int
    rate_timestamp: datetime

    def to_dict(self) -> dict:
        """Convert to a plain dict (stable key order)."""
        return {
            "stablecoin_index": self.stablecoin_index,
            "operation": self.operation.value,
            "gross": self.gross,
            "fee": self.fee,
            "net": self.net,
            "fee_bps": self.fee_bps,
            "base_value_bps": self.base_value_bps,
            "receipt_value_bps": self.receipt_value_bps,
            "rate_timestamp": self.rate_timestamp.isoformat(),
        }


@dataclass(frozen=True)
class TransactionDescriptor:
    """An unsigned operation ready for signing outside this service."""

    operation: str
    instruction: str
    cluster: Cluster
    payload: Mapping[str, Any]
    description: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "operation": self.operation,
            "instruction": self.instruction,
            "cluster": self.cluster.value,
            "payload": dict(self.payload),
        }

    def encode(self) -> str:
        """Serialize to an opaque base64 string.

        Canonical JSON (sorted keys, no whitespace) keeps the encoding
        byte-identical for identical inputs.
        """
        raw = json.dumps(self.to_dict(), sort_keys=True, separators=(",", ":"))
        return base64.b64encode(raw.encode("utf-8")).decode("ascii")

    @classmethod
    def decode(cls, encoded: str) -> "TransactionDescriptor":
        """Parse a string produced by ``encode``."""
        data = json.loads(base64.b64decode(encoded.encode("ascii")))
        return cls(
            operation=data["operation"],
            instruction=data["instruction"],
            cluster=Cluster(data["cluster"]),
            payload=data["payload"],
        )

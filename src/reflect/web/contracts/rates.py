"""Stablecoin, exchange rate, APY and supply cap contracts."""

from datetime import datetime

from pydantic import Field

from reflect.core.models import ApySnapshot, Asset, ExchangeRateSnapshot, SupplyCap
from reflect.web.contracts.envelope import CamelModel


class StablecoinInfo(CamelModel):
    """Information about a supported stablecoin."""

    index: int = Field(..., description="Protocol index")
    symbol: str
    name: str

    @classmethod
    def from_asset(cls, asset: Asset) -> "StablecoinInfo":
        return cls(index=asset.index, symbol=asset.symbol, name=asset.name)


class ExchangeRateData(CamelModel):
    """Exchange rate snapshot."""

    id: int
    stablecoin: int = Field(..., description="Stablecoin index")
    base_usd_value_bps: int
    receipt_usd_value_bps: int
    timestamp: datetime

    @classmethod
    def from_snapshot(cls, snapshot: ExchangeRateSnapshot) -> "ExchangeRateData":
        return cls(
            id=snapshot.id,
            stablecoin=snapshot.stablecoin_index,
            base_usd_value_bps=snapshot.base_value_bps,
            receipt_usd_value_bps=snapshot.receipt_value_bps,
            timestamp=snapshot.timestamp,
        )


class ApyData(CamelModel):
    """APY snapshot."""

    index: int = Field(..., description="Stablecoin index")
    apy_bps: int = Field(..., description="APY in basis points")
    timestamp: datetime

    @classmethod
    def from_snapshot(cls, snapshot: ApySnapshot) -> "ApyData":
        return cls(
            index=snapshot.stablecoin_index,
            apy_bps=snapshot.apy_bps,
            timestamp=snapshot.timestamp,
        )


class SupplyCapData(CamelModel):
    """Supply cap with derived capacity figures."""

    index: int
    supply_cap: int
    current_supply: int
    remaining_capacity: int
    utilization_percentage: int

    @classmethod
    def from_supply_cap(cls, cap: SupplyCap) -> "SupplyCapData":
        return cls(
            index=cap.stablecoin_index,
            supply_cap=cap.cap,
            current_supply=cap.current_supply,
            remaining_capacity=cap.remaining,
            utilization_percentage=cap.utilization_percent,
        )


class IntegrationConfigData(CamelModel):
    """Fee configuration exposed to integration partners."""

    fee_bps: int
    cluster: str
    stablecoins: list[int] = Field(default_factory=list)

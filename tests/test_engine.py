"""Tests for validation, the quote engine and the transaction builder."""

from datetime import datetime, timezone

import pytest

from reflect.core.assets import AssetRegistry
from reflect.core.builder import TransactionBuilder
from reflect.core.engine import check_minimum_received, compute_fee, compute_quote
from reflect.core.models import (
    Asset,
    Cluster,
    ExchangeRateSnapshot,
    OperationKind,
    OperationRequest,
    SupplyCap,
    TransactionDescriptor,
)
from reflect.core.validation import validate, validate_claim, validate_days
from reflect.errors import (
    AssetNotFound,
    InvalidAmount,
    InvalidRange,
    MissingField,
    UnsupportedOperation,
)

RATE = ExchangeRateSnapshot(
    id=1,
    stablecoin_index=0,
    base_value_bps=1016858791,
    receipt_value_bps=1016858791,
    timestamp=datetime(2025, 12, 19, 17, 4, 8, tzinfo=timezone.utc),
)


def quote_for(amount: int, operation: str = "mint", fee_bps: int = 10):
    registry = AssetRegistry.from_indices([0])
    request = OperationRequest(stablecoin_index=0, amount=amount, operation=operation)
    return compute_quote(validate(request, registry), RATE, fee_bps)


class TestValidation:
    """Tests for request validation rules and their order."""

    @pytest.fixture
    def registry(self):
        return AssetRegistry.from_indices([0])

    def test_valid_request(self, registry):
        request = OperationRequest(stablecoin_index=0, amount=1_000_000, operation="Mint")
        validated = validate(request, registry)

        assert validated.asset.index == 0
        assert validated.amount == 1_000_000
        assert validated.operation is OperationKind.MINT

    @pytest.mark.parametrize("amount", [0, -1, -100])
    def test_non_positive_amount(self, registry, amount):
        request = OperationRequest(stablecoin_index=0, amount=amount, operation="mint")

        with pytest.raises(InvalidAmount) as exc_info:
            validate(request, registry)

        assert exc_info.value.message == "Invalid request data: depositAmount must be positive"
        assert exc_info.value.http_status == 400

    def test_amount_field_name_in_message(self, registry):
        request = OperationRequest(
            stablecoin_index=0, amount=0, operation="redeem", amount_field="amount"
        )

        with pytest.raises(InvalidAmount, match="amount must be positive"):
            validate(request, registry)

    def test_missing_amount(self, registry):
        request = OperationRequest(stablecoin_index=0, amount=None, operation="mint")

        with pytest.raises(MissingField, match="depositAmount is required"):
            validate(request, registry)

    def test_unknown_asset(self, registry):
        request = OperationRequest(stablecoin_index=99, amount=1_000_000, operation="mint")

        with pytest.raises(AssetNotFound) as exc_info:
            validate(request, registry)

        assert exc_info.value.message == "Stablecoin with the specified index not found"
        assert exc_info.value.http_status == 404

    def test_disabled_asset(self):
        registry = AssetRegistry([Asset(index=0, symbol="USDC+", name="USDC+", enabled=False)])
        request = OperationRequest(stablecoin_index=0, amount=10, operation="mint")

        with pytest.raises(AssetNotFound):
            validate(request, registry)

    def test_amount_checked_before_asset(self, registry):
        """Both invalid: the amount rule fires first."""
        request = OperationRequest(stablecoin_index=99, amount=-100, operation="mint")

        with pytest.raises(InvalidAmount):
            validate(request, registry)

    def test_missing_stablecoin_index(self, registry):
        request = OperationRequest(stablecoin_index=None, amount=10, operation="mint")

        with pytest.raises(MissingField) as exc_info:
            validate(request, registry)

        assert exc_info.value.message == "Invalid request data: stablecoinIndex is required"
        assert exc_info.value.http_status == 400

    @pytest.mark.parametrize("operation", [None, "", "   "])
    def test_missing_operation(self, registry, operation):
        request = OperationRequest(stablecoin_index=0, amount=10, operation=operation)

        with pytest.raises(MissingField) as exc_info:
            validate(request, registry)

        assert exc_info.value.message == "Invalid request data: operation is required"

    def test_asset_checked_before_operation(self, registry):
        request = OperationRequest(stablecoin_index=None, amount=10, operation=None)

        with pytest.raises(MissingField, match="stablecoinIndex"):
            validate(request, registry)

    def test_unsupported_operation(self, registry):
        request = OperationRequest(stablecoin_index=0, amount=10, operation="swap")

        with pytest.raises(UnsupportedOperation):
            validate(request, registry)

    def test_missing_required_param(self, registry):
        request = OperationRequest(
            stablecoin_index=0,
            amount=10,
            operation="mint",
            params={"signer": "  ", "minimumReceived": 5},
            required=("signer", "minimumReceived"),
        )

        with pytest.raises(MissingField, match="signer is required"):
            validate(request, registry)

    def test_negative_minimum_received(self, registry):
        request = OperationRequest(
            stablecoin_index=0,
            amount=10,
            operation="mint",
            params={"signer": "wallet", "minimumReceived": -1},
            required=("signer", "minimumReceived"),
        )

        with pytest.raises(InvalidAmount, match="minimumReceived must not be negative"):
            validate(request, registry)

    def test_params_are_cleaned(self, registry):
        request = OperationRequest(
            stablecoin_index=0,
            amount=10,
            operation="burn",
            params={"signer": " wallet ", "collateralMint": None},
        )

        validated = validate(request, registry)

        assert validated.params == {"signer": "wallet"}

    def test_validate_claim(self, registry):
        asset, claimant = validate_claim(0, " wallet ", registry)

        assert asset.index == 0
        assert claimant == "wallet"

        with pytest.raises(MissingField, match="claimant is required"):
            validate_claim(0, "", registry)
        with pytest.raises(AssetNotFound):
            validate_claim(7, "wallet", registry)
        with pytest.raises(MissingField, match="stablecoinIndex is required"):
            validate_claim(None, "wallet", registry)

    def test_validate_days(self):
        assert validate_days(1, 365) == 1
        assert validate_days(365, 365) == 365

        with pytest.raises(InvalidRange, match="at least 1"):
            validate_days(0, 365)
        with pytest.raises(InvalidRange, match="must not exceed 365"):
            validate_days(366, 365)


class TestQuoteEngine:
    """Tests for fee computation."""

    def test_reference_mint_quote(self):
        quote = quote_for(1_000_000)

        assert quote.fee == 1000
        assert quote.net == 999000
        assert quote.gross == 1_000_000

    @pytest.mark.parametrize("amount", [1, 999, 1000, 1001, 123_456_789, 10**18 + 7])
    def test_fee_plus_net_is_amount(self, amount):
        quote = quote_for(amount)

        assert quote.fee + quote.net == amount
        assert quote.fee == amount * 10 // 10_000

    def test_fee_rounds_down(self):
        assert compute_fee(999, 10) == 0
        assert compute_fee(1999, 10) == 1

    def test_same_formula_for_all_operations(self):
        mint = quote_for(5_000_000, "mint")
        redeem = quote_for(5_000_000, "redeem")
        burn = quote_for(5_000_000, "burn")

        assert (mint.fee, mint.net) == (redeem.fee, redeem.net) == (burn.fee, burn.net)

    def test_custom_fee_schedule(self):
        quote = quote_for(1_000_000, fee_bps=50)

        assert quote.fee == 5000
        assert quote.net == 995000

    def test_rate_carried_through(self):
        quote = quote_for(1_000_000)

        assert quote.base_value_bps == RATE.base_value_bps
        assert quote.receipt_value_bps == RATE.receipt_value_bps
        assert quote.rate_timestamp == RATE.timestamp

    def test_deterministic(self):
        assert quote_for(42_000) == quote_for(42_000)
        assert quote_for(42_000).to_dict() == quote_for(42_000).to_dict()

    def test_minimum_received(self):
        quote = quote_for(1_000_000)

        check_minimum_received(quote, None)
        check_minimum_received(quote, 999000)
        with pytest.raises(InvalidAmount, match="minimumReceived exceeds quoted amount"):
            check_minimum_received(quote, 999001)


class TestTransactionBuilder:
    """Tests for descriptor construction."""

    def test_build_mint(self):
        quote = quote_for(1_000_000)
        builder = TransactionBuilder(Cluster.DEVNET)

        descriptor = builder.build(quote, OperationKind.MINT, {"signer": "wallet"})

        assert descriptor.instruction == "mint_stablecoin"
        assert descriptor.cluster is Cluster.DEVNET
        assert descriptor.payload["amount"] == 1_000_000
        assert descriptor.payload["expected_amount"] == 999000
        assert descriptor.payload["signer"] == "wallet"

    def test_encoding_is_byte_identical(self):
        builder = TransactionBuilder()
        first = builder.build(quote_for(77_777), OperationKind.BURN, {"signer": "a"})
        second = builder.build(quote_for(77_777), OperationKind.BURN, {"signer": "a"})

        assert first.encode() == second.encode()

    def test_encode_decode(self):
        descriptor = TransactionBuilder().build(quote_for(10_000), OperationKind.REDEEM)

        decoded = TransactionDescriptor.decode(descriptor.encode())

        assert decoded.to_dict() == descriptor.to_dict()

    @pytest.mark.parametrize("operation", ["mint", "claim", None, 3])
    def test_rejects_unknown_operation(self, operation):
        with pytest.raises(UnsupportedOperation):
            TransactionBuilder().build(quote_for(10_000), operation)

    def test_build_claim(self):
        descriptor = TransactionBuilder().build_claim(0, "claimant-wallet")

        assert descriptor.operation == "claim"
        assert descriptor.payload == {"stablecoin_index": 0, "claimant": "claimant-wallet"}


class TestSupplyCap:
    """Tests for supply cap derivation."""

    def test_reference_figures(self):
        cap = SupplyCap.from_supply(0, 1_000_000_000, 500_000_000)

        assert cap.remaining == 500_000_000
        assert cap.utilization_percent == 50
        assert cap.remaining + cap.current_supply == cap.cap

    def test_full_and_empty(self):
        assert SupplyCap.from_supply(0, 100, 100).utilization_percent == 100
        assert SupplyCap.from_supply(0, 100, 0).utilization_percent == 0
        assert SupplyCap.from_supply(0, 0, 0).utilization_percent == 0

    def test_supply_over_cap_rejected(self):
        with pytest.raises(ValueError, match="exceeds cap"):
            SupplyCap.from_supply(0, 100, 101)

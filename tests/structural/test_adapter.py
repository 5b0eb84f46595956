"""Tests for the payment gateway adapters."""

from unittest.mock import Mock

import pytest

from patterns_app.errors import UnknownVariantError
from patterns_app.structural.adapter import (
    LegacyPaymentAdapter,
    LegacyPaymentGateway,
    ModernPaymentAdapter,
    ModernPaymentGateway,
    PaymentProcessor,
    create_payment_processor,
    run,
)


class TestAdapters:
    """Test suite for call translation."""

    def test_legacy_adapter_translates_calls(self) -> None:
        gateway = Mock(spec=LegacyPaymentGateway)
        adapter = LegacyPaymentAdapter(gateway)

        adapter.process_payment(123)
        adapter.refund_payment(30)

        gateway.make_payment.assert_called_once_with(123)
        gateway.cancel_payment.assert_called_once_with(30)

    def test_modern_adapter_translates_calls(self) -> None:
        gateway = Mock(spec=ModernPaymentGateway)
        adapter = ModernPaymentAdapter(gateway)

        adapter.process_payment(123)
        adapter.refund_payment(30)

        gateway.pay.assert_called_once_with(123)
        gateway.reverse.assert_called_once_with(30)

    def test_gateway_output(self, console) -> None:
        adapter = ModernPaymentAdapter(ModernPaymentGateway(console))
        adapter.process_payment(49.5)
        adapter.refund_payment(10.0)
        assert console.lines == [
            "Processing Modern payment : 49.5",
            "Refunding Modern payment : 10",
        ]


class TestCreatePaymentProcessor:
    """Test suite for configuration-driven adapter selection."""

    @pytest.mark.parametrize("gateway,adapter_cls", [
        ("legacy", LegacyPaymentAdapter),
        ("modern", ModernPaymentAdapter),
    ])
    def test_known_gateways(self, console, gateway, adapter_cls) -> None:
        processor = create_payment_processor(gateway, console)
        assert isinstance(processor, PaymentProcessor)
        assert isinstance(processor, adapter_cls)

    def test_unknown_gateway_raises(self, console) -> None:
        with pytest.raises(UnknownVariantError) as exc_info:
            create_payment_processor("barter", console)
        assert exc_info.value.discriminator == "barter"


def test_run_output(console) -> None:
    run(console)
    assert console.lines == [
        "Processing Legacy payment : 123",
        "Refunding Legacy payment : 30",
        "Processing Modern payment : 123",
        "Refunding Modern payment : 30",
    ]


def test_run_with_modern_gateway_first(console, empty_loader) -> None:
    config = empty_loader.build_config(overrides={"payment": {"gateway": "modern"}})
    run(console, config)
    assert console.lines[0] == "Processing Modern payment : 123"
    assert console.lines[2] == "Processing Legacy payment : 123"

"""Tests for payment services."""

import pytest
from slooze_schemas import PaymentType

from apps.web.orders.services import (
    PaymentDetailsError,
    build_payment,
    payment_form_context,
    payment_from_post,
)


class TestBuildPayment:
    def test_cash_needs_no_details(self):
        payment = build_payment("CASH", upi_id="ignored")

        assert payment.type == PaymentType.CASH
        assert payment.details == {}

    @pytest.mark.parametrize(
        ("payment_type", "kwargs", "expected"),
        [
            ("UPI", {"upi_id": " asha@upi "}, {"upiId": "asha@upi"}),
            ("CARD", {"card_number": "4111111111111111"}, {"cardNumber": "4111111111111111"}),
            ("NETBANKING", {"bank_name": "HDFC"}, {"bankName": "HDFC"}),
        ],
    )
    def test_only_chosen_detail_is_sent(self, payment_type, kwargs, expected):
        payment = build_payment(
            payment_type, **{"upi_id": "", "card_number": "", "bank_name": "", **kwargs}
        )

        assert payment.details == expected

    def test_other_details_are_dropped(self):
        payment = build_payment("CARD", upi_id="asha@upi", card_number="4242")

        assert payment.details == {"cardNumber": "4242"}

    @pytest.mark.parametrize(
        ("payment_type", "message"),
        [
            ("UPI", "Please enter your UPI ID"),
            ("CARD", "Please enter your card number"),
            ("NETBANKING", "Please enter your bank name"),
        ],
    )
    def test_blank_detail_is_rejected(self, payment_type, message):
        with pytest.raises(PaymentDetailsError) as exc_info:
            build_payment(payment_type, upi_id="   ", card_number="", bank_name="")

        assert exc_info.value.message == message

    def test_unknown_method_is_rejected(self):
        with pytest.raises(PaymentDetailsError) as exc_info:
            build_payment("BITCOIN")

        assert exc_info.value.message == "Choose a valid payment method"


def test_payment_from_post_defaults_to_cash():
    assert payment_from_post({}).type == PaymentType.CASH


def test_payment_form_context_lists_all_methods():
    context = payment_form_context(PaymentType.UPI)

    assert context["selected_payment_type"] == "UPI"
    assert [t.label for t in context["payment_types"]] == [
        "Cash on Delivery",
        "UPI",
        "Card",
        "Net Banking",
    ]

"""
Payment services - turn the payment form into an API payment payload.

Shared by checkout (POST /orders) and the pay page (PATCH /orders/:id/pay).
"""

from collections.abc import Mapping

from slooze_schemas import PaymentRequest, PaymentType

# Method -> (form field, API detail key, message when blank)
_REQUIRED_DETAIL = {
    PaymentType.UPI: ("upi_id", "upiId", "Please enter your UPI ID"),
    PaymentType.CARD: ("card_number", "cardNumber", "Please enter your card number"),
    PaymentType.NETBANKING: ("bank_name", "bankName", "Please enter your bank name"),
}


class PaymentDetailsError(Exception):
    """The submitted payment details are incomplete."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def build_payment(
    payment_type: str,
    upi_id: str = "",
    card_number: str = "",
    bank_name: str = "",
) -> PaymentRequest:
    """
    Validate payment details and build the payload for the chosen method.

    Only the detail belonging to the chosen method is sent; CASH sends none.

    Raises:
        PaymentDetailsError: If the method is unknown or its detail is blank.
    """
    try:
        method = PaymentType(payment_type)
    except ValueError as e:
        raise PaymentDetailsError("Choose a valid payment method") from e

    if method not in _REQUIRED_DETAIL:
        return PaymentRequest(type=method, details={})

    values = {
        "upi_id": upi_id.strip(),
        "card_number": card_number.strip(),
        "bank_name": bank_name.strip(),
    }
    field, detail_key, missing_message = _REQUIRED_DETAIL[method]
    if not values[field]:
        raise PaymentDetailsError(missing_message)

    return PaymentRequest(type=method, details={detail_key: values[field]})


def payment_from_post(data: Mapping[str, str]) -> PaymentRequest:
    """build_payment() fed from a submitted payment form."""
    return build_payment(
        data.get("payment_type", PaymentType.CASH.value),
        upi_id=data.get("upi_id", ""),
        card_number=data.get("card_number", ""),
        bank_name=data.get("bank_name", ""),
    )


def payment_form_context(
    selected: str | PaymentType = PaymentType.CASH,
) -> dict[str, object]:
    """Context for the shared payment-method form partial."""
    return {
        "payment_types": list(PaymentType),
        "selected_payment_type": PaymentType(selected).value,
    }

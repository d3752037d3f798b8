# app/payments.py
"""Stripe PaymentIntent client.

Stateless pass-through: turns a price into minor units and asks Stripe for a
client secret. Every request is bounded by the configured timeout.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

import httpx

logger = logging.getLogger(__name__)


class GatewayError(Exception):
    """The payment gateway rejected the request or answered with garbage."""


class GatewayUnavailable(GatewayError):
    """The payment gateway could not be reached or is not configured."""


class GatewayTimeout(GatewayError):
    """The payment gateway did not answer in time."""


def to_minor_units(price: float) -> int:
    """Dollars to cents, rounded half up."""
    cents = (Decimal(str(price)) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(cents)


class StripeGateway:
    def __init__(
        self,
        secret_key: Optional[str],
        api_base: str = "https://api.stripe.com",
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.secret_key = secret_key
        headers = {"Authorization": f"Bearer {secret_key}"} if secret_key else {}
        self.client = httpx.Client(
            base_url=api_base,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )
        if not secret_key:
            logger.warning("STRIPE_SECRET_KEY not set; payment intents will fail until configured")

    def is_available(self) -> bool:
        return bool(self.secret_key)

    def create_payment_intent(self, amount: int, currency: str = "usd") -> dict:
        if not self.is_available():
            raise GatewayUnavailable("Payment gateway is not configured")

        try:
            response = self.client.post(
                "/v1/payment_intents",
                data={
                    "amount": amount,
                    "currency": currency,
                    "payment_method_types[]": "card",
                },
            )
        except httpx.TimeoutException as e:
            logger.error(f"Stripe request timed out: {e}")
            raise GatewayTimeout("Payment gateway timed out") from e
        except httpx.HTTPError as e:
            logger.error(f"Stripe request failed: {e}")
            raise GatewayUnavailable("Payment gateway unreachable") from e

        if response.status_code >= 400:
            logger.error(f"Stripe payment intent failed: HTTP {response.status_code} {response.text}")
            raise GatewayError("Payment gateway rejected the request")

        try:
            intent = response.json()
        except ValueError as e:
            logger.error(f"Unreadable Stripe response: {response.text[:200]}")
            raise GatewayError("Payment gateway returned an unreadable response") from e

        if not isinstance(intent, dict) or not intent.get("client_secret"):
            logger.error(f"No client_secret in Stripe response: {intent}")
            raise GatewayError("Payment gateway returned no client secret")

        logger.info(f"Payment intent created: {intent.get('id')} for {amount} {currency}")
        return intent

    def close(self):
        self.client.close()

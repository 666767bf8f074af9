class BillingError(Exception):
    """Base class for errors raised around the billing engine."""


class InvalidRequestError(BillingError, ValueError):
    """Raw form values could not be turned into a billing request."""


class UnknownPolicyError(BillingError, LookupError):
    """No tariff policy is registered under the requested name."""

from typing import Dict, Optional


class StorefrontError(Exception):
    """Base error rendered to clients as ``{"error": message}``."""

    status_code = 400
    message = "Request failed"

    def __init__(self, message: Optional[str] = None, fields: Optional[Dict[str, str]] = None):
        self.message = message or self.message
        self.fields = fields or {}
        super().__init__(self.message)


class ValidationFailed(StorefrontError):
    status_code = 400
    message = "Missing required fields"


class PermissionDenied(StorefrontError):
    status_code = 403
    message = "Not allowed"


class NotFound(StorefrontError):
    status_code = 404
    message = "Not found"


class PaymentVerificationFailed(StorefrontError):
    # Always the same message whichever check failed
    status_code = 400
    message = "Payment verification failed"

    def __init__(self):
        super().__init__()


class GatewayError(StorefrontError):
    status_code = 500
    message = "Unable to initiate payment, please try again"


class OrderStoreError(StorefrontError):
    status_code = 500
    message = "Unable to save your order, please try again"


class ConfigurationError(StorefrontError):
    status_code = 500
    message = "Payment verification failed"


class AuthenticationFailed(StorefrontError):
    status_code = 400
    message = "Invalid OTP code. Must be 6 digits."


class AuthProviderError(StorefrontError):
    status_code = 502
    message = "Unable to reach the sign-in service, please try again"

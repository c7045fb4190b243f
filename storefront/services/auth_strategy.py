import logging
import re
from typing import Optional, Protocol

import requests
from pydantic import BaseModel

from storefront.exceptions import AuthenticationFailed, AuthProviderError

logger = logging.getLogger(__name__)

COUNTRY_CODE = "+91"


class AuthIdentity(BaseModel):
    user_id: str
    phone: str


class AuthStrategy(Protocol):
    def send_otp(self, phone: str) -> None:
        ...

    def verify_otp(self, phone: str, code: str) -> AuthIdentity:
        ...


class MockOtpStrategy:
    """
    Deterministic sign-in for local development and tests: any 6-digit code
    is accepted, nothing is sent, and the same phone always maps to the same user.
    """

    def send_otp(self, phone: str) -> None:
        logger.info(f"Mock OTP requested for {phone}")

    def verify_otp(self, phone: str, code: str) -> AuthIdentity:
        if not re.fullmatch(r"[0-9]{6}", code or ""):
            raise AuthenticationFailed("Invalid OTP code. Must be 6 digits.")
        digits = re.sub(r"[^0-9]", "", phone)
        return AuthIdentity(user_id=f"mock-user-{digits}", phone=phone)


class SupabaseOtpStrategy:
    """Phone OTP through the Supabase auth REST API."""

    def __init__(self, base_url: str, anon_key: str, http: Optional[requests.Session] = None, timeout: int = 10):
        self.base_url = base_url.rstrip("/")
        self.anon_key = anon_key
        self.http = http or requests.Session()
        self.timeout = timeout

    def _post(self, path: str, payload: dict) -> requests.Response:
        try:
            return self.http.post(
                f"{self.base_url}/auth/v1/{path}",
                json=payload,
                headers={
                    "apikey": self.anon_key,
                    "Content-Type": "application/json",
                },
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.exception(f"Supabase auth request to {path} failed")
            raise AuthProviderError() from exc

    def send_otp(self, phone: str) -> None:
        response = self._post("otp", {"phone": phone})
        if response.status_code >= 400:
            logger.error(f"Supabase OTP send error {response.status_code}: {response.text}")
            if response.status_code == 429:
                raise AuthenticationFailed("Too many attempts, please wait and try again")
            raise AuthProviderError()

    def verify_otp(self, phone: str, code: str) -> AuthIdentity:
        response = self._post("verify", {"phone": phone, "token": code, "type": "sms"})
        if 400 <= response.status_code < 500:
            logger.warning(f"Supabase rejected OTP for {phone}: {response.status_code}")
            raise AuthenticationFailed("Invalid or expired OTP code")
        if response.status_code >= 500:
            logger.error(f"Supabase OTP verify error {response.status_code}: {response.text}")
            raise AuthProviderError()

        user = (response.json() or {}).get("user") or {}
        if not user.get("id"):
            raise AuthProviderError()
        return AuthIdentity(user_id=user["id"], phone=user.get("phone") or phone)


def build_auth_strategy(settings) -> AuthStrategy:
    """Pick the OTP strategy once, when the application is assembled."""
    if settings.MOCK_OTP:
        logger.warning("MOCK_OTP is enabled: any 6-digit code will sign in")
        return MockOtpStrategy()
    if not settings.SUPABASE_URL or not settings.SUPABASE_ANON_KEY:
        raise RuntimeError("SUPABASE_URL and SUPABASE_ANON_KEY are required when MOCK_OTP is off")
    return SupabaseOtpStrategy(settings.SUPABASE_URL, settings.SUPABASE_ANON_KEY)

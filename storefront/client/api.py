from typing import Optional

import requests


class ApiSession(requests.Session):
    """``requests.Session`` that resolves relative paths against the storefront API."""

    def __init__(self, base_url: str, access_token: Optional[str] = None, timeout: int = 15):
        super().__init__()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        if access_token:
            self.headers["Authorization"] = f"Bearer {access_token}"

    def request(self, method, url, *args, **kwargs):
        if not url.startswith(("http://", "https://")):
            url = f"{self.base_url}/{url.lstrip('/')}"
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, *args, **kwargs)

"""
XaitCPQ authentication.

Exchanges the configured username/password for a bearer token using the
password grant. Tokens are not cached: every sync run logs in afresh.
"""

import logging
from typing import Dict, Optional

import httpx

from cpqsync.core.config import get_settings
from cpqsync.core.exceptions import AuthenticationError
from cpqsync.services.http_utils import is_success, response_detail

logger = logging.getLogger(__name__)


class XaitAuthManager:
    """
    Obtains XaitCPQ access tokens via the /account/login endpoint
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        referer: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        settings = get_settings()
        self.api_url = (api_url if api_url is not None else settings.XAIT_API_URL).rstrip("/")
        self.username = username if username is not None else settings.XAIT_USERNAME
        self.password = password if password is not None else settings.XAIT_PASSWORD
        self.referer = referer if referer is not None else settings.XAIT_REFERER
        self.timeout = timeout if timeout is not None else settings.HTTP_TIMEOUT
        self.login_url = f"{self.api_url}/account/login"

    def _get_headers(self) -> Dict[str, str]:
        headers = {
            "Content-Type": "application/x-www-form-urlencoded; charset=UTF-8",
            "X-Requested-With": "XMLHttpRequest",
        }
        if self.referer:
            headers["Referer"] = self.referer
        return headers

    async def authenticate(self) -> str:
        """
        Log in with the password grant and return the access token.

        Raises:
            AuthenticationError: On transport failure, non-2xx response, or a
                response without an access token. No retry is attempted.
        """
        login_data = {
            "grant_type": "password",
            "username": self.username,
            "password": self.password,
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.login_url,
                    data=login_data,
                    headers=self._get_headers()
                )
        except httpx.RequestError as e:
            logger.error(f"Login failed (network error): {str(e)}")
            raise AuthenticationError(f"Network error during login: {str(e)}")

        if not is_success(response):
            detail = response_detail(response)
            logger.error(f"Login failed: {detail}")
            raise AuthenticationError(
                f"Login failed with status {response.status_code}",
                status_code=response.status_code,
                detail=detail
            )

        token_data = response_detail(response)
        access_token = token_data.get("access_token") if isinstance(token_data, dict) else None
        if not access_token:
            logger.error("Login response did not include an access token")
            raise AuthenticationError(
                "Login response did not include an access token",
                status_code=response.status_code,
                detail=token_data
            )

        logger.info("Logged in to XaitCPQ successfully")
        return access_token

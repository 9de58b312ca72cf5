from typing import Any, Optional


class BaseServiceError(Exception):
    """Base exception for all service-related errors."""
    pass

class PlatformServiceError(BaseServiceError):
    """Base exception for platform service errors."""
    pass

class ShopifyServiceError(PlatformServiceError):
    """Base exception for Shopify-specific errors."""
    pass

class ShopifyAPIError(ShopifyServiceError):
    """Raised when Shopify API calls fail."""
    pass

class SourceFetchError(ShopifyAPIError):
    """Raised when the product list cannot be fetched from Shopify."""
    pass

class XaitServiceError(PlatformServiceError):
    """Base exception for XaitCPQ-specific errors."""
    pass

class XaitAPIError(XaitServiceError):
    """
    Raised when XaitCPQ API calls fail.

    ``detail`` carries the upstream error body (parsed JSON when possible) so
    callers can surface it as-is.
    """
    def __init__(self, message: str, status_code: Optional[int] = None, detail: Any = None):
        self.status_code = status_code
        self.detail = detail if detail is not None else message
        super().__init__(message)

class AuthenticationError(XaitAPIError):
    """Raised when the XaitCPQ password-grant login fails."""
    pass

class PartLookupError(XaitAPIError):
    """Raised when querying the XaitCPQ part list fails."""
    pass

class PartWriteError(XaitAPIError):
    """Raised when creating or updating a XaitCPQ part fails."""
    pass

"""
Custom exception classes
Provides consistent error responses across the storefront
"""

from fastapi import HTTPException, status
from typing import Any, Dict, Optional


class StorefrontException(HTTPException):
    """Base exception class for the storefront"""

    recovery_suggestion: str = "Please try again or contact support if the problem persists."

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code

    def __str__(self) -> str:
        return self.detail

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.error_code,
            "message": self.detail,
            "recovery_suggestion": self.recovery_suggestion,
        }


class NetworkError(StorefrontException):
    """503 Catalog source unreachable; retry by loading again"""

    recovery_suggestion = "Please check your internet connection and try again."

    def __init__(self, detail: str = "Failed to load products", error_code: str = "NETWORK_ERROR"):
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=detail,
            error_code=error_code
        )


class ValidationError(StorefrontException):
    """422 Malformed profile, payment or review input"""

    recovery_suggestion = "Please check your input and try again."

    def __init__(self, detail: str, error_code: str = "VALIDATION_ERROR"):
        super().__init__(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=detail,
            error_code=error_code
        )


class CartError(StorefrontException):
    """400 Cart cannot be used for the requested operation"""

    def __init__(self, detail: str, error_code: str = "CART_ERROR"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code=error_code
        )


class CheckoutInProgressError(CartError):
    """409 Another checkout is still being processed"""

    recovery_suggestion = "Wait for the current order to finish processing."

    def __init__(self, detail: str = "A checkout is already in progress"):
        super().__init__(detail=detail, error_code="CHECKOUT_IN_PROGRESS")
        self.status_code = status.HTTP_409_CONFLICT


class ProductError(StorefrontException):
    """404 Product unknown or unavailable"""

    recovery_suggestion = "The product may be temporarily unavailable. Please try again later."

    def __init__(
        self,
        detail: str = "Product not found",
        error_code: str = "PRODUCT_ERROR",
        status_code: int = status.HTTP_404_NOT_FOUND,
    ):
        super().__init__(
            status_code=status_code,
            detail=detail,
            error_code=error_code
        )


class OutOfStockError(ProductError):
    """400 Product cannot be ordered while out of stock"""

    def __init__(self, product_name: str):
        super().__init__(
            detail=f"{product_name} is out of stock",
            error_code="OUT_OF_STOCK",
            status_code=status.HTTP_400_BAD_REQUEST
        )


class NotFoundException(StorefrontException):
    """404 Not Found"""

    def __init__(self, detail: str = "Not found", error_code: str = "NOT_FOUND"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code=error_code
        )


class InvalidStatusTransitionError(StorefrontException):
    """400 Order status change not allowed by the state machine"""

    def __init__(self, current: str, requested: str):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid status transition from {current} to {requested}",
            error_code="INVALID_STATUS_TRANSITION"
        )

"""
Error Taxonomy
File: errors.py

Purpose: Standard error taxonomy for fixture generation.
Defines both Pydantic models for structured error reporting
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Serialization
    CANONICALIZATION_ERROR = "CANONICALIZATION_ERROR"

    # Fixture assembly
    VALUE_MISSING = "VALUE_MISSING"
    UNEXPECTED_PROOF_SHAPE = "UNEXPECTED_PROOF_SHAPE"

    # Configuration
    CONFIG_ERROR = "CONFIG_ERROR"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class ProofgenError(BaseModel):
    """
    Base error model for structured error reporting.

    Lets a test harness record why a fixture could not be produced
    without holding on to the exception object.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.VALUE_MISSING],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class ProofgenException(Exception):
    """
    Base exception for all fixture generation errors.

    Carries structured error information and can be converted
    to/from ProofgenError models.
    """

    def __init__(
        self,
        message: str,
        code: str = "PROOFGEN_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> ProofgenError:
        """Convert this exception to a ProofgenError model."""
        return ProofgenError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class CanonicalizationException(ProofgenException):
    """Exception raised when canonical serialization fails."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.CANONICALIZATION_ERROR,
            details=details,
            retryable=False,
        )


class ValueMissingException(ProofgenException):
    """
    Raised when a proof lookup returns no value for a key that was
    just inserted. The tree disagrees with the universe it reported.
    """

    def __init__(
        self,
        message: str,
        key: bytes | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if key is not None:
            full_details["key"] = key.hex()
        super().__init__(
            message=message,
            code=ErrorCodes.VALUE_MISSING,
            details=full_details,
            retryable=False,
        )
        self.key = key


class UnexpectedProofShapeException(ProofgenException):
    """Raised when a returned proof attests the wrong number of leaves."""

    def __init__(
        self,
        message: str,
        leaf_count: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if leaf_count is not None:
            full_details["leaf_count"] = leaf_count
        super().__init__(
            message=message,
            code=ErrorCodes.UNEXPECTED_PROOF_SHAPE,
            details=full_details,
            retryable=False,
        )
        self.leaf_count = leaf_count


class ConfigException(ProofgenException):
    """Exception raised when configuration values cannot be parsed."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if setting:
            full_details["setting"] = setting
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_ERROR,
            details=full_details,
            retryable=False,
        )

"""
Domain Exceptions - Custom exceptions for the domain layer

This module contains all domain-specific exceptions used by the member
cache. Transport exceptions are raised by transport implementations and
travel through entity operations unchanged.
"""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain errors."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


# ============================================================================
# Reference Exceptions
# ============================================================================


class DanglingReferenceException(DomainException):
    """Raised when a member refers to an object missing from its directory."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            f"Dangling {entity_type} reference: {entity_id}", "DANGLING_REFERENCE"
        )


# ============================================================================
# Validation Exceptions
# ============================================================================


class ValidationException(DomainException):
    """Base exception for validation errors."""

    def __init__(self, message: str, field: str = "", code: str = "VALIDATION_ERROR"):
        self.field = field
        super().__init__(f"{field}: {message}" if field else message, code)


class InvalidMemberIdException(ValidationException):
    """Raised when a member identity lacks its server or user component."""

    def __init__(self, identity: Any):
        self.identity = identity
        super().__init__(f"Invalid member ID: {identity!r}", "_id", "INVALID_MEMBER_ID")


# ============================================================================
# Transport Exceptions
# ============================================================================


class TransportException(DomainException):
    """Base exception for transport-related errors."""

    def __init__(self, message: str, method: str = "", path: str = "", code: str = "TRANSPORT_ERROR"):
        self.method = method
        self.path = path
        super().__init__(f"{method} {path}: {message}" if method else message, code)


class TransportConnectionException(TransportException):
    """Raised when the API cannot be reached."""

    def __init__(self, message: str = "Failed to connect to API", method: str = "", path: str = ""):
        super().__init__(message, method, path, "TRANSPORT_CONNECTION_ERROR")


class TransportAPIException(TransportException):
    """Raised when the API answers with a non-success status."""

    def __init__(self, status: int, body: Any = None, method: str = "", path: str = ""):
        self.status = status
        self.body = body
        # API errors carry their kind in {"type": ...}
        self.type = body.get("type", "") if isinstance(body, dict) else ""
        detail = f"HTTP {status}" + (f" ({self.type})" if self.type else "")
        super().__init__(detail, method, path, "TRANSPORT_API_ERROR")


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigurationException(DomainException):
    """Base exception for configuration-related errors."""

    def __init__(self, message: str, code: str = "CONFIG_ERROR"):
        super().__init__(message, code)


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration is invalid."""

    def __init__(self, message: str = "Invalid configuration", key: str = ""):
        self.key = key
        super().__init__(f"{message}: {key}" if key else message, "INVALID_CONFIG")


class MissingConfigurationException(ConfigurationException):
    """Raised when required configuration is missing."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Missing required configuration: {key}", "MISSING_CONFIG")

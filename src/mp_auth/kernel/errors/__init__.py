"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── InvariantViolationError
    │   ├── ValidationError
    │   └── MetadataError
    └── InfrastructureError      (infrastructure.py)
        └── CryptoProviderError
"""

from mp_auth.kernel.errors.base import BaseError
from mp_auth.kernel.errors.domain import (
    DomainError,
    InvariantViolationError,
    MetadataError,
    ValidationError,
)
from mp_auth.kernel.errors.infrastructure import CryptoProviderError, InfrastructureError

__all__ = [
    "BaseError",
    "CryptoProviderError",
    "DomainError",
    "InfrastructureError",
    "InvariantViolationError",
    "MetadataError",
    "ValidationError",
]

"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       └── InvalidArgumentError
    └── InfrastructureError      (infrastructure.py)
        └── SinkError
"""

from rpc_observability.kernel.errors.base import BaseError
from rpc_observability.kernel.errors.domain import (
    DomainError,
    InvalidArgumentError,
    ValidationError,
)
from rpc_observability.kernel.errors.infrastructure import InfrastructureError, SinkError

__all__ = [
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidArgumentError",
    "SinkError",
    "ValidationError",
]

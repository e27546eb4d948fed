from .exceptions import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)

__all__ = [
    "BusinessRuleViolationException",
    "DomainException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "ResourceNotFoundException",
]

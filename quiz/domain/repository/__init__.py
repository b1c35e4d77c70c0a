"""Repository interfaces for the quiz domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from quiz.domain.repository.user import DuplicateKeyError, UserRepository

__all__ = [
    "DuplicateKeyError",
    "UserRepository",
]

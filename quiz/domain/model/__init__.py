"""Domain model entities for the quiz backend."""

from quiz.domain.model.user import User

__all__ = ["User"]

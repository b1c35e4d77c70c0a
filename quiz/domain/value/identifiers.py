"""Strongly typed identifiers for quiz domain entities."""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)

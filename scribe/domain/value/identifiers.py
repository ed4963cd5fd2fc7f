"""Strongly typed identifiers for Scribe domain entities.

NewType keeps post and user IDs from being swapped by accident.
"""

from typing import NewType
from uuid import UUID

# Principal (post owner) identifier, taken from the verified token
UserId = NewType("UserId", UUID)

PostId = NewType("PostId", UUID)

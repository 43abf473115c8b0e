"""Strongly typed identifiers for journal entities.

Using NewType for strong typing prevents mixing up different entity IDs.
"""

from typing import NewType
from uuid import UUID

CommentId = NewType("CommentId", UUID)
SubscriberId = NewType("SubscriberId", UUID)

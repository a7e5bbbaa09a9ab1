"""Strongly typed identifiers for connection entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Local account identifier (issued by the hosting application)
AccountId = NewType("AccountId", UUID)
ConnectionId = NewType("ConnectionId", UUID)

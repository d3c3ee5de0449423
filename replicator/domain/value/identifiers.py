"""Strongly typed identifiers for domain entities.

Identifiers are integers assigned by the store on insert.
"""

from typing import NewType

UserId = NewType("UserId", int)
MemeId = NewType("MemeId", int)
InteractionId = NewType("InteractionId", int)

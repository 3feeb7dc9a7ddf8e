"""
Core domain model for vocabulary.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Card:
    """
    A single flash card: the title shown on side one and the free-form
    content shown on side two.
    """

    title: str
    content: str

"""
Card persistence for vocabulary.

Cards are only ever appended; the store keeps them in the order they
were accepted at the prompt.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union

from .domain import Card
from .errors import CardStoreError

LOG = logging.getLogger(__name__)


class CardStore(ABC):
    """
    Abstract interface for card persistence.
    """

    @abstractmethod
    def append(self, card: Card) -> None:
        """
        Persist a single card after all previously appended cards.

        Implementations raise CardStoreError when the card cannot be
        written.
        """

    @abstractmethod
    def load(self) -> List[Card]:
        """
        Return every stored card in insertion order.
        """


class MemoryCardStore(CardStore):
    """
    Card store that keeps cards in a list for the life of the process.
    """

    def __init__(self) -> None:
        self.cards: List[Card] = []

    def append(self, card: Card) -> None:
        self.cards.append(card)

    def load(self) -> List[Card]:
        return list(self.cards)


class JsonLinesCardStore(CardStore):
    """
    Card store backed by a JSON Lines file, one card object per line.
    """

    def __init__(self, path: Union[str, Path], encoding: str = "UTF-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def append(self, card: Card) -> None:
        record = json.dumps({"title": card.title, "content": card.content}, ensure_ascii=False)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding=self.encoding) as handle:
                handle.write(record + "\n")
        except OSError as exc:
            raise CardStoreError(f"cannot write card to {self.path}: {exc}") from exc
        LOG.debug("Appended card %r to %s", card.title, self.path)

    def load(self) -> List[Card]:
        if not self.path.exists():
            return []

        cards: List[Card] = []
        try:
            with self.path.open("r", encoding=self.encoding) as handle:
                for lineno, line in enumerate(handle, start=1):
                    if not line.strip():
                        continue
                    try:
                        data = json.loads(line)
                        cards.append(Card(title=data["title"], content=data["content"]))
                    except (json.JSONDecodeError, KeyError, TypeError) as exc:
                        raise CardStoreError(
                            f"malformed card record at {self.path}:{lineno}: {exc}"
                        ) from exc
        except OSError as exc:
            raise CardStoreError(f"cannot read cards from {self.path}: {exc}") from exc
        return cards

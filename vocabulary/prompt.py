"""
Interactive flash card entry.

The prompt loop reads a title line and a free-form body from stdin,
asks whether the card should be kept, stores accepted cards, and
repeats until the user declines to continue.
"""

from __future__ import annotations

import logging
import sys
from typing import List, Optional, TextIO

from .console import Colorizer
from .domain import Card
from .errors import CardStoreError
from .store import CardStore, MemoryCardStore

LOG = logging.getLogger(__name__)

ALLOWED_ANSWERS = ("y", "n", "ENTER")
PROMPT_STYLE = "yellow"


def read_until(stream: TextIO, end_marker: Optional[str] = None) -> str:
    """
    Read text from stream until end_marker or end of input.

    When end_marker is None the text runs up to the first end of input,
    which on a terminal is Ctrl+D at the start of a line (or pressed
    twice after a partial line); the stream stays usable afterwards.
    Otherwise the first line equal to end_marker ends the text and is
    not part of it. Trailing newlines are dropped.
    """

    if end_marker is None:
        return stream.read().rstrip("\r\n")

    lines: List[str] = []
    for line in iter(stream.readline, ""):
        if line.rstrip("\r\n") == end_marker:
            break
        lines.append(line)
    return "".join(lines).rstrip("\r\n")


class CardPrompt:
    """
    Console dialogue for entering flash cards one at a time.
    """

    def __init__(
        self,
        store: Optional[CardStore] = None,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        colorizer: Optional[Colorizer] = None,
        end_marker: Optional[str] = None,
    ) -> None:
        self.store = store if store is not None else MemoryCardStore()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.colorizer = colorizer if colorizer is not None else Colorizer(enabled=False)
        self.end_marker = end_marker

    def _say(self, message: str) -> None:
        self.stdout.write(self.colorizer(message, PROMPT_STYLE) + "\n")
        self.stdout.flush()

    def ask_yes_no(self, question: str) -> bool:
        """
        Ask a yes/no question and return True for yes.

        A bare newline counts as yes, anything starting with "n" as no,
        and any other answer as yes. Running out of input counts as no.
        """

        self.stdout.write(f"{question} [{', '.join(ALLOWED_ANSWERS)}] : ")
        self.stdout.flush()

        answer = self.stdin.readline()
        if answer == "":
            LOG.debug("End of input while waiting for an answer to %r", question)
            return False

        return not answer.strip().lower().startswith("n")

    def manual_input(self) -> Optional[Card]:
        """
        Collect a single card from the user.

        The card is returned whether or not the user chose to keep it.
        Returns None if stdin is exhausted before a title is entered.
        """

        self._say(">> Flash card side 1: ")
        line = self.stdin.readline()
        if line == "":
            LOG.debug("End of input while waiting for a card title")
            return None
        title = line.rstrip("\r\n")

        if self.end_marker is None:
            finish_hint = "hit CTRL+D at the start of a new line"
        else:
            finish_hint = f"type {self.end_marker} on a line of its own"
        self._say(
            f"\n>> Please type your [[ FLASH CARD SIDE ]] here and after you are finished {finish_hint}\n"
        )
        content = read_until(self.stdin, self.end_marker)

        card = Card(title=title, content=content)

        if self.ask_yes_no("Do you want to use this flashcard?"):
            self._say("Success !" if self._save(card) else "Failure !")

        return card

    def _save(self, card: Card) -> bool:
        try:
            self.store.append(card)
        except CardStoreError as exc:
            LOG.error("Could not save card %r: %s", card.title, exc)
            return False
        LOG.info("Saved card %r", card.title)
        return True

    def run(self) -> List[Card]:
        """
        Keep collecting cards until the user answers no to "More input?".
        """

        cards: List[Card] = []
        while True:
            card = self.manual_input()
            if card is None:
                break
            cards.append(card)
            if not self.ask_yes_no("More input?"):
                break
        return cards

"""Bounded log of player-facing game messages."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Message:
    """A single line for the message panel."""

    turn: int
    category: str
    text: str


class MessageLog:
    """Keeps the most recent *max_messages* lines; older ones fall off."""

    __slots__ = ("_buffer", "turn")

    def __init__(self, max_messages: int = 100) -> None:
        self._buffer: deque[Message] = deque(maxlen=max_messages)
        self.turn: int = 0

    def add(self, text: str, category: str = "info") -> None:
        self._buffer.append(Message(turn=self.turn, category=category, text=text))

    def since_turn(self, turn: int) -> list[Message]:
        """Return all messages with turn >= *turn*."""
        return [m for m in self._buffer if m.turn >= turn]

    def latest(self, count: int = 20) -> list[Message]:
        """Return the *count* most recent messages."""
        items = list(self._buffer)
        return items[-count:]

    def __len__(self) -> int:
        return len(self._buffer)

    def clear(self) -> None:
        self._buffer.clear()

"""Chat conversation and response types."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field

from v_utils.formatting import _display_float


class Model(enum.Enum):
    FAST = enum.auto()
    MEDIUM = enum.auto()
    SLOW = enum.auto()


class Role(enum.Enum):
    SYSTEM = enum.auto()
    USER = enum.auto()
    ASSISTANT = enum.auto()


@dataclass(frozen=True)
class Message:
    role: Role
    content: str


@dataclass
class Conversation:
    """An ordered list of messages."""

    messages: list[Message] = field(default_factory=list)

    @classmethod
    def new_with_system(cls, system_message: str) -> Conversation:
        return cls([Message(Role.SYSTEM, str(system_message))])

    def add(self, role: Role, content: str) -> None:
        self.messages.append(Message(role, str(content)))

    def add_exchange(self, user_message: str, assistant_message: str) -> None:
        self.add(Role.USER, user_message)
        self.add(Role.ASSISTANT, assistant_message)

    def __iter__(self) -> Iterator[Message]:
        return iter(self.messages)

    def __len__(self) -> int:
        return len(self.messages)


@dataclass
class Response:
    text: str
    cost_cents: float

    def __str__(self) -> str:
        return f"Response: {self.text}\nCost (cents): {_display_float(float(self.cost_cents))}"

    def extract_codeblocks(self, extension: str) -> list[str]:
        """Contents of every fenced code block tagged with ``extension``."""
        # Odd-numbered pieces lie between fences.
        extracted = [
            piece[len(extension):].strip()
            for piece in self.text.split("```")[1::2]
            if piece.startswith(extension)
        ]
        if not extracted:
            raise ValueError(
                f"Failed to find any {extension} codeblocks in the response:\nResponse: {self.text}"
            )
        return extracted

    def extract_codeblock(self, extension: str) -> str:
        return self.extract_codeblocks(extension)[0]

    def extract_html_tag(self, tag_name: str) -> str:
        """Text between the first ``<tag_name>`` and the ``</tag_name>`` after it."""
        opening = f"<{tag_name}>"
        closing = f"</{tag_name}>"
        _, found, after = self.text.partition(opening)
        if not found:
            raise ValueError(f"Opening tag {opening} not found in the response")
        inner, found, _ = after.partition(closing)
        if not found:
            raise ValueError(f"Closing tag {closing} not found in the response")
        return inner
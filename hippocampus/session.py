"""Interactive chat loop mirroring every transcript change into the conversation store."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from rich.console import Console
from rich.text import Text

from hippocampus.config import Settings
from hippocampus.llm import ChatMessage, LLMClient
from hippocampus.memory import ConversationEntry, ConversationStore, LoadStatus, to_api_role, to_store_role
from hippocampus.prompts import SEED_MESSAGES

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


class SessionState(str, Enum):
    BOOTSTRAPPING = "bootstrapping"
    IDLE = "idle"
    AWAITING_INPUT = "awaiting_input"
    AWAITING_COMPLETION = "awaiting_completion"
    TERMINATED = "terminated"


@dataclass
class SessionContext:
    """Everything the loop needs, built once at startup."""

    settings: Settings
    store: ConversationStore
    llm: LLMClient
    console: Console
    transcript: list[ChatMessage] = field(default_factory=list)


def is_exit_command(line: str) -> bool:
    return line.lower() == EXIT_COMMAND


class ChatSession:
    def __init__(self, ctx: SessionContext) -> None:
        self.ctx = ctx
        self.state = SessionState.BOOTSTRAPPING

    def bootstrap(self) -> None:
        result = self.ctx.store.read()
        if result.status is LoadStatus.CORRUPT:
            logger.warning("Conversation file %s is unreadable: %s", self.ctx.store.path, result.error)
            self.ctx.console.print(
                Text(f"Could not parse {self.ctx.store.path}; starting with an empty memory.", style="yellow")
            )

        entries = result.log.conversation
        if entries:
            self.ctx.transcript = [ChatMessage(to_api_role(e.role), e.content) for e in entries]
            logger.info("Restored %d turns from %s", len(entries), self.ctx.store.path)
        else:
            self.ctx.transcript = []
            for msg in SEED_MESSAGES:
                self._record(msg)
            logger.info("Seeded empty memory at %s", self.ctx.store.path)
        self.state = SessionState.IDLE

    def handle_input(self, line: str) -> bool:
        """Process one line of input. Returns False once the session has ended."""
        if is_exit_command(line):
            self.state = SessionState.TERMINATED
            return False

        self._record(ChatMessage("user", line))

        self.state = SessionState.AWAITING_COMPLETION
        completion = self.ctx.llm.chat(list(self.ctx.transcript))
        if not completion.ok:
            logger.error("Completion failed (%s): %s", completion.error_kind.value, completion.error)
            self.ctx.console.print(Text(f"Error: {completion.error}", style="bold red"))
            self.state = SessionState.AWAITING_INPUT
            return True

        reply = completion.content or ""
        self._record(ChatMessage("assistant", reply))
        self.ctx.console.print(Text("AI: ", style="bold cyan") + Text(reply))
        self.state = SessionState.AWAITING_INPUT
        return True

    def run(self, read_line: Callable[[], str]) -> int:
        if self.state is SessionState.BOOTSTRAPPING:
            self.bootstrap()

        self.ctx.console.print('Starting a conversation. Type "exit" to quit.')
        while True:
            self.state = SessionState.AWAITING_INPUT
            try:
                line = read_line()
            except EOFError:
                line = EXIT_COMMAND
            if not self.handle_input(line):
                break

        self.ctx.console.print("Ending the conversation.")
        return 0

    def _record(self, msg: ChatMessage) -> None:
        # Persist synchronously so disk and transcript only diverge during a completion call.
        self.ctx.transcript.append(msg)
        self.ctx.store.append(ConversationEntry(role=to_store_role(msg.role), content=msg.content, refusal=None))

from __future__ import annotations

import argparse
import sys

from rich.console import Console

from hippocampus.config import load_settings
from hippocampus.llm import build_llm
from hippocampus.memory import ConversationStore
from hippocampus.session import ChatSession, SessionContext
from hippocampus.utils.log import setup_logging


def main() -> int:
    # Best-effort fix for terminals that do not default to UTF-8.
    try:
        sys.stdout.reconfigure(encoding="utf-8")
        sys.stderr.reconfigure(encoding="utf-8")
    except Exception:
        pass

    parser = argparse.ArgumentParser(
        prog="hippocampus",
        description="Chat with a language model that remembers every turn in a local JSON file.",
    )
    parser.parse_args()

    console = Console()
    settings = load_settings()
    setup_logging(settings.log_level)

    ctx = SessionContext(
        settings=settings,
        store=ConversationStore(settings.conversation_path),
        llm=build_llm(settings),
        console=console,
    )
    session = ChatSession(ctx)
    return session.run(lambda: console.input("[bold green]You[/bold green]: "))


if __name__ == "__main__":
    raise SystemExit(main())

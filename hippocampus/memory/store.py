from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import ValidationError

from .models import ConversationEntry, ConversationLog

logger = logging.getLogger(__name__)


class LoadStatus(str, Enum):
    OK = "ok"
    MISSING = "missing"
    CORRUPT = "corrupt"


@dataclass(frozen=True)
class LoadResult:
    log: ConversationLog
    status: LoadStatus
    error: str = ""


class ConversationStore:
    """
    JSON-file conversation memory.

    - Single writer assumed; every append rewrites the whole file.
    - A malformed file reads as an empty log and stays on disk until the next append.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def read(self) -> LoadResult:
        if not self.path.exists():
            return LoadResult(ConversationLog(), LoadStatus.MISSING)
        try:
            raw = self.path.read_text(encoding="utf-8")
            log = ConversationLog.model_validate(json.loads(raw))
        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors.
            return LoadResult(ConversationLog(), LoadStatus.CORRUPT, str(e))
        return LoadResult(log, LoadStatus.OK)

    def load(self) -> ConversationLog:
        result = self.read()
        if result.status is LoadStatus.CORRUPT:
            logger.warning("Failed to parse %s, treating as empty: %s", self.path, result.error)
        return result.log

    def append(self, entry: ConversationEntry) -> None:
        log = self.load()
        log.conversation.append(entry)
        self._write(log)
        logger.debug("Appended %s entry (%d total) to %s", entry.role, len(log.conversation), self.path)

    def _write(self, log: ConversationLog) -> None:
        text = json.dumps(log.model_dump(mode="json"), ensure_ascii=False, indent=2)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(text, encoding="utf-8", newline="\n")
        tmp.replace(self.path)

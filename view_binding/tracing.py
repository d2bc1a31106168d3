"""Binder trace collection."""

import threading
from typing import Any

from view_binding.logging_config import get_logger, log_with_context
from view_binding.models.templates import Template

logger = get_logger(__name__)


class TraceEntry:
    """One formatted binder message about a template."""

    __slots__ = ("template", "message")

    def __init__(self, template: Template, message: str):
        self.template = template
        self.message = message

    def __repr__(self) -> str:
        return f"TraceEntry({self.template.relative_path!r}, {self.message!r})"


class BindingTracer:
    """Collects binder messages per template and forwards them to structured logging.

    Safe to share between worker threads; ``log`` never raises.
    """

    def __init__(self) -> None:
        self._entries: list[TraceEntry] = []
        self._lock = threading.Lock()

    def log(self, template: Template, message: str, *args: Any) -> None:
        try:
            text = message.format(*args)
        except (IndexError, KeyError, ValueError, AttributeError):
            text = message

        with self._lock:
            self._entries.append(TraceEntry(template, text))

        log_with_context(
            logger,
            "debug",
            text,
            template_path=str(template.file_path),
            event_type="binding_trace",
        )

    def entries_for(self, template: Template) -> list[TraceEntry]:
        with self._lock:
            return [entry for entry in self._entries if entry.template is template]

    def messages_for(self, template: Template) -> list[str]:
        return [entry.message for entry in self.entries_for(template)]

    def all_entries(self) -> list[TraceEntry]:
        with self._lock:
            return list(self._entries)

"""Diagnostics returned to the host instead of raised exceptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(slots=True, frozen=True)
class Diagnostic:
    """A human-readable summary of something that went wrong (or nearly)."""

    severity: Severity
    summary: str
    detail: str | None = None
    attribute: str | None = None

    @classmethod
    def error(
        cls, summary: str, detail: str | None = None, *, attribute: str | None = None
    ) -> Diagnostic:
        return cls(Severity.ERROR, summary, detail, attribute)

    @classmethod
    def warning(
        cls, summary: str, detail: str | None = None, *, attribute: str | None = None
    ) -> Diagnostic:
        return cls(Severity.WARNING, summary, detail, attribute)

    @classmethod
    def from_exception(cls, exc: BaseException, *, summary: str | None = None) -> Diagnostic:
        """Wrap an exception as an error diagnostic.

        Without an explicit ``summary`` the exception message becomes the summary;
        with one, the message is kept as the detail.
        """

        message = str(exc) or type(exc).__name__
        attribute = getattr(exc, "attribute", None)
        if summary is None:
            return cls.error(message, attribute=attribute)
        return cls.error(summary, message, attribute=attribute)

    def __str__(self) -> str:
        text = f"{self.severity}: {self.summary}"
        if self.detail:
            text = f"{text} ({self.detail})"
        return text


@dataclass(slots=True)
class Diagnostics:
    items: list[Diagnostic] = field(default_factory=list["Diagnostic"])

    @classmethod
    def of(cls, *items: Diagnostic) -> Diagnostics:
        return cls(list(items))

    def append(self, item: Diagnostic) -> None:
        self.items.append(item)

    def extend(self, items: Iterable[Diagnostic]) -> None:
        self.items.extend(items)

    def has_errors(self) -> bool:
        return any(item.severity is Severity.ERROR for item in self.items)

    @property
    def errors(self) -> list[Diagnostic]:
        return [item for item in self.items if item.severity is Severity.ERROR]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [item for item in self.items if item.severity is Severity.WARNING]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)

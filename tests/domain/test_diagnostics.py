from __future__ import annotations

from grackdb_provider.domain.diagnostics import Diagnostic, Diagnostics, Severity
from grackdb_provider.domain.errors import AttributeAssignmentError


def test_from_exception_uses_message_as_summary() -> None:
    diagnostic = Diagnostic.from_exception(RuntimeError("boom"))

    assert diagnostic.severity is Severity.ERROR
    assert diagnostic.summary == "boom"
    assert diagnostic.detail is None


def test_from_exception_keeps_message_as_detail() -> None:
    diagnostic = Diagnostic.from_exception(RuntimeError("boom"), summary="Failed to read user")

    assert str(diagnostic) == "error: Failed to read user (boom)"


def test_from_exception_picks_up_attribute() -> None:
    exc = AttributeAssignmentError("bad owner", attribute="owner")

    assert Diagnostic.from_exception(exc).attribute == "owner"


def test_diagnostics_split_by_severity() -> None:
    diagnostics = Diagnostics.of(Diagnostic.warning("careful"))
    assert diagnostics
    assert not diagnostics.has_errors()

    diagnostics.append(Diagnostic.error("broken"))

    assert diagnostics.has_errors()
    assert len(diagnostics) == 2
    assert [item.summary for item in diagnostics.errors] == ["broken"]
    assert [item.summary for item in diagnostics.warnings] == ["careful"]


def test_empty_diagnostics_are_falsy() -> None:
    assert not Diagnostics()

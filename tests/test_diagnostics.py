import pytest

from sysprov.diagnostics import (
    INTERNAL_DIAGNOSTIC_DETAIL,
    Diagnostic,
    DiagnosticError,
    Severity,
    detailed_diagnostic,
    internal_error,
    internal_unexpected_type,
    short_diagnostic,
)


def test_short_diagnostic_has_only_summary():
    diags = short_diagnostic(Severity.ERROR, "boom")
    assert diags == [Diagnostic(Severity.ERROR, "boom", "", None)]


def test_detailed_diagnostic_keeps_detail_and_path():
    diags = detailed_diagnostic(Severity.WARNING, "sum", "more", ["expect", "stdout"])
    assert len(diags) == 1
    assert diags[0].severity is Severity.WARNING
    assert diags[0].detail == "more"
    assert diags[0].attribute_path == ("expect", "stdout")


def test_internal_error_uses_internal_detail():
    diags = internal_error("missing stop context in context of ConfigureContextFunc")
    assert diags[0].severity is Severity.ERROR
    assert diags[0].detail == INTERNAL_DIAGNOSTIC_DETAIL
    assert diags[0].summary == "missing stop context in context of ConfigureContextFunc"


def test_internal_unexpected_type_names_actual_type():
    diags = internal_unexpected_type("*Provider", 5)
    assert diags[0].summary == "expected type *Provider, got unexpected type int"
    assert diags[0].detail == INTERNAL_DIAGNOSTIC_DETAIL


def test_diagnostic_error_carries_diagnostics():
    diags = short_diagnostic(Severity.ERROR, "expected exit code 0, got exit code 1")
    with pytest.raises(DiagnosticError) as info:
        raise DiagnosticError(diags)
    assert info.value.diagnostics == diags
    assert str(info.value) == "expected exit code 0, got exit code 1"
"""Tests for operation-specific Rich renderers."""

from stdkit.output.renderers import render_quiet, render_result
from stdkit.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("parse_date", "FORMAT_MISMATCH", "'x' does not match"))
        assert output.startswith("ERROR")
        assert "parse_date" in output
        assert "'x' does not match" in output
        assert "[FORMAT_MISMATCH]" in output

    def test_verbose_shows_detail(self) -> None:
        output = render_result(
            _err("file_url_to_path", "INVALID_HOST", "Bad", url="file://h/x"), verbose=True
        )
        assert "detail" in output
        assert "url: file://h/x" in output

    def test_detail_hidden_without_verbose(self) -> None:
        output = render_result(_err("file_url_to_path", "INVALID_HOST", "Bad", url="file://h/x"))
        assert "detail" not in output

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="test"))
        assert "Unknown error" in output

    def test_brackets_not_treated_as_markup(self) -> None:
        output = render_result(_err("parse_date", "FORMAT_MISMATCH", "[bold]x[/bold]"))
        assert "[bold]x[/bold]" in output


# ── Generic rendering ────────────────────────────────────────────────


class TestGenericRenderer:
    def test_status_line_and_fields(self) -> None:
        output = render_result(_ok("path_to_file_url", path="/a b", url="file:///a%20b"))
        lines = output.splitlines()
        assert lines[0] == "OK  path_to_file_url"
        assert "  path: /a b" in lines
        assert "  url: file:///a%20b" in lines

    def test_meta_only_when_verbose(self) -> None:
        result = ServiceResult(ok=True, op="parse_date", data={}, meta={"format": "yyyy-mm-dd"})
        assert "meta" not in render_result(result)
        verbose = render_result(result, verbose=True)
        assert "meta:" in verbose
        assert "format: yyyy-mm-dd" in verbose

    def test_collections_rendered_as_json(self) -> None:
        output = render_result(_ok("test", items=["a", "b"]))
        assert '  items: ["a","b"]' in output


# ── Difference rendering ─────────────────────────────────────────────


class TestDifferenceRenderer:
    def test_table(self) -> None:
        result = _ok(
            "difference",
            **{"from": "2020-01-01T00:00:00", "to": "2020-02-02T00:00:00", "days": 32, "months": 1},
        )
        output = render_result(result)
        assert output.splitlines()[0] == "OK  difference"
        assert "from: 2020-01-01T00:00:00" in output
        assert "Unit" in output
        assert "Amount" in output
        day_row = next(line for line in output.splitlines() if "days" in line)
        assert "32" in day_row
        month_row = next(line for line in output.splitlines() if "months" in line)
        assert "1" in month_row
        assert "weeks" not in output


# ── Quiet rendering ──────────────────────────────────────────────────


class TestQuiet:
    def test_success(self) -> None:
        assert render_quiet(_ok("copy_file")) == "OK: copy_file"

    def test_error(self) -> None:
        output = render_quiet(_err("copy_file", "IO_ERROR", "No such file"))
        assert output == "ERROR: copy_file — No such file"

"""Tests for op-specific Rich renderers."""

from linecmd.output.console import create_console, get_output, style_for_command
from linecmd.output.renderers import render_result
from linecmd.services.parse import ParseService
from linecmd.services.result import ServiceResult


class TestConsole:
    def test_renders_to_buffer(self) -> None:
        console = create_console(no_color=True)
        console.print("hello")
        assert get_output(console) == "hello\n"

    def test_command_styles(self) -> None:
        assert style_for_command("PUBLISH") == "lc.command.publish"
        assert style_for_command("RETRIEVE") == "lc.command.retrieve"
        assert style_for_command("OTHER") == ""


class TestRenderParse:
    def test_success_lines(self) -> None:
        output = render_result(ParseService().parse_line("PUBLISH hello world\n"))
        lines = output.splitlines()
        assert lines[0].startswith("OK")
        assert "command: PUBLISH" in output
        assert "payload: 'hello world'" in output

    def test_status_line_spacing(self) -> None:
        output = render_result(ParseService().parse_line("RETRIEVE\n"))
        assert output.splitlines()[0] == "OK  parse"
        assert "  command: RETRIEVE" in output

    def test_payload_markup_is_literal(self) -> None:
        output = render_result(ParseService().parse_line("PUBLISH [bold]x[/bold]\n"))
        assert "[bold]x[/bold]" in output

    def test_error_line(self) -> None:
        output = render_result(ParseService().parse_line("RETRIEVE please\n"))
        assert output.startswith("ERROR")
        assert "Wrong RETRIEVE syntax." in output
        assert "OK" not in output


class TestRenderBatch:
    def test_table_rows(self) -> None:
        result = ParseService().parse_lines(["PUBLISH a\n", "RETRIEVE\n"])
        output = render_result(result)
        assert output.startswith("OK")
        assert "LINE" in output
        assert "PUBLISH" in output
        assert "RETRIEVE" in output
        assert "2 line(s), 0 error(s)" in output

    def test_failed_batch_shows_rows_and_error(self) -> None:
        result = ParseService().parse_lines(["PUBLISH a\n", "bad input line\n"])
        output = render_result(result)
        assert "No pattern detected." in output
        assert "'a'" in output
        assert "1 of 2 line(s) failed to parse" in output
        assert not output.startswith("OK")


class TestRenderCommands:
    def test_lists_syntax(self) -> None:
        output = render_result(ParseService().list_commands())
        assert "RETRIEVE\\n" in output
        assert "PUBLISH <payload>\\n" in output

    def test_verbose_shows_prefix(self) -> None:
        result = ParseService(strip_prefix="/opt/relay").list_commands()
        assert "strip_prefix: /opt/relay" in render_result(result, verbose=True)


class TestGenericFallback:
    def test_unknown_op(self) -> None:
        result = ServiceResult(ok=True, op="mystery", data={"k": "v", "nested": [1, 2]})
        output = render_result(result)
        assert "mystery" in output
        assert "k: v" in output
        assert "nested: [1,2]" in output

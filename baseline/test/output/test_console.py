from __future__ import annotations

import pytest

from baseline.output.console import MockConsole, RichConsole, Style


class TestMockConsole:
    def test_records_styled_output(self) -> None:
        console = MockConsole()
        console.info("fetching")
        console.warning("odd tag")
        console.error("boom")
        console.success("done")
        console.print("plain")

        assert console.messages == [
            "info: fetching",
            "warning: odd tag",
            "error: boom",
            "OK done",
            "plain",
        ]
        assert console.has_error()
        assert console.has_warning()
        assert [o.style for o in console.find("boom")] == [Style.ERROR]


class TestRichConsole:
    def test_errors_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        RichConsole().error("release list unavailable")

        captured = capsys.readouterr()
        assert "release list unavailable" in captured.err
        assert captured.out == ""

    def test_quiet_drops_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = RichConsole(quiet=True)
        console.info("fetching releases")
        console.warning("skipping tag")

        captured = capsys.readouterr()
        assert "fetching releases" not in captured.err
        assert "skipping tag" in captured.err

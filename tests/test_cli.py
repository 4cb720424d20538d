"""Tests for the command line interface."""

from __future__ import annotations

from pathlib import Path

import pytest

from transync import parse_document
from transync.cli import build_parser, main


class TestSyncCommand:
    """Test `transync sync`."""

    def test_sync_rewrites_documents(
        self, views_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Out-of-date documents are rewritten and listed."""
        assert main(["sync", str(views_dir)]) == 0

        out = capsys.readouterr().out
        assert "updated" in out
        assert "home.php" in out
        assert "(2 keys, +1 -1)" in out
        assert "languages: ar" in out

    def test_dry_run(self, views_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--dry-run reports without writing."""
        before = (views_dir / "home.php").read_text(encoding="utf-8")

        assert main(["sync", "--dry-run", str(views_dir)]) == 0

        assert "outdated" in capsys.readouterr().out
        assert (views_dir / "home.php").read_text(encoding="utf-8") == before

    def test_policy_flags(self, tmp_path: Path) -> None:
        """--default-language, --identity-language and --quote shape the output."""
        (tmp_path / "x.blade.php").write_text("{{ __('k') }}", encoding="utf-8")
        (tmp_path / "x.php").write_text("", encoding="utf-8")

        code = main(
            [
                "sync",
                str(tmp_path / "x.blade.php"),
                "--default-language",
                "fr",
                "--identity-language",
                "fr",
                "--quote",
                "single",
            ]
        )

        assert code == 0
        text = (tmp_path / "x.php").read_text(encoding="utf-8")
        assert "        'k' => 'k',\n" in text
        document = parse_document(text)
        assert document is not None
        assert document.language_codes == ("fr",)

    def test_file_error_exit_code(
        self, views_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Unreadable documents are reported on stderr with exit code 1."""
        (views_dir / "home.php").write_bytes(b"\xff\xfe")

        assert main(["sync", str(views_dir)]) == 1
        captured = capsys.readouterr()
        assert f"error    {views_dir / 'home.blade.php'}: " in captured.err
        assert "home.blade.php" not in captured.out

    def test_invalid_default_language(self, views_dir: Path) -> None:
        """Invalid configuration is a usage error (exit code 2)."""
        with pytest.raises(SystemExit) as exc_info:
            main(["sync", str(views_dir), "--default-language", "e'n"])

        assert exc_info.value.code == 2


class TestCheckCommand:
    """Test `transync check`."""

    def test_out_of_date(self, views_dir: Path) -> None:
        """Exit code 1 when any document would change; nothing is written."""
        before = (views_dir / "home.php").read_text(encoding="utf-8")

        assert main(["check", str(views_dir)]) == 1
        assert (views_dir / "home.php").read_text(encoding="utf-8") == before

    def test_up_to_date(self, views_dir: Path) -> None:
        """Exit code 0 after a sync."""
        main(["sync", str(views_dir)])

        assert main(["check", str(views_dir)]) == 0


class TestExtractCommand:
    """Test `transync extract`."""

    def test_prints_keys(self, views_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """Keys are printed one per line, sorted."""
        assert main(["extract", str(views_dir / "home.blade.php")]) == 0

        assert capsys.readouterr().out.splitlines() == ["welcome.body", "welcome.title"]

    def test_show_skipped(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """--show-skipped lists non-literal calls with their position."""
        view = tmp_path / "v.blade.php"
        view.write_text("<p>\n  {{ __($key) }}\n</p>", encoding="utf-8")

        assert main(["extract", str(view), "--show-skipped"]) == 0

        captured = capsys.readouterr()
        assert captured.out == ""
        assert f"{view}:2:6: skipped __() [NON_LITERAL_ARGUMENT]" in captured.err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing view is reported with exit code 1."""
        assert main(["extract", str(tmp_path / "none.blade.php")]) == 1
        assert "Cannot read" in capsys.readouterr().err


class TestParser:
    """Test argument parsing."""

    def test_command_required(self) -> None:
        """A subcommand is required."""
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args([])

        assert exc_info.value.code == 2

    def test_defaults(self) -> None:
        """Policy defaults match the library defaults."""
        args = build_parser().parse_args(["sync", "views"])

        assert args.default_language == "ar"
        assert args.identity_languages is None
        assert args.quote == "double"
        assert not args.dry_run

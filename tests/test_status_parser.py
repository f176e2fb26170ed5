"""Tests for the short-format status parser."""

import pytest

from semcommit.git.models import MalformedLine, Status, StatusCode, describe_code
from semcommit.git.status_parser import ParseError, StatusParser, parse_status


class TestParseStatus:
    def test_added_file(self):
        assert parse_status("A  foo.txt") == Status(x="A", y=" ", to="foo.txt", from_="")

    def test_modified_in_worktree(self):
        assert parse_status(" M foo.txt") == Status(x=" ", y="M", to="foo.txt", from_="")

    def test_deleted_file(self):
        assert parse_status("D  foo.txt") == Status(x="D", y=" ", to="foo.txt", from_="")

    def test_renamed_file(self):
        assert parse_status("R  bar.txt -> foo.txt") == Status(
            x="R", y=" ", to="foo.txt", from_="bar.txt"
        )

    def test_moved_file(self):
        status = parse_status("R  foo.txt -> fizz/foo.txt")
        assert status.from_ == "foo.txt"
        assert status.to == "fizz/foo.txt"
        assert status.is_rename is True

    def test_untracked(self):
        status = parse_status("?? new.py")
        assert status.is_untracked is True
        assert status.describe() == "untracked"

    def test_path_with_spaces(self):
        assert parse_status("M  my file.txt").to == "my file.txt"

    def test_trailing_newline_dropped(self):
        assert parse_status("A  foo.txt\r\n").to == "foo.txt"

    def test_quoted_path(self):
        assert parse_status('A  "my \\"file\\".txt"').to == 'my "file".txt'

    def test_quoted_octal_utf8(self):
        assert parse_status('A  "caf\\303\\251.md"').to == "café.md"

    def test_quoted_rename(self):
        status = parse_status('R  "old name.txt" -> "new\\tname.txt"')
        assert status.from_ == "old name.txt"
        assert status.to == "new\tname.txt"

    def test_from_empty_without_arrow(self):
        assert parse_status("MM src/app.py").from_ == ""

    def test_quoted_path_containing_arrow(self):
        status = parse_status('?? "a -> b.txt"')
        assert status == Status(x="?", y="?", to="a -> b.txt", from_="")
        assert status.is_rename is False

    def test_rename_from_quoted_path_containing_arrow(self):
        status = parse_status('R  "x -> y.md" -> docs/z.md')
        assert status.from_ == "x -> y.md"
        assert status.to == "docs/z.md"

    def test_rename_to_quoted_path_with_escaped_quote(self):
        status = parse_status('R  old.md -> "new \\" -> x.md"')
        assert status.from_ == "old.md"
        assert status.to == 'new " -> x.md'


class TestParseErrors:
    @pytest.mark.parametrize("line", ["", "A", "AM"])
    def test_too_short(self, line):
        with pytest.raises(ParseError):
            parse_status(line)

    def test_missing_space(self):
        with pytest.raises(ParseError) as exc_info:
            parse_status("MMfoo.txt")
        assert exc_info.value.line == "MMfoo.txt"
        assert "space" in exc_info.value.reason

    def test_missing_path(self):
        with pytest.raises(ParseError):
            parse_status("A  ")

    @pytest.mark.parametrize("line", [
        "R  a -> b -> c",
        "R   -> foo.txt",
        "R  foo.txt -> ",
    ])
    def test_rename_needs_two_paths(self, line):
        with pytest.raises(ParseError):
            parse_status(line)

    def test_unterminated_quote(self):
        with pytest.raises(ParseError):
            parse_status('A  "foo.txt')

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_status("A")


class TestStatusParser:
    def test_parses_every_line(self, sample_status_mixed):
        items = list(StatusParser(sample_status_mixed).parse())
        assert len(items) == 4
        assert all(isinstance(i, Status) for i in items)
        assert [i.to for i in items] == [
            "package.json",
            "docs/intro.md",
            "src/test/foo.test.ts",
            "src/generate/paths.ts",
        ]

    def test_malformed_lines_reported(self, sample_status_malformed):
        items = list(StatusParser(sample_status_malformed).parse())
        good = [i for i in items if isinstance(i, Status)]
        bad = [i for i in items if isinstance(i, MalformedLine)]
        assert len(good) == 1
        assert [b.line_no for b in bad] == [2, 3]
        assert bad[1].line == "MMfoo.txt"

    def test_empty_listing_yields_nothing(self):
        assert list(StatusParser("").parse()) == []
        assert list(StatusParser("\n\n").parse()) == []

    def test_whitespace_only_line_is_malformed(self):
        items = list(StatusParser("A  foo.txt\n   \n").parse())
        assert len(items) == 2
        assert isinstance(items[1], MalformedLine)
        assert items[1].line_no == 2
        assert items[1].line == "   "

    def test_crlf(self, sample_status_crlf):
        items = list(StatusParser(sample_status_crlf).parse())
        assert [i.to for i in items] == ["foo.txt", "bar/baz.yml"]

    def test_rename(self, sample_status_rename):
        (item,) = StatusParser(sample_status_rename).parse()
        assert item.paths == ["src/old/name.py", "src/new/name.py"]


class TestStatusCodes:
    def test_labels(self):
        assert StatusCode("M").label == "modified"
        assert StatusCode(" ").label == "unmodified"

    def test_describe_unknown_code(self):
        assert describe_code("X") == "X"

    def test_describe_prefers_index_slot(self):
        assert parse_status("AM foo.txt").describe() == "added"
        assert parse_status(" D foo.txt").describe() == "deleted"

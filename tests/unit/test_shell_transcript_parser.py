import pytest

from dirtally.adapters.parsing.shell_transcript import ShellTranscriptParser
from dirtally.domain.errors import ParseError
from dirtally.domain.model import Ascend, DescendInto, ListEntries, ListingItem


def test_parses_sample_into_events(sample_transcript):
    events = ShellTranscriptParser().parse(sample_transcript)

    assert events[0] == ListEntries.of(
        [
            ListingItem.directory("a"),
            ListingItem.file("b.txt", 14848514),
            ListingItem.file("c.dat", 8504156),
            ListingItem.directory("d"),
        ]
    )
    assert events[1] == DescendInto("a")
    assert events[3] == DescendInto("e")
    assert events[4] == ListEntries.of([ListingItem.file("i", 584)])
    assert events[5:8] == [Ascend(), Ascend(), DescendInto("d")]
    assert len(events) == 9


def test_cd_root_is_optional():
    events = ShellTranscriptParser().parse("$ ls\n12 x\n")
    assert events == [ListEntries.of([ListingItem.file("x", 12)])]


def test_empty_ls_yields_empty_listing():
    events = ShellTranscriptParser().parse("$ cd /\n$ ls\n$ cd a\n")
    assert events == [ListEntries(()), DescendInto("a")]


def test_crlf_line_endings_are_accepted():
    events = ShellTranscriptParser().parse("$ cd /\r\n$ ls\r\n5 f\r\n")
    assert events == [ListEntries.of([ListingItem.file("f", 5)])]


@pytest.mark.parametrize(
    "text,bad_line,line_number",
    [
        ("$ cd /\n$ ls\n$ cd /\n", "$ cd /", 3),
        ("$ rm -rf a\n", "$ rm -rf a", 1),
        ("$ cd a1\n", "$ cd a1", 1),
        ("$ cd /\n12 x\n", "12 x", 2),
        ("$ ls\nfile without size\n", "file without size", 2),
        ("$ ls\ndir 9abc\n", "dir 9abc", 2),
        ("$ ls\n-3 neg\n", "-3 neg", 2),
        ("$ ls\n\n5 f\n", "", 2),
        ("$ ls\n\u0663 f\n", "\u0663 f", 2),
        ("$ ls\n\uff11\uff12 f\n", "\uff11\uff12 f", 2),
        ("$ cd /\n\u2028\n", "\u2028", 2),
    ],
)
def test_bad_lines_raise_parse_error(text, bad_line, line_number):
    with pytest.raises(ParseError) as exc:
        ShellTranscriptParser().parse(text)
    assert exc.value.line == bad_line
    assert exc.value.line_number == line_number


def test_unicode_line_separators_stay_inside_file_names():
    text = "$ cd /\n$ ls\n12 a\u2028b\n7 c\x0cd\n9 e\x85f\n$ cd x\n"
    events = ShellTranscriptParser().parse(text)
    assert events == [
        ListEntries.of(
            [
                ListingItem.file("a\u2028b", 12),
                ListingItem.file("c\x0cd", 7),
                ListingItem.file("e\x85f", 9),
            ]
        ),
        DescendInto("x"),
    ]


def test_line_numbers_count_only_newlines():
    with pytest.raises(ParseError) as exc:
        ShellTranscriptParser().parse("$ ls\n12 a\u2028b\n$ cd 9\n")
    assert exc.value.line_number == 3
    assert exc.value.line == "$ cd 9"


def test_empty_transcript_has_no_events():
    assert ShellTranscriptParser().parse("") == []

import pytest

from liveserve.config import (
    Config,
    Entry,
    Section,
    ValueType,
    load_config,
    main,
    parse_config_text,
)


def test_typed_values_are_parsed():
    config = parse_config_text("[server]\nport = 5050\nhost = 'localhost'\nratio = 1.5\n")
    assert config.errors == []
    assert config.get("server", "port") == 5050
    assert config.get("server", "host") == "localhost"
    assert config.get("server", "ratio") == 1.5
    types = [entry.type for entry in config.sections[0].entries]
    assert types == [ValueType.INTEGER, ValueType.STRING, ValueType.DOUBLE]


def test_comments_and_blank_lines_are_skipped():
    config = parse_config_text("; note\n   # other\n\n[a]\nk=7 ; trailing\n")
    assert config.errors == []
    assert [section.title for section in config.sections] == ["a"]
    assert config.sections[0].entries == [Entry("k", ValueType.INTEGER, 7)]


def test_key_trailing_spaces_are_trimmed():
    config = parse_config_text("[a]\nname    =   -3  \n")
    assert config.sections[0].entries == [Entry("name", ValueType.INTEGER, -3)]


def test_float_without_leading_digit():
    config = parse_config_text("[a]\nx = .5\n")
    assert config.get("a", "x") == 0.5


def test_double_quoted_string_may_hold_single_quote():
    config = parse_config_text("[a]\ns = \"it's\"\n")
    assert config.get("a", "s") == "it's"


def test_unterminated_string_runs_to_end_of_line():
    config = parse_config_text("[a]\ns = 'abc\n")
    assert config.errors == []
    assert config.get("a", "s") == "abc"


def test_get_returns_latest_definition_and_default():
    config = parse_config_text("[a]\nk = 1\nk = 2\n")
    assert config.get("a", "k") == 2
    assert config.get("a", "missing", "fallback") == "fallback"
    assert config.get("nope", "k") is None


@pytest.mark.parametrize(
    "text, message",
    [
        ("k = 1\n", "Line 1: Key-value pair outside of any section"),
        ("[my section]\n", "Line 1: Space characters not allowed within section name"),
        ("[open\n", "Line 1: Missing closing bracket for section"),
        ("[a]\n'k = 1\n", "Line 2: Unexpected quote symbol within key string"),
        ("[a]\nmy key = 1\n", "Line 2: Unexpected spacing characters within key string"),
        ("[a]\nlonely\n", "Line 2: No value specified"),
        ("[a]\nv = 1.2.3\n", "Line 2: Invalid floating point expression"),
        ("[a]\nv = abc\n", "Line 2: Value parsing failed"),
        ("[a]\nv =\n", "Line 2: Value parsing failed"),
        ("[a]\ns = 'abc' x\n", "Line 2: Unexpected character after string value"),
        ("[a]\ns = 'a#b'\n", "Line 2: Unexpected character after string value"),
    ],
)
def test_bad_lines_are_reported_and_skipped(text, message):
    config = parse_config_text(text)
    assert config.errors == [message]
    assert all(section.entries == [] for section in config.sections)


def test_parsing_continues_after_an_error():
    config = parse_config_text("[a]\nbad\ngood = 1\n")
    assert len(config.errors) == 1
    assert config.get("a", "good") == 1


def test_format_lists_newest_first():
    config = parse_config_text("[a]\nx = 1\ny = 'two'\n[b]\nz = 2.5\n")
    assert config.format() == "[b]\n  z = 2.5\n[a]\n  y = 'two'\n  x = 1\n"


def test_format_round_trips_through_parser():
    original = Config(
        sections=[Section("s", [Entry("n", ValueType.INTEGER, 4), Entry("t", ValueType.STRING, "v")])]
    )
    body = "\n".join(line.strip() for line in original.format().splitlines())
    reparsed = parse_config_text(body)
    assert reparsed.get("s", "n") == 4
    assert reparsed.get("s", "t") == "v"


def test_load_config_reads_file(tmp_path):
    path = tmp_path / "settings.ini"
    path.write_text("[web]\nport = 8080\n", encoding="utf-8")
    assert load_config(path).get("web", "port") == 8080


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.ini")


def test_main_prints_config_and_errors(tmp_path, capsys):
    path = tmp_path / "settings.ini"
    path.write_text("[web]\nport = 8080\nbroken\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "Line 3: No value specified" in out
    assert "[web]\n  port = 8080\n" in out


def test_main_reports_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.ini")]) == 1
    assert "Failed to open file" in capsys.readouterr().err
from krldata.ast import IntData
from krldata.format import format_data, format_data_list, run_format
from krldata.lexer import TokenKind
from krldata.parser import ParseMode, ParserOptions, parse, parse_result


def test_parse_result_exposes_data_and_no_diagnostics() -> None:
    result = parse_result("A 1, B 2")

    assert result.data == [IntData(1, name="A"), IntData(2, name="B")]
    assert result.diagnostics == []
    assert result.has_errors is False
    assert [token.kind for token in result.tokens][-1] == TokenKind.EOF


def test_parse_result_reports_parse_errors_as_diagnostics() -> None:
    result = parse_result("{A 1, A 2}")

    assert result.data == []
    assert result.has_errors is True
    assert len(result.diagnostics) == 1
    diagnostic = result.diagnostics[0]
    assert diagnostic.code == "PARSER_DUPLICATE_MEMBER"
    assert diagnostic.category == "parser"
    assert diagnostic.range is not None
    assert diagnostic.range.as_tuple() == (6, 7)


def test_parse_result_reports_lex_errors_without_tokens() -> None:
    result = parse_result("A ?")

    assert result.tokens == []
    assert result.diagnostics[0].code == "LEXER_UNRECOGNIZED_INPUT"
    assert result.diagnostics[0].category == "lexer"


def test_parse_result_reports_unexpected_end_of_input() -> None:
    result = parse_result("A")

    assert result.diagnostics[0].code == "PARSER_UNEXPECTED_EOF"
    assert "expected value" in result.diagnostics[0].message


def test_parse_result_reports_stack_exhausting_nesting() -> None:
    result = parse_result("{A " * 5000)

    assert result.data == []
    assert [diagnostic.code for diagnostic in result.diagnostics] == ["PARSER_NESTING_TOO_DEEP"]


def test_parse_result_caches_formatted_text() -> None:
    result = parse_result("A   1 ,B 2")

    first = result.formatted()
    assert first == "A 1, B 2"
    assert result.formatted() is first


def test_parse_result_strict_and_standard_modes_match_parse_contract() -> None:
    source = "5"

    standard = parse_result(source)
    strict = parse_result(source, mode=ParseMode.STRICT)

    assert standard.data == parse(source)
    assert standard.options == ParserOptions()
    assert strict.has_errors is True
    assert strict.options.mode == ParseMode.STRICT


def test_run_format_canonicalizes_source() -> None:
    result = run_format("{ X :A 1 ,B  'B1' }")

    assert result.formatted_text == "{X: A 1, B 'B1'}"
    assert result.changed is True
    assert result.diagnostics == []


def test_run_format_keeps_canonical_source_unchanged() -> None:
    result = run_format("A 1, B 2")

    assert result.changed is False


def test_run_format_returns_unparseable_source_unchanged() -> None:
    source = "A 1, A"

    result = run_format(source)

    assert result.formatted_text == source
    assert result.changed is False
    assert result.diagnostics[0].code == "PARSER_UNEXPECTED_EOF"


def test_run_format_reuses_provided_parse_result() -> None:
    parsed = parse_result("A 1")

    result = run_format("ignored", parse=parsed)

    assert result.parse is parsed
    assert result.formatted_text == "A 1"


def test_run_format_rejects_parse_with_mode_or_options() -> None:
    parsed = parse_result("A 1")

    try:
        run_format("A 1", parse=parsed, mode=ParseMode.PERMISSIVE)
    except ValueError as exc:
        assert "Pass either parse or options/mode, not both" in str(exc)
    else:
        raise AssertionError("Expected ValueError when passing parse and mode together")


def test_format_helpers() -> None:
    data = parse("A 1, 2")

    assert format_data(data[0]) == "A 1"
    assert format_data(data[1]) == "2"
    assert format_data_list(data) == "A 1, 2"
    assert format_data_list([]) == ""

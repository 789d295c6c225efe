from concurrent.futures import ThreadPoolExecutor

import pytest

from booleanquery import Pipeline, parse, parse_result
from tests._debug import debug_dump_stages
from tests._shared_cases import ALL_QUERY_CASES, UNPARSABLE_CASES, QueryCase, case_id


@pytest.mark.parametrize("case", ALL_QUERY_CASES, ids=case_id)
def test_parse_cases(case: QueryCase) -> None:
    result = parse_result(case.source, trace=True)
    debug_dump_stages(case.name, result)

    assert result.query == case.expected


@pytest.mark.parametrize("case", ALL_QUERY_CASES, ids=case_id)
def test_output_never_contains_or_sentinel(case: QueryCase) -> None:
    query = parse(case.source)
    if query is not None:
        assert "§" not in query


@pytest.mark.parametrize("case", UNPARSABLE_CASES, ids=case_id)
def test_unparsable_cases_report_an_error(case: QueryCase) -> None:
    result = parse_result(case.source)

    assert not result.is_parsable
    assert result.has_errors
    assert len(result.diagnostics) == 1


def test_odd_quote_count_is_always_unparsable() -> None:
    for source in ('"', 'a "b" "c', '"a" b c"d" e"'):
        assert parse(source) is None


def test_keywords_are_case_insensitive() -> None:
    assert parse("ICT Or IT") == parse("ict or it") == "ict it"
    assert parse("a AnD NoT b") == "+a -b"


def test_parse_is_deterministic() -> None:
    source = '("Nursing Home" and (Manager OR Supervisor)) OR commercial'
    assert parse(source) == parse(source)


def test_pipeline_instance_matches_module_entrypoint() -> None:
    pipeline = Pipeline()
    for case in ALL_QUERY_CASES:
        assert pipeline.parse(case.source) == parse(case.source)


def test_shared_pipeline_is_safe_across_threads() -> None:
    pipeline = Pipeline()
    cases = list(ALL_QUERY_CASES) * 20
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(pipeline.parse, [case.source for case in cases]))

    assert results == [case.expected for case in cases]

"""Centralized query cases used across pipeline tests."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class QueryCase:
    name: str
    source: str
    expected: str | None  # None means unparsable


SIMPLE_CASES: tuple[QueryCase, ...] = (
    QueryCase(name="single_term", source="ict", expected="+ict"),
    QueryCase(name="juxtaposed_terms", source="ict it", expected="+ict +it"),
    QueryCase(name="or_keyword", source="ict OR it", expected="ict it"),
    QueryCase(name="leading_not", source="NOT ict", expected="-ict"),
    QueryCase(name="infix_not", source="it NOT ict", expected="+it -ict"),
)

COMPLEX_CASES: tuple[QueryCase, ...] = (
    QueryCase(
        name="field_marker_groups_and_minus",
        source='(title:"project assistant" OR title:"project supervisor") AND retail  -construction',
        expected='+("project assistant" "project supervisor") +retail -construction',
    ),
    QueryCase(
        name="hyphenated_words_become_phrases",
        source='"john-paul caffery" john-paul caffery',
        expected='+"john-paul caffery" +"john-paul" +caffery',
    ),
    QueryCase(
        name="mixed_and_or_chain",
        source=(
            '"Procurement" and "source to pay" and "Supplier relationship management" or "SRM"  '
            'and "vetting" and "compliance"'
        ),
        expected='+"procurement" +"source to pay" "supplier relationship management" "srm" +"vetting" +"compliance"',
    ),
    QueryCase(
        name="operators_scope_nested_groups",
        source=(
            '("Nursing Home" and (Manager OR Supervisor)) OR '
            '(commercial AND sales AND (manager OR management OR "team leader"))'
        ),
        expected='(+"nursing home" +(manager supervisor)) (+commercial +sales +(manager management "team leader"))',
    ),
    QueryCase(
        name="curly_quotes_and_wildcards",
        source="(“IT” AND security*) OR “security engineer*” OR (financial AND analyst* AND german)",
        expected='(+"it" +security*) "security engineer*" (+financial +analyst* +german)',
    ),
)

INVALID_OPERATOR_CASES: tuple[QueryCase, ...] = (
    QueryCase(name="leading_and", source="and gevenducha", expected="+gevenducha"),
    QueryCase(name="operators_around_term", source="not or permonik and", expected="+permonik"),
    QueryCase(name="trailing_operator_pile", source="not ochechula and or not", expected="-ochechula"),
    QueryCase(name="nested_not", source="not (not pacmagos)", expected="-(-pacmagos)"),
    QueryCase(name="dangling_inside_group", source="not (or not and fidlikant) not", expected="-(+fidlikant)"),
    QueryCase(name="trailing_not_in_group", source="(fuchtla and not)", expected="+(+fuchtla)"),
    QueryCase(name="trailing_not_then_or", source="(svabliky and not) or cinter", expected="(+svabliky) cinter"),
)

EXTRA_CASES: tuple[QueryCase, ...] = (
    QueryCase(name="empty_input", source="", expected=""),
    QueryCase(name="lone_operator", source="AND", expected=""),
    QueryCase(name="square_brackets_become_groups", source="[a OR b] AND c", expected="+(a b) +c"),
    QueryCase(name="stray_hyphen_is_dropped", source="a - b", expected="+a +b"),
    QueryCase(name="minus_prefix_excludes", source="a -b", expected="+a -b"),
    QueryCase(name="or_not_prefers_not", source="a OR NOT b", expected="a -b"),
    QueryCase(name="double_not_collapses", source="a NOT NOT b", expected="+a -b"),
    QueryCase(name="duplicated_connective", source="a OR OR b", expected="+a +b"),
    QueryCase(name="punctuation_is_dropped", source="a,b", expected="+a +b"),
    QueryCase(name="hyphen_chain", source="state-of-the-art", expected='+"state-of-the-art"'),
    QueryCase(name="unicode_letters_survive", source="Cafés ÉCOLE", expected="+cafés +école"),
    QueryCase(name="title_marker_without_space", source="Title:Manager", expected="+manager"),
)

UNPARSABLE_CASES: tuple[QueryCase, ...] = (
    QueryCase(
        name="odd_quotes_in_long_query",
        source=(
            '"Business Development" or "IT sales" and ("Danish" or "Dutch" or "Italian" or" Denmark" '
            'or "Holland or "Netherlands" or "Italy")'
        ),
        expected=None,
    ),
    QueryCase(
        name="extra_closing_brackets",
        source='("Digital Transformation")) OR ("Innovation Lead"))',
        expected=None,
    ),
    QueryCase(
        name="unterminated_phrase_after_marker",
        source='title: Customer Experience AND ("Insight Experience" OR "Marketing Strategy)',
        expected=None,
    ),
    QueryCase(name="lone_opening_quote", source='"ict', expected=None),
    QueryCase(name="unclosed_group", source="(a OR (b AND c)", expected=None),
)

ALL_QUERY_CASES: tuple[QueryCase, ...] = (
    SIMPLE_CASES + COMPLEX_CASES + INVALID_OPERATOR_CASES + EXTRA_CASES + UNPARSABLE_CASES
)


def case_id(case: QueryCase) -> str:
    return case.name

from booleanquery.lexer import BooleanOperator
from booleanquery.pipeline.passes import (
    collapse_stacked_operators,
    drop_blank_tokens,
    insert_missing_and,
    merge_hyphenated_words,
    merge_quoted_phrases,
    merge_wildcards,
    rewrite_connective,
    rewrite_negations,
    strip_dangling_operators,
    strip_disallowed_characters,
)


def test_merge_quoted_phrases_folds_pairs() -> None:
    tokens = ['"', "a", " ", "b", '"', " ", "c"]
    assert merge_quoted_phrases(tokens) == ['"a b"', " ", "c"]


def test_merge_quoted_phrases_does_not_mutate_input() -> None:
    tokens = ['"', "a", '"']
    merge_quoted_phrases(tokens)
    assert tokens == ['"', "a", '"']


def test_merge_quoted_phrases_keeps_unterminated_tail() -> None:
    assert merge_quoted_phrases(["x", " ", '"', "a"]) == ["x", " ", '"a']


def test_strip_disallowed_characters_may_leave_empty_tokens() -> None:
    assert strip_disallowed_characters([",", "a!", '"x, y"']) == ["", "a", '"x y"']


def test_merge_hyphenated_words_builds_phrase() -> None:
    tokens = ["john", "-", "paul", " ", "caffery"]
    assert merge_hyphenated_words(tokens) == ['"john-paul"', " ", "caffery"]


def test_merge_hyphenated_words_extends_chains() -> None:
    assert merge_hyphenated_words(["a", "-", "b", "-", "c"]) == ['"a-b-c"']


def test_merge_hyphenated_words_leaves_minus_prefix() -> None:
    tokens = ["a", " ", "-", "b"]
    assert merge_hyphenated_words(tokens) == tokens


def test_merge_hyphenated_words_skips_phrase_neighbours() -> None:
    tokens = ['"x y"', "-", "z"]
    assert merge_hyphenated_words(tokens) == tokens


def test_merge_hyphenated_words_short_streams_unchanged() -> None:
    assert merge_hyphenated_words(["-", "a"]) == ["-", "a"]


def test_merge_wildcards_attaches_to_previous_token() -> None:
    assert merge_wildcards(["security", "*", " ", "x"]) == ["security*", " ", "x"]
    assert merge_wildcards(["*", "a"]) == ["*", "a"]


def test_drop_blank_tokens() -> None:
    assert drop_blank_tokens(["a", " ", "", "\n", "b", "\r\n"]) == ["a", "b"]


def test_strip_dangling_operators_at_stream_edges() -> None:
    assert strip_dangling_operators(["and", "a", "or"]) == ["a"]
    assert strip_dangling_operators(["a", "not"]) == ["a"]
    assert strip_dangling_operators(["not", "a"]) == ["not", "a"]


def test_strip_dangling_not_takes_connective_with_it() -> None:
    tokens = ["(", "a", "and", "not", ")"]
    assert strip_dangling_operators(tokens) == ["(", "a", ")"]


def test_strip_dangling_reads_left_neighbour_after_removals() -> None:
    # The `not` goes first, which leaves `and` without a left operand.
    tokens = ["(", "not", "and", "b", ")"]
    assert strip_dangling_operators(tokens) == ["(", "b", ")"]


def test_rewrite_connective_wraps_operands() -> None:
    assert rewrite_connective(["a", "or", "b"], BooleanOperator.OR) == ["§", "a", "§", "b"]
    assert rewrite_connective(["and", "a"], BooleanOperator.AND) == ["+", "a"]


def test_rewrite_connective_scopes_whole_group() -> None:
    tokens = ["(", "a", "or", "b", ")", "and", "c"]
    assert rewrite_connective(tokens, BooleanOperator.AND) == [
        "+",
        "(",
        "a",
        "or",
        "b",
        ")",
        "+",
        "c",
    ]


def test_rewrite_connective_only_touches_its_keyword() -> None:
    tokens = ["a", "and", "b"]
    assert rewrite_connective(tokens, BooleanOperator.OR) == tokens


def test_rewrite_negations() -> None:
    assert rewrite_negations(["not", "a", "-", "b"]) == ["-", "a", "-", "b"]


def test_collapse_stacked_operators_precedence() -> None:
    tokens = ["+", "-", "a", "§", "+", "b", "+", "c"]
    assert collapse_stacked_operators(tokens) == ["-", "a", "§", "b", "+", "c"]


def test_insert_missing_and() -> None:
    tokens = ["a", "§", "b", "(", "c", ")", "-", "d"]
    assert insert_missing_and(tokens) == ["+", "a", "§", "b", "+", "(", "+", "c", ")", "-", "d"]

"""Token-stream rewrite passes.

Every pass takes a token sequence and returns a new list; none of them mutate
their input. They are order dependent and are only meaningful when run in the
sequence `Pipeline` applies them.
"""

from __future__ import annotations

from collections.abc import Sequence

from booleanquery.lexer import (
    HYPHEN,
    LEFT_BRACKET,
    QUOTE,
    RIGHT_BRACKET,
    WILDCARD,
    BooleanOperator,
    TokenKind,
    token_kind,
)
from booleanquery.pipeline.clean import strip_disallowed


def merge_quoted_phrases(tokens: Sequence[str]) -> list[str]:
    """Fold everything between a pair of quote tokens into one phrase token.

    Pairing is simple: the first quote after an opener closes the phrase, so
    nested quoting is not supported.
    """
    merged: list[str] = []
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if token != QUOTE:
            merged.append(token)
            continue

        phrase = [token]
        while index < len(tokens):
            phrase.append(tokens[index])
            index += 1
            if phrase[-1] == QUOTE:
                break
        merged.append("".join(phrase))
    return merged


def strip_disallowed_characters(tokens: Sequence[str]) -> list[str]:
    return [strip_disallowed(token) for token in tokens]


def merge_hyphenated_words(tokens: Sequence[str]) -> list[str]:
    """Turn `word - word` triples into a quoted compound phrase.

    A hyphen with a blank neighbour is left alone; it may still be a NOT.
    Chains such as `a-b-c` grow the compound already built for `a-b`.
    """
    if len(tokens) < 3:
        return list(tokens)

    merged: list[str] = []
    last = len(tokens) - 1
    compound_end = -1
    index = 0
    while index <= last:
        token = tokens[index]
        if index == 0 or index == last or token != HYPHEN:
            merged.append(token)
            index += 1
            continue

        previous = tokens[index - 1]
        following = tokens[index + 1]
        if (
            any(neighbour.startswith(QUOTE) for neighbour in (previous, following))
            or not previous.strip()
            or not following.strip()
        ):
            merged.append(token)
            index += 1
            continue

        if compound_end == index - 1:
            merged[-1] = f"{merged[-1][:-1]}{HYPHEN}{following}{QUOTE}"
        else:
            merged[-1] = f"{QUOTE}{previous}{HYPHEN}{following}{QUOTE}"
        compound_end = index + 1
        index += 2
    return merged


def merge_wildcards(tokens: Sequence[str]) -> list[str]:
    merged: list[str] = []
    for index, token in enumerate(tokens):
        if index > 0 and token == WILDCARD:
            merged[-1] += token
        else:
            merged.append(token)
    return merged


def drop_blank_tokens(tokens: Sequence[str]) -> list[str]:
    return [token for token in tokens if not token_kind(token).is_blank]


def strip_dangling_operators(tokens: Sequence[str]) -> list[str]:
    """Remove operators that lack an operand at a stream or group edge.

    AND/OR need an operand on both sides; NOT only needs one to its right.
    Removing a NOT also removes a connective directly before it. The left
    neighbour is read from the stream as pruned so far, the right neighbour
    from the unpruned input.
    """
    remaining: list[str | None] = list(tokens)
    for index, token in enumerate(tokens):
        kind = token_kind(token)
        if not kind.is_operator:
            continue

        previous = remaining[index - 1] if index > 0 else None
        following = tokens[index + 1] if index < len(tokens) - 1 else None
        missing_left = previous is None or previous == LEFT_BRACKET or token_kind(previous).is_connective
        missing_right = following is None or following == RIGHT_BRACKET or token_kind(following).is_connective

        if (missing_left and not kind.is_negation) or missing_right:
            remaining[index] = None
            if kind.is_negation and previous is not None and token_kind(previous).is_connective:
                remaining[index - 1] = None

    return [token for token in remaining if token is not None]


def rewrite_connective(tokens: Sequence[str], operator: BooleanOperator) -> list[str]:
    """Replace a connective keyword with its operator character on both operands.

    When the left operand is a bracketed group, the character is placed before
    the group's opening bracket so it scopes the whole group. The character
    after the keyword prefixes the right operand.
    """
    character = operator.character
    rewritten: list[str] = []
    for index, token in enumerate(tokens):
        if token != operator.value:
            rewritten.append(token)
            continue

        if index > 0 and tokens[index - 1] == RIGHT_BRACKET:
            group = [rewritten.pop()]
            depth = 1
            while depth > 0 and rewritten:
                current = rewritten.pop()
                if current == RIGHT_BRACKET:
                    depth += 1
                elif current == LEFT_BRACKET:
                    depth -= 1
                group.append(current)
            rewritten.append(character)
            rewritten.extend(reversed(group))
            rewritten.append(character)
        elif rewritten:
            operand = rewritten.pop()
            rewritten.extend((character, operand, character))
        else:
            rewritten.append(character)
    return rewritten


def rewrite_negations(tokens: Sequence[str]) -> list[str]:
    not_character = BooleanOperator.NOT.character
    return [not_character if token_kind(token).is_negation else token for token in tokens]


def collapse_stacked_operators(tokens: Sequence[str]) -> list[str]:
    """Reduce each run of adjacent operators to one: NOT beats OR beats AND."""
    collapsed: list[str] = []
    index = 0
    while index < len(tokens):
        if not token_kind(tokens[index]).is_operator:
            collapsed.append(tokens[index])
            index += 1
            continue

        run: set[BooleanOperator] = set()
        while index < len(tokens) and (operator := token_kind(tokens[index]).operator) is not None:
            run.add(operator)
            index += 1

        if BooleanOperator.NOT in run:
            collapsed.append(BooleanOperator.NOT.character)
        elif BooleanOperator.OR in run:
            collapsed.append(BooleanOperator.OR.character)
        else:
            collapsed.append(BooleanOperator.AND.character)
    return collapsed


def insert_missing_and(tokens: Sequence[str]) -> list[str]:
    """Prefix AND to every operand or group that has no operator before it."""
    and_character = BooleanOperator.AND.character
    completed: list[str] = []
    for index, token in enumerate(tokens):
        kind = token_kind(token)
        if kind.is_operator or kind == TokenKind.RPAREN:
            completed.append(token)
            continue

        if index == 0 or not token_kind(tokens[index - 1]).is_operator:
            completed.append(and_character)
        completed.append(token)
    return completed

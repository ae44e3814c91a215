"""Tests for cross-field rules."""

import pytest

from fosterbook.logic.exceptions import DependencyError
from fosterbook.logic.parser.cli_syntax import (PREFIX_ANIMAL_NAME,
                                                PREFIX_ANIMAL_TYPE,
                                                PREFIX_AVAILABILITY,
                                                PREFIX_NAME, PREFIX_TAG)
from fosterbook.logic.parser.rules import FieldRule, check_all, requires_when_any
from fosterbook.logic.parser.tokenizer import ArgumentTokenizer

PREFIXES = (
    PREFIX_NAME,
    PREFIX_TAG,
    PREFIX_ANIMAL_NAME,
    PREFIX_AVAILABILITY,
    PREFIX_ANIMAL_TYPE,
)

availability_rule = requires_when_any(
    triggers=(PREFIX_ANIMAL_NAME, PREFIX_ANIMAL_TYPE),
    required=PREFIX_AVAILABILITY,
    message="availability needed",
)


@pytest.mark.parametrize(
    "args",
    [
        "n/Jane",
        "n/Jane av/Available",
        "n/Jane an/Rex av/Available",
        "n/Jane at/Dog av/NotAvailable",
        "n/Jane an/Rex at/Dog av/Available",
    ],
)
def test_requires_when_any_satisfied(args):
    availability_rule.check(ArgumentTokenizer.tokenize(args, *PREFIXES))


@pytest.mark.parametrize("args", ["n/Jane an/Rex", "n/Jane at/Dog", "an/Rex at/Dog"])
def test_requires_when_any_violated(args):
    with pytest.raises(DependencyError, match="availability needed"):
        availability_rule.check(ArgumentTokenizer.tokenize(args, *PREFIXES))


def test_check_all_stops_at_first_failure():
    rules = (
        FieldRule(predicate=lambda arguments: arguments.has(PREFIX_TAG), message="tag needed"),
        availability_rule,
    )
    arguments = ArgumentTokenizer.tokenize("n/Jane an/Rex", *PREFIXES)

    with pytest.raises(DependencyError) as exc_info:
        check_all(rules, arguments)

    assert exc_info.value.message == "tag needed"


def test_check_all_with_no_rules():
    check_all((), ArgumentTokenizer.tokenize("an/Rex", *PREFIXES))

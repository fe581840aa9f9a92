"""Scalar equivalency matcher tests."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date

import pytest
from mock_equivalency.argument_matching import ScalarEquivalencyMatcher
from mock_equivalency.equivalency import EquivalencyConfigurationError, keep_default_options


@dataclass
class Person:
    first_name: str
    last_name: str
    birthday: date | None = None


def _john(birthday: date | None = date(1968, 6, 1), first_name: str = "John") -> Person:
    return Person(first_name=first_name, last_name="Doe", birthday=birthday)


class _PropertyPerson:
    def __init__(self, first_name: str, birthday: date) -> None:
        self._first_name = first_name
        self._birthday = birthday

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def birthday(self) -> date:
        return self._birthday


def test_identical_values_satisfy_each_other() -> None:
    first, second = _john(), _john()

    assert ScalarEquivalencyMatcher(first, keep_default_options).is_satisfied_by(second)
    assert ScalarEquivalencyMatcher(second, keep_default_options).is_satisfied_by(first)


def test_property_based_values_compare_by_their_properties() -> None:
    matcher = ScalarEquivalencyMatcher(
        _PropertyPerson("John", date(1968, 6, 1)), keep_default_options
    )
    argument = _PropertyPerson("John", date(1968, 7, 1))

    assert matcher.is_satisfied_by(_PropertyPerson("John", date(1968, 6, 1)))
    assert matcher.is_satisfied_by(argument) is False
    assert matcher.describe_for(argument) == (
        "Expected property birthday to be <1968-06-01>, but found <1968-07-01>."
    )


def test_differing_birthday_is_described_with_expected_and_found_values() -> None:
    matcher = ScalarEquivalencyMatcher(_john(birthday=date(1968, 7, 1)), keep_default_options)
    argument = _john()

    assert matcher.is_satisfied_by(argument) is False
    assert matcher.describe_for(argument) == (
        "Expected property birthday to be <1968-07-01>, but found <1968-06-01>."
    )


def test_multiple_mismatches_are_joined_with_line_separator() -> None:
    matcher = ScalarEquivalencyMatcher(_john(birthday=date(1968, 7, 1)), keep_default_options)
    argument = _john(first_name="Jon")

    assert not matcher.is_satisfied_by(argument)
    assert matcher.describe_for(argument).split(os.linesep) == [
        'Expected property first_name to be "John", but found "Jon".',
        "Expected property birthday to be <1968-07-01>, but found <1968-06-01>.",
    ]


def test_each_check_replaces_the_previous_description() -> None:
    matcher = ScalarEquivalencyMatcher(_john(), keep_default_options)

    assert not matcher.is_satisfied_by(_john(birthday=date(2001, 1, 1)))
    assert matcher.describe_for(None) != ""
    assert matcher.is_satisfied_by(_john())
    assert matcher.describe_for(_john()) == ""


def test_excluded_member_is_ignored() -> None:
    by_name = ScalarEquivalencyMatcher(
        Person(first_name="John", last_name="Doe"), lambda options: options.excluding("birthday")
    )
    by_selector = ScalarEquivalencyMatcher(
        Person(first_name="John", last_name="Doe"),
        lambda options: options.excluding(lambda person: person.birthday),
    )

    assert by_name.is_satisfied_by(_john())
    assert by_selector.is_satisfied_by(_john())


def test_configure_transform_is_applied_on_every_check() -> None:
    calls: list[object] = []

    def configure(options):
        calls.append(options)
        return options

    matcher = ScalarEquivalencyMatcher(_john(), configure)
    matcher.is_satisfied_by(_john())
    matcher.is_satisfied_by(_john())

    assert len(calls) == 2


def test_configuration_errors_propagate_from_the_check() -> None:
    matcher = ScalarEquivalencyMatcher(_john(), lambda options: options.excluding("nickname"))

    with pytest.raises(EquivalencyConfigurationError, match="nickname"):
        matcher.is_satisfied_by(_john())


def test_equality_delegates_to_satisfaction() -> None:
    matcher = ScalarEquivalencyMatcher(_john(), keep_default_options)

    assert matcher == _john()
    assert _john() == matcher
    assert matcher != _john(birthday=None)
    assert matcher == matcher
    assert matcher != ScalarEquivalencyMatcher(_john(), keep_default_options)


def test_repr_shows_the_expectation() -> None:
    matcher = ScalarEquivalencyMatcher({"a": 1}, keep_default_options)

    assert repr(matcher) == "<equivalent to {'a': 1}>"

"""Matcher for one structurally equivalent argument."""

from __future__ import annotations

import logging
import os

from mock_equivalency.equivalency import AssertionScope, ConfigureOptions, assert_equivalent

from .matcher_contracts import ArgumentMatcher

_LOGGER = logging.getLogger(__name__)


class ScalarEquivalencyMatcher(ArgumentMatcher):
    """Matches an argument that is structurally equivalent to ``expected``."""

    def __init__(self, expected: object, configure: ConfigureOptions) -> None:
        self._expected = expected
        self._configure = configure
        self._failed_expectations = ""

    @property
    def expected(self) -> object:
        return self._expected

    def is_satisfied_by(self, argument: object) -> bool:
        with AssertionScope() as scope:
            assert_equivalent(argument, self._expected, self._configure, scope=scope)
            failures = scope.discard()
        self._failed_expectations = os.linesep.join(failures)
        if failures:
            _LOGGER.debug(
                "Argument %r differs from expectation in %d place(s).", argument, len(failures)
            )
        return not failures

    def describe_for(self, argument: object) -> str:
        return self._failed_expectations

    def __repr__(self) -> str:
        return f"<equivalent to {self._expected!r}>"

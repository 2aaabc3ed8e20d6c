"""Pytest configuration and fixtures for oaslint tests."""

import logging
from collections.abc import Callable
from typing import Any

import pytest

from oaslint.ref_utils import Location, Source
from oaslint.resolve import Document, Resolver
from oaslint.types import NamedType
from oaslint.walk import Problem, UserContext


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("oaslint"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture
def source() -> Source:
    return Source("test.yaml")


@pytest.fixture
def run_visitor(
    source: Source,
) -> Callable[..., list[Problem]]:
    """Run one visitor callback on a node and collect what it reports.

    The node is placed at ``#/node`` unless a ``pointer`` is given. Refs
    are resolved against ``document`` (the node itself when omitted).
    """

    def _run(
        visit: Callable[..., None],
        node: Any,
        node_type: NamedType,
        *,
        key: str | int | None = None,
        document: Any = None,
        pointer: str = "#/node",
    ) -> list[Problem]:
        problems: list[Problem] = []
        here = Location(source, pointer)
        resolver = Resolver(
            Document(source, node if document is None else document)
        )

        def report(message, location=None, suggest=None):
            problems.append(
                Problem(
                    message=message,
                    rule_id="test",
                    severity="error",
                    location=location or here,
                    suggest=list(suggest or []),
                )
            )

        ctx = UserContext(
            report=report,
            location=here,
            type=node_type,
            key=key,
            parent=None,
            resolve=resolver.resolve,
        )
        visit(node, ctx)
        return problems

    return _run

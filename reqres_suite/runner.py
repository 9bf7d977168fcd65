"""
Sequential runner for the user scenarios.

Runs scenarios one at a time in their declared order and records an
outcome for each.  A failing scenario never stops the sequence: later
independent scenarios still run, while scenarios that need state the
failed one should have produced fail on their own precondition check.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import requests

from reqres_suite.scenarios import SCENARIOS, Scenario, ScenarioContext

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    """Result category of a single scenario run."""

    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"


@dataclass(frozen=True)
class ScenarioResult:
    """
    Outcome of one scenario.

    Attributes:
        scenario: The descriptor that was run.
        outcome: Passed, failed (assertion or precondition) or error
            (transport or other unexpected failure).
        detail: Failure message, None on success.
    """

    scenario: Scenario
    outcome: Outcome
    detail: str | None = None

    @property
    def passed(self) -> bool:
        return self.outcome is Outcome.PASSED


def _check_order(scenarios: Sequence[Scenario]) -> None:
    orders = [scenario.order for scenario in scenarios]
    if any(later <= earlier for earlier, later in zip(orders, orders[1:])):
        raise ValueError(f"Scenarios must be in strictly increasing order, got {orders}")


def run_scenarios(
    context: ScenarioContext,
    scenarios: Sequence[Scenario] = SCENARIOS,
) -> list[ScenarioResult]:
    """
    Execute scenarios in declared order against a shared context.

    Args:
        context: State threaded through every scenario.
        scenarios: Descriptors to run, already in execution order.

    Returns:
        One result per scenario, in execution order.

    Raises:
        ValueError: If ``order`` values are not strictly increasing.
    """
    _check_order(scenarios)

    results: list[ScenarioResult] = []
    for scenario in scenarios:
        logger.info("Running scenario %d: %s", scenario.order, scenario.name)
        try:
            scenario.run(context)
        except AssertionError as exc:
            logger.error("Scenario %s failed: %s", scenario.name, exc)
            results.append(ScenarioResult(scenario, Outcome.FAILED, str(exc)))
        except requests.RequestException as exc:
            logger.error("Scenario %s aborted by transport error: %s", scenario.name, exc)
            results.append(ScenarioResult(scenario, Outcome.ERROR, f"{type(exc).__name__}: {exc}"))
        except Exception as exc:
            logger.exception("Scenario %s aborted by unexpected error", scenario.name)
            results.append(ScenarioResult(scenario, Outcome.ERROR, f"{type(exc).__name__}: {exc}"))
        else:
            results.append(ScenarioResult(scenario, Outcome.PASSED))
    return results


def all_passed(results: Sequence[ScenarioResult]) -> bool:
    """Aggregate verdict: True only when every scenario passed."""
    return all(result.passed for result in results)


def results_by_name(results: Sequence[ScenarioResult]) -> dict[str, ScenarioResult]:
    """Index results by scenario name for per-scenario reporting."""
    return {result.scenario.name: result for result in results}

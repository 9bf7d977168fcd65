"""
Live-suite fixtures for the remote user API.

Provides a session-scoped client bound to the live configuration and a
module-scoped fixture that runs every scenario once, in declared order,
through ``run_scenarios``.  Individual tests then only read the
recorded results, so the order pytest collects or runs them in has no
effect on the order requests reach the API.

The live suite only runs when ``REQRES_LIVE=1`` is set so that offline
runs never depend on a third-party service being up.

Key SDET Concepts Demonstrated:
- Opt-in live testing against an external dependency
- Running order-dependent steps once, outside the test framework's ordering
"""

from __future__ import annotations

import os

import pytest

from reqres_suite import create_client
from reqres_suite.api import UsersApi
from reqres_suite.runner import ScenarioResult, results_by_name, run_scenarios
from reqres_suite.scenarios import ScenarioContext


@pytest.fixture(scope="session")
def live_users_api() -> UsersApi:
    """Yield a client for the live API, or skip when live runs are not enabled."""
    if os.getenv("REQRES_LIVE") != "1":
        pytest.skip("set REQRES_LIVE=1 to run the user scenarios against the live API")
    return create_client("live")


@pytest.fixture(scope="module")
def scenario_results(live_users_api) -> dict[str, ScenarioResult]:
    """Run the full sequence once and index the results by scenario name."""
    return results_by_name(run_scenarios(ScenarioContext(api=live_users_api)))

"""
Ordered user scenarios against the remote API.

Six scenarios exercise the ``/users`` resource end to end: create,
update, list, delete, fetch a missing user, and create with invalid
data.  Each issues exactly one request and asserts on the response.

The only state carried between scenarios is the identifier of the user
created by the first one.  It lives on an explicit ``ScenarioContext``
passed to every scenario, so the forward dependency (create -> update,
create -> delete) is visible in the signatures and a scenario can be
driven in isolation by seeding the context with a stub identifier.

Key SDET Concepts Demonstrated:
- Explicit test context instead of hidden shared state
- Data-driven scenario descriptors executed in declared order
- Precondition checks that fail with a message instead of crashing
- Positive and negative path coverage (201/200/204 vs 404/400)
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import requests

from reqres_suite.api import UsersApi, safe_json, user_from_response, users_from_response
from reqres_suite.models import User

logger = logging.getLogger(__name__)

NEW_USER = User(name="John Doe", job="Software Engineer")
UPDATED_JOB = "Senior Software Engineer"
LIST_PAGE = 2
MISSING_USER_ID = "9999"
MISSING_USER_ERROR = "user not found"
INVALID_USER = User(name="", job="")

# Longest slice of a response body quoted in a failure message.
_BODY_EXCERPT = 200


@dataclass
class ScenarioContext:
    """
    State threaded through the scenario sequence.

    Attributes:
        api: Client used for every request.
        created_user_id: Identifier returned by the create scenario.
            None until that scenario succeeds; never cleared afterwards.
    """

    api: UsersApi
    created_user_id: str | None = None

    def require_created_user_id(self) -> str:
        """
        Return the created user's identifier or fail the current scenario.

        Raises:
            AssertionError: When the create scenario has not run or did
                not produce an identifier.
        """
        if self.created_user_id is None:
            raise AssertionError(
                "User ID should not be null: the create-user scenario must run first"
            )
        return self.created_user_id


@dataclass(frozen=True)
class Scenario:
    """
    Descriptor for one ordered scenario.

    Attributes:
        order: Position in the sequence, starting at 1.
        name: Short identifier, used as the pytest test id.
        description: One-line summary for reports.
        run: Callable performing the request and assertions.
        requires_created_user: True when the scenario reads the
            identifier produced by the create scenario.
    """

    order: int
    name: str
    description: str
    run: Callable[[ScenarioContext], Any]
    requires_created_user: bool = False


def expect_status(response: requests.Response, expected: int, action: str) -> None:
    """Fail with the request, both codes and a body excerpt on a status mismatch."""
    if response.status_code != expected:
        body = (response.text or "")[:_BODY_EXCERPT]
        raise AssertionError(
            f"{action}: expected status {expected}, got {response.status_code}; body: {body!r}"
        )


def expect_equal(actual: Any, expected: Any, field: str) -> None:
    if actual != expected:
        raise AssertionError(f"{field}: expected {expected!r}, got {actual!r}")


def expect_present(value: Any, field: str) -> None:
    if value is None:
        raise AssertionError(f"{field} should be present in the response")


# =============================================================================
# Scenarios
# =============================================================================


def create_user(context: ScenarioContext) -> User:
    """Create a user and remember its identifier for later scenarios."""
    response = context.api.create_user(NEW_USER)
    expect_status(response, 201, "POST /users")

    created = user_from_response(response)
    logger.info("Created user: %s", created)

    expect_present(created.id, "id")
    expect_present(created.created_at, "createdAt")
    expect_equal(created.name, NEW_USER.name, "name")
    expect_equal(created.job, NEW_USER.job, "job")

    context.created_user_id = created.id
    return created


def update_user(context: ScenarioContext) -> User:
    """Change the created user's job and check the response echoes it."""
    user_id = context.require_created_user_id()
    details = User(name=NEW_USER.name, job=UPDATED_JOB)

    response = context.api.update_user(user_id, details)
    expect_status(response, 200, f"PUT /users/{user_id}")

    updated = user_from_response(response)
    logger.info("Updated user: %s", updated)

    expect_equal(updated.job, UPDATED_JOB, "job")
    expect_equal(updated.name, NEW_USER.name, "name")
    return updated


def retrieve_all_users(context: ScenarioContext) -> list[User]:
    response = context.api.list_users(LIST_PAGE)
    expect_status(response, 200, f"GET /users?page={LIST_PAGE}")

    users = users_from_response(response)
    logger.info("Retrieved %d users from page %d", len(users), LIST_PAGE)

    if not users:
        raise AssertionError("User list should not be empty")
    return users


def delete_user(context: ScenarioContext) -> None:
    user_id = context.require_created_user_id()

    response = context.api.delete_user(user_id)
    expect_status(response, 204, f"DELETE /users/{user_id}")
    if response.content:
        raise AssertionError(f"DELETE /users/{user_id}: expected an empty body")

    logger.info("Deleted user with id: %s", user_id)


def retrieve_non_existent_user(context: ScenarioContext) -> None:
    response = context.api.get_user(MISSING_USER_ID)
    expect_status(response, 404, f"GET /users/{MISSING_USER_ID}")
    expect_equal(safe_json(response).get("error"), MISSING_USER_ERROR, "error")

    logger.info("Verified non-existent user retrieval returns 404")


def create_user_invalid_data(context: ScenarioContext) -> None:
    # Empty values are sent unchanged; rejecting them is the service's job.
    response = context.api.create_user(INVALID_USER)
    expect_status(response, 400, "POST /users (invalid data)")

    logger.info("Verified creating a user with invalid data fails")


SCENARIOS: tuple[Scenario, ...] = (
    Scenario(1, "create_user", "Create a user", create_user),
    Scenario(
        2,
        "update_user",
        "Update the created user's job",
        update_user,
        requires_created_user=True,
    ),
    Scenario(3, "retrieve_all_users", "List users on page 2", retrieve_all_users),
    Scenario(
        4,
        "delete_user",
        "Delete the created user",
        delete_user,
        requires_created_user=True,
    ),
    Scenario(
        5,
        "retrieve_non_existent_user",
        "Fetch a user that does not exist",
        retrieve_non_existent_user,
    ),
    Scenario(
        6,
        "create_user_invalid_data",
        "Create a user with empty name and job",
        create_user_invalid_data,
    ),
)

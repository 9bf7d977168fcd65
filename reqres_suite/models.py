"""
Data model for the user resource exposed by the remote API.

``User`` is a transient value object: it is built fresh for each
outgoing request, or parsed from a response body, and discarded once
the scenario has asserted on it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class User:
    """
    User resource as seen by the client.

    Only ``name`` and ``job`` are supplied by the client.  ``id``,
    ``created_at`` and ``updated_at`` are assigned by the remote service
    and are never sent back to it.

    Attributes:
        id: Server-assigned identifier, None before creation.
        name: Display name.
        job: Occupation or role label.
        created_at: ISO-8601 timestamp, present only on create responses.
        updated_at: ISO-8601 timestamp, present only on update responses.
    """

    id: str | None = None
    name: str | None = None
    job: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    def to_dict(self) -> dict[str, str]:
        """
        Build the outgoing request payload.

        Returns:
            Dictionary holding only the client-supplied fields that were
            set.  Empty strings are kept as-is.
        """
        payload: dict[str, str] = {}
        if self.name is not None:
            payload["name"] = self.name
        if self.job is not None:
            payload["job"] = self.job
        return payload

    def to_json(self) -> str:
        """Serialize the outgoing payload as compact JSON text."""
        return json.dumps(self.to_dict(), separators=(",", ":"))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> User:
        """
        Build a ``User`` from a decoded response object.

        Missing keys leave the matching field as None and keys outside
        the user shape (``email``, ``avatar``, ...) are ignored.  List
        responses carry integer ids, which are normalised to strings.

        Args:
            data: Decoded JSON object from the remote API.

        Returns:
            User populated from the wire field names.
        """
        raw_id = data.get("id")
        return cls(
            id=None if raw_id is None else str(raw_id),
            name=data.get("name"),
            job=data.get("job"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    @classmethod
    def from_json(cls, text: str) -> User:
        """
        Build a ``User`` from JSON text holding a single object.

        Raises:
            ValueError: If the text is not JSON or not a JSON object.
        """
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object for a user, got {type(data).__name__}")
        return cls.from_dict(data)

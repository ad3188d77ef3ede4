"""User search tool over a fixed in-memory user list."""

from __future__ import annotations

import json

from pydantic import BaseModel, Field

from tool_server.tools.base import BaseTool

USERS: tuple[dict[str, str], ...] = (
    {"name": "aaaa", "email": "aaaa@gmail.com"},
    {"name": "bbbb", "email": "bbbb@gmail.com"},
)


class SearchUserArguments(BaseModel):
    """Arguments accepted by SearchUserTool."""

    name: str | None = Field(default=None, description="User name to search")
    email: str | None = Field(default=None, description="User email to search")


class SearchUserTool(BaseTool):
    """Look up users by name and/or email substring.

    Both filters are optional and combined with AND. With no filters every
    user is returned. The result is a compact JSON array.
    """

    def __init__(self, users: tuple[dict[str, str], ...] = USERS) -> None:
        super().__init__()
        self.users = users

    @property
    def name(self) -> str:
        return "wydln-get-user"

    @property
    def description(self) -> str:
        return "Search user information"

    @property
    def arguments_model(self) -> type[BaseModel]:
        return SearchUserArguments

    def execute(self, arguments: SearchUserArguments) -> str:
        """Filter users by the given substrings."""
        name = arguments.name
        email = arguments.email

        # Empty strings match everything, same as an absent filter
        matches = [
            user
            for user in self.users
            if (not name or name in user["name"])
            and (not email or email in user["email"])
        ]

        return json.dumps(matches, separators=(",", ":"))

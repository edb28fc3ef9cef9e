"""Request headers for fetching data over HTTP.

When the data to query lives behind a URL (a REST endpoint, a JSON export),
`load_json` asks an Auth object for the headers to send with the GET.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Auth(Protocol):
    """Anything that can supply headers for a data request.

    Example:
        class GitHubAppAuth:
            def __init__(self, installation_token: str):
                self.installation_token = installation_token

            def get_headers(self) -> dict[str, str]:
                return {
                    "Authorization": f"token {self.installation_token}",
                    "Accept": "application/vnd.github+json",
                }

        load_json("https://api.github.com/repos/octocat/Hello-World/issues/1",
                  auth=GitHubAppAuth(token))
    """

    def get_headers(self) -> dict[str, str]:
        ...


class BearerAuth:
    """Send an OAuth-style token as `Authorization: Bearer <token>`.

    The CLI builds one from --bearer-token or GQL_ANYWHERE_TOKEN.
    """

    def __init__(self, token: str):
        self.token = token

    def get_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


class HeaderAuth:
    """A fixed set of headers, e.g. an API key plus a custom Accept type."""

    def __init__(self, headers: dict[str, str]):
        self._headers = dict(headers)

    def get_headers(self) -> dict[str, str]:
        return self._headers.copy()

    @classmethod
    def from_lines(cls, lines: list[str]) -> "HeaderAuth":
        """Build from "Name: value" strings, as given with --header."""
        headers = {}
        for line in lines:
            name, sep, value = line.partition(":")
            if not sep or not name.strip():
                raise ValueError(f"Invalid header {line!r}, expected 'Name: value'")
            headers[name.strip()] = value.strip()
        return cls(headers)


class NoAuth:
    """Adds nothing; used for public URLs."""

    def get_headers(self) -> dict[str, str]:
        return {}

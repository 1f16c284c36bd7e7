"""Core domain errors."""


class AgentCacheError(Exception):
    """Base error for agentcache."""

    pass


class UnexpectedStatusError(AgentCacheError):
    """Remote endpoint answered with a status other than 200."""

    def __init__(self, status_code: int, url: str):
        self.status_code = status_code
        self.url = url
        super().__init__(f"unexpected response code {status_code}")


class IntegrityMismatchError(AgentCacheError):
    """Downloaded content does not hash to the published checksum."""

    def __init__(self, url: str, expected: str, actual: str):
        self.url = url
        self.expected = expected
        self.actual = actual
        super().__init__(f"mismatched checksum while downloading {url}")


class MalformedLocatorError(AgentCacheError):
    """Desired-image locator file has no newline-terminated first line."""

    pass

from __future__ import annotations


class NotifyError(Exception):
    """Base class for every failure that aborts a notification run."""


class ConfigError(NotifyError):
    pass


class MissingDestination(NotifyError):
    def __init__(self) -> None:
        super().__init__("Must specify a room id or a room name.")


class NoMatchingRoom(NotifyError):
    def __init__(self, room_name: str) -> None:
        self.room_name = room_name
        super().__init__(f"No room named '{room_name}' is visible to the token user.")


class MalformedResponse(NotifyError):
    def __init__(self, url: str, body: str) -> None:
        self.url = url
        self.body = body
        super().__init__(f"Failed to query rooms from '{url}'. Bad JSON response: '{body}'.")


class TransportError(NotifyError):
    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Request to '{url}' failed: {cause}")


class ServiceRejected(NotifyError):
    def __init__(self, url: str, status_code: int, body: str) -> None:
        self.url = url
        self.status_code = status_code
        self.body = body
        super().__init__(f"'{url}' answered with HTTP {status_code}: {body}")

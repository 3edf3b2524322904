from __future__ import annotations

import json
from typing import Any


class FakeResponse:
    """Minimal stand-in for ``requests.Response`` that tracks closing."""

    def __init__(self, status_code: int = 200, text: str = "") -> None:
        self.status_code = status_code
        self.text = text
        self.closed = False

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400

    def json(self) -> Any:
        return json.loads(self.text)

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "FakeResponse":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class FakeSession:
    """Records every request and replays queued responses per HTTP method."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.responses: dict[str, list[FakeResponse | Exception]] = {"GET": [], "POST": []}
        self.returned: list[FakeResponse] = []
        self.closed = False

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "FakeSession":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def queue(self, method: str, response: FakeResponse | Exception) -> None:
        self.responses[method].append(response)

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        queued = self.responses[method]
        outcome = queued.pop(0) if queued else FakeResponse(200, "{}")
        if isinstance(outcome, Exception):
            raise outcome
        self.returned.append(outcome)
        return outcome

    def calls_for(self, method: str) -> list[dict[str, Any]]:
        return [call for call in self.calls if call["method"] == method]


def rooms_body(*rooms: tuple[str, str, str]) -> str:
    return json.dumps(
        {"items": [{"id": room_id, "title": title, "type": kind} for room_id, title, kind in rooms]}
    )

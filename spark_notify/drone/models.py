from __future__ import annotations

from dataclasses import dataclass

import pendulum

SUCCESS_STATUS = "success"


def _from_epoch(value: int) -> pendulum.DateTime | None:
    if not value:
        return None
    return pendulum.from_timestamp(value)


@dataclass(frozen=True, slots=True)
class RepositoryInfo:
    owner: str = ""
    name: str = ""
    full_name: str = ""


@dataclass(frozen=True, slots=True)
class BuildInfo:
    tag: str = ""
    event: str = "push"
    number: int = 0
    commit: str = ""
    ref: str = "refs/heads/master"
    branch: str = "master"
    author: str = ""
    email: str = ""
    status: str = SUCCESS_STATUS
    link: str = ""
    commit_link: str = ""
    message: str = ""
    drone_link: str = ""
    started: int = 0
    created: int = 0

    @property
    def succeeded(self) -> bool:
        # Only the literal "success" counts; every other status is a failure.
        return self.status == SUCCESS_STATUS

    @property
    def started_at(self) -> pendulum.DateTime | None:
        return _from_epoch(self.started)

    @property
    def created_at(self) -> pendulum.DateTime | None:
        return _from_epoch(self.created)


@dataclass(frozen=True, slots=True)
class JobInfo:
    started: int = 0

    @property
    def started_at(self) -> pendulum.DateTime | None:
        return _from_epoch(self.started)

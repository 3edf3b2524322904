from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from ..config import DeliveryConfig
from ..drone.models import BuildInfo, RepositoryInfo
from ..notifications.message import render_message
from ..spark.client import SparkClient
from ..spark.rooms import resolve_room

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class NotificationResult:
    room_id: str
    sent: int


def run_notification(
    repo: RepositoryInfo,
    build: BuildInfo,
    config: DeliveryConfig,
    session: requests.Session | None = None,
) -> NotificationResult:
    if session is None:
        with requests.Session() as owned:
            return _notify(repo, build, config, owned)
    return _notify(repo, build, config, session)


def _notify(
    repo: RepositoryInfo,
    build: BuildInfo,
    config: DeliveryConfig,
    session: requests.Session,
) -> NotificationResult:
    client = SparkClient(config, session=session)

    room_id = resolve_room(config, client)

    started_at = build.started_at
    logger.info(
        "Reporting build #%d of %s (%s%s) to room %s",
        build.number,
        repo.full_name or "<unknown repository>",
        build.status,
        f", started {started_at.to_datetime_string()}" if started_at else "",
        room_id,
    )

    client.send_message(room_id, render_message(repo, build))
    sent = 1

    if config.message:
        client.send_message(room_id, config.message)
        sent += 1

    return NotificationResult(room_id=room_id, sent=sent)

from __future__ import annotations

import logging
from dataclasses import dataclass

import requests

from ..config import DeliveryConfig
from .errors import MalformedResponse, ServiceRejected, TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Room:
    id: str
    title: str
    type: str = ""


def _parse_rooms(url: str, response: requests.Response) -> list[Room]:
    body = response.text
    try:
        payload = response.json()
    except ValueError as exc:
        raise MalformedResponse(url, body) from exc

    items = payload.get("items") if isinstance(payload, dict) else None
    if not isinstance(items, list):
        raise MalformedResponse(url, body)

    rooms: list[Room] = []
    for item in items:
        if not isinstance(item, dict):
            raise MalformedResponse(url, body)
        room_id = item.get("id")
        title = item.get("title")
        if not isinstance(room_id, str) or not isinstance(title, str):
            raise MalformedResponse(url, body)
        rooms.append(Room(id=room_id, title=title, type=str(item.get("type") or "")))
    return rooms


class SparkClient:
    def __init__(
        self,
        config: DeliveryConfig,
        session: requests.Session | None = None,
    ) -> None:
        self._config = config
        self._session = session or requests.Session()
        self._headers = {
            "Authorization": f"Bearer {config.auth_token}",
            "Content-Type": "application/json",
        }

    def list_rooms(self) -> list[Room]:
        url = self._config.rooms_url
        logger.debug("Listing rooms from %s", url)
        with self._request("GET", url) as response:
            self._check_status(url, response)
            rooms = _parse_rooms(url, response)
        logger.debug("Token user can see %d room(s)", len(rooms))
        return rooms

    def send_message(self, room_id: str, text: str) -> None:
        url = self._config.messages_url
        payload = {"roomId": room_id, "markdown": text}
        with self._request("POST", url, json=payload) as response:
            self._check_status(url, response)
        logger.info("Posted %d character message to room %s", len(text), room_id)

    def _request(self, method: str, url: str, **kwargs) -> requests.Response:
        try:
            return self._session.request(
                method,
                url,
                headers=self._headers,
                timeout=self._config.timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            raise TransportError(url, exc) from exc

    @staticmethod
    def _check_status(url: str, response: requests.Response) -> None:
        if not response.ok:
            raise ServiceRejected(url, response.status_code, response.text)

from .drone.models import BuildInfo, JobInfo, RepositoryInfo
from .notifications.message import render_message
from .pipeline.notify import NotificationResult, run_notification
from .spark.client import Room, SparkClient
from .spark.rooms import resolve_room

__all__ = [
    "BuildInfo",
    "JobInfo",
    "NotificationResult",
    "RepositoryInfo",
    "Room",
    "SparkClient",
    "render_message",
    "resolve_room",
    "run_notification",
]

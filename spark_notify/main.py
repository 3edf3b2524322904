from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

from .config import DEFAULT_API_URL, DEFAULT_TIMEOUT, DeliveryConfig, load_environment
from .drone.models import BuildInfo, JobInfo, RepositoryInfo
from .pipeline.notify import run_notification
from .spark.errors import NotifyError

__version__ = "1.0.0"

logger = logging.getLogger(__name__)

# (option, environment variable, default, type, help)
OPTIONS: tuple[tuple[str, str, str, type, str], ...] = (
    ("--message", "PLUGIN_MESSAGE", "", str, "Extra message posted after the build status."),
    ("--auth-token", "PLUGIN_AUTH_TOKEN", "", str, "Spark bearer token."),
    ("--room-id", "PLUGIN_ROOMID", "", str, "Spark room id."),
    ("--room-name", "PLUGIN_ROOMNAME", "", str, "Spark room title, used when no room id is given."),
    ("--api-url", "PLUGIN_API_URL", DEFAULT_API_URL, str, "Base URL of the Spark REST API."),
    ("--timeout", "PLUGIN_TIMEOUT", str(DEFAULT_TIMEOUT), float, "Seconds to wait for each HTTP call."),
    ("--system-link-url", "DRONE_SERVER", "", str, "Drone server URL."),
    ("--repo-owner", "DRONE_REPO_OWNER", "", str, "Repository owner."),
    ("--repo-name", "DRONE_REPO_NAME", "", str, "Repository name."),
    ("--repo-full-name", "DRONE_REPO", "", str, "Repository full name."),
    ("--commit-sha", "DRONE_COMMIT_SHA", "", str, "Git commit sha."),
    ("--commit-ref", "DRONE_COMMIT_REF", "refs/heads/master", str, "Git commit ref."),
    ("--commit-branch", "DRONE_COMMIT_BRANCH", "master", str, "Git commit branch."),
    ("--commit-author", "DRONE_COMMIT_AUTHOR", "", str, "Git author name."),
    ("--commit-author-email", "DRONE_COMMIT_AUTHOR_EMAIL", "", str, "Git author email."),
    ("--commit-link", "DRONE_COMMIT_LINK", "", str, "Git commit link."),
    ("--commit-message", "DRONE_COMMIT_MESSAGE", "", str, "Git commit message."),
    ("--build-event", "DRONE_BUILD_EVENT", "push", str, "Build event."),
    ("--build-number", "DRONE_BUILD_NUMBER", "0", int, "Build number."),
    ("--build-status", "DRONE_BUILD_STATUS", "success", str, "Build status."),
    ("--build-link", "DRONE_BUILD_LINK", "", str, "Build link."),
    ("--build-started", "DRONE_BUILD_STARTED", "0", int, "Build start time (epoch seconds)."),
    ("--build-created", "DRONE_BUILD_CREATED", "0", int, "Build creation time (epoch seconds)."),
    ("--build-tag", "DRONE_TAG", "", str, "Build tag."),
    ("--job-started", "DRONE_JOB_STARTED", "0", int, "Job start time (epoch seconds)."),
)


def _env_file_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "--env-file",
        default=os.getenv("ENV_FILE"),
        help="Source environment variables from this file before reading options.",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    # The env file has to be loaded before the other options read their defaults.
    pre_parser = _env_file_parser()
    known, _ = pre_parser.parse_known_args(argv)
    if known.env_file:
        load_environment(known.env_file)

    parser = argparse.ArgumentParser(
        prog="spark-notify",
        description="Post Drone build results to a Cisco Spark room.",
        parents=[pre_parser],
    )
    for option, env_var, default, value_type, help_text in OPTIONS:
        parser.add_argument(
            option,
            type=value_type,
            default=os.getenv(env_var) or default,
            help=f"{help_text} [env: {env_var}]",
        )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def build_inputs(
    args: argparse.Namespace,
) -> tuple[RepositoryInfo, BuildInfo, JobInfo, DeliveryConfig]:
    repo = RepositoryInfo(
        owner=args.repo_owner,
        name=args.repo_name,
        full_name=args.repo_full_name,
    )
    build = BuildInfo(
        tag=args.build_tag,
        event=args.build_event,
        number=args.build_number,
        commit=args.commit_sha,
        ref=args.commit_ref,
        branch=args.commit_branch,
        author=args.commit_author,
        email=args.commit_author_email,
        status=args.build_status,
        link=args.build_link,
        commit_link=args.commit_link,
        message=args.commit_message,
        drone_link=args.system_link_url,
        started=args.build_started,
        created=args.build_created,
    )
    job = JobInfo(started=args.job_started)
    config = DeliveryConfig(
        auth_token=args.auth_token,
        room_id=args.room_id,
        room_name=args.room_name,
        message=args.message,
        api_url=args.api_url,
        timeout=args.timeout,
    )
    return repo, build, job, config


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        repo, build, job, config = build_inputs(args)
        logger.debug("Delivery settings: %r", config)
        if job.started_at:
            logger.debug("Job started %s", job.started_at.to_iso8601_string())
        result = run_notification(repo, build, config)
    except NotifyError as exc:
        logging.error("%s", exc)
        return 1

    logging.info("Sent %d message(s) to room %s.", result.sent, result.room_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())

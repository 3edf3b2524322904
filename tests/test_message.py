from __future__ import annotations

from dataclasses import replace

from spark_notify.drone.models import BuildInfo, RepositoryInfo
from spark_notify.notifications.message import render_message


def test_success_message_layout(repo, build) -> None:
    assert render_message(repo, build) == (
        "##Build for octocat/hello-world is Successful \n"
        "**Build author:** [Octo Cat](octo@example.com) \n"
        "###Build Details \n"
        "* [Build Log](https://drone.example.com/octocat/hello-world/42)\n"
        "* [Commit Log](https://github.com/octocat/hello-world/commit/6f1c2b9)\n"
        "* **Branch:** main\n"
        "* **Event:** push\n"
        "* **Commit Message:** Fix the flux capacitor\n"
    )


def test_any_other_status_is_reported_as_failed(repo, build) -> None:
    for status in ("failure", "error", "killed", "Success", ""):
        text = render_message(repo, replace(build, status=status))
        assert text.startswith("#Build for octocat/hello-world is FAILED!!! \n")
        assert "**Drone blames build author:** [Octo Cat](octo@example.com) \n" in text
        assert "Successful" not in text


def test_message_contains_build_fields(repo, build) -> None:
    build = replace(build, branch="release/1.2", event="tag", message="Cut 1.2")
    text = render_message(repo, build)

    for fragment in (repo.full_name, build.branch, build.event, build.message):
        assert fragment in text
    assert text.endswith("\n")


def test_render_is_deterministic(repo, build) -> None:
    assert render_message(repo, build) == render_message(repo, build)


def test_multiline_commit_message_is_kept_verbatim(repo, build) -> None:
    text = render_message(repo, replace(build, message="Subject\n\nBody line"))

    assert text.endswith("* **Commit Message:** Subject\n\nBody line\n")


def test_empty_inputs_still_render() -> None:
    text = render_message(RepositoryInfo(), BuildInfo(status="failure"))

    assert text
    assert "FAILED" in text
    assert text.endswith("\n")

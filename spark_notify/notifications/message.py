from __future__ import annotations

from ..drone.models import BuildInfo, RepositoryInfo


def render_message(repo: RepositoryInfo, build: BuildInfo) -> str:
    lines: list[str] = []

    if build.succeeded:
        lines.append(f"##Build for {repo.full_name} is Successful ")
        lines.append(f"**Build author:** [{build.author}]({build.email}) ")
    else:
        lines.append(f"#Build for {repo.full_name} is FAILED!!! ")
        lines.append(f"**Drone blames build author:** [{build.author}]({build.email}) ")

    lines.append("###Build Details ")
    lines.append(f"* [Build Log]({build.link})")
    lines.append(f"* [Commit Log]({build.commit_link})")
    lines.append(f"* **Branch:** {build.branch}")
    lines.append(f"* **Event:** {build.event}")
    # TODO: indent continuation lines so multi-line commit messages stay in the list item.
    lines.append(f"* **Commit Message:** {build.message}")

    return "\n".join(lines) + "\n"

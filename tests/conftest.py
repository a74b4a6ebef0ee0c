"""
Shared fixtures: ranking markdown builders and throwaway dataset repositories.
"""

import os
import shutil
import subprocess
from pathlib import Path

import pytest

from rank_tracker.config import MARKDOWN_SUBPATH



def ranking_row(position: int, username: str | None, value: str) -> str:
    """One <tr> of a ranking table. username=None renders a row without a profile link."""
    if username is None:
        name_cell = "<td>\n\t\t\tDeleted user\n\t\t</td>"
    else:
        name_cell = (
            "<td>\n"
            f'\t\t\t<a href="https://github.com/{username}">\n'
            f'\t\t\t\t<img src="https://avatars.githubusercontent.com/u/{position}?v=4" width="24" alt="Avatar of {username}"> {username}\n'
            "\t\t\t</a><br>\n"
            f"\t\t\t{username.title()}\n"
            "\t\t</td>"
        )
    return (
        "\t<tr>\n"
        f"\t\t<td>{position}</td>\n"
        f"\t\t{name_cell}\n"
        "\t\t<td>Acme</td>\n"
        "\t\t<td></td>\n"
        "\t\t<td>Wonderland</td>\n"
        f"\t\t<td>{value}</td>\n"
        "\t</tr>\n"
    )


def ranking_markdown(rows: list[tuple[str | None, str]], title: str = "Followers") -> str:
    """A ranking document in the dataset's layout: prose, then the table, then more prose."""
    body = "".join(ranking_row(i, user, value) for i, (user, value) in enumerate(rows, start=1))
    return (
        f"# Top GitHub Users By {title} in Wonderland\n\n"
        "<a href=\"https://github.com/gayanvoice/top-github-users\">\n"
        "\t<img align=\"right\" width=\"200\" src=\"https://example.invalid/logo.png\">\n"
        "</a>\n\n"
        "This is a list of most active GitHub users.\n\n"
        "<table>\n"
        "\t<tr>\n"
        "\t\t<th>#</th>\n"
        "\t\t<th>Name</th>\n"
        "\t\t<th>Company</th>\n"
        "\t\t<th>Twitter Username</th>\n"
        "\t\t<th>Location</th>\n"
        f"\t\t<th>{title}</th>\n"
        "\t</tr>\n"
        f"{body}"
        "</table>\n\n"
        "Made with care.\n"
    )


def write_rankings(root: Path, files: dict[tuple[str, str], str]) -> None:
    """Write {(category, country): markdown} under root/<MARKDOWN_SUBPATH>."""
    for (category, country), content in files.items():
        path = root / MARKDOWN_SUBPATH / category / f"{country}.md"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def git(repo: Path, *args: str, date: str | None = None) -> str:
    env = dict(os.environ)
    if date:
        env["GIT_AUTHOR_DATE"] = date
        env["GIT_COMMITTER_DATE"] = date
    proc = subprocess.run(
        [
            "git",
            "-c", "user.name=Rank Bot",
            "-c", "user.email=rank-bot@example.invalid",
            "-c", "commit.gpgsign=false",
            *args,
        ],
        cwd=str(repo),
        capture_output=True,
        text=True,
        env=env,
        check=True,
    )
    return proc.stdout


class DatasetRepo:
    """A real git repository laid out like the ranking dataset."""

    def __init__(self, path: Path):
        self.path = path
        self.path.mkdir(parents=True, exist_ok=True)
        git(self.path, "init", "--quiet")
        git(self.path, "symbolic-ref", "HEAD", "refs/heads/main")

    @property
    def markdown_dir(self) -> Path:
        return self.path / MARKDOWN_SUBPATH

    def commit(self, files: dict[tuple[str, str], str], date: str, message: str = "Update rankings") -> str:
        write_rankings(self.path, files)
        git(self.path, "add", "-A")
        git(self.path, "commit", "--quiet", "-m", message, date=date)
        return git(self.path, "rev-parse", "HEAD").strip()

    def branch(self) -> str:
        return git(self.path, "rev-parse", "--abbrev-ref", "HEAD").strip()


@pytest.fixture
def dataset_repo(tmp_path):
    if shutil.which("git") is None:
        pytest.skip("git executable not available")
    return DatasetRepo(tmp_path / "dataset")

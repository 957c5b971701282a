# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
import os
from abc import abstractmethod
from dataclasses import dataclass

from find_merge.scm.consts import TraversalMode


@dataclass(frozen=True)
class CommitRange:
    """A pair of endpoints bounding the commits a history query considers."""

    start: str
    end: str

    def __str__(self) -> str:
        return f"{self.start}..{self.end}"


class AbstractHistoryQuery:
    """An abstract class defining the history queries needed to locate a merge commit."""

    # The path to the repository.
    path: str

    def __init__(self, path: str | None = None):
        self.path = path or os.getcwd()

    def __str__(self) -> str:
        return f"{self.scm_name()} repo at {self.path}"

    @classmethod
    @abstractmethod
    def scm_name(cls) -> str:
        """Return a _human-friendly_ string identifying the supported SCM (e.g.,
        `Git`)."""

    @abstractmethod
    def list_commits(
        self, commit_range: CommitRange, mode: TraversalMode
    ) -> list[str]:
        """List the commits in a range, in the given traversal order.

        Parameters:
            commit_range (CommitRange): The range of commits to consider.
            mode (TraversalMode): Whether to follow every path between the range
            endpoints, or the first parents only.

        Returns:
            list[str]: The commit identifiers, newest first.
        """

    @abstractmethod
    def resolve_head(self) -> str:
        """Return the commit identifier of the current branch head."""

    @abstractmethod
    def show_record(self, commit: str) -> str:
        """Return the full textual record of a commit."""

    def list_ancestry_path(self, commit_range: CommitRange) -> list[str]:
        """List all commits on any path between the ends of the range, newest first."""
        return self.list_commits(commit_range, TraversalMode.ANCESTRY_PATH)

    def list_first_parent(self, commit_range: CommitRange) -> list[str]:
        """List the mainline commits of the range, newest first."""
        return self.list_commits(commit_range, TraversalMode.FIRST_PARENT)

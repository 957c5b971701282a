# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from find_merge.scm import AbstractHistoryQuery, CommitRange

logger = logging.getLogger(__name__)


def resolve_range(
    scm: AbstractHistoryQuery, commit: str, branch: Optional[str] = None
) -> CommitRange:
    """Build the range of commits between `commit` and the branch it was merged to.

    When no branch is given, the range ends at the commit currently checked out.
    """
    if not commit:
        raise ValueError("A commit to look for is required.")

    range_end = branch if branch else scm.resolve_head()
    return CommitRange(commit, range_end)


def find_last_common(
    ancestry_path: Sequence[str], first_parent: Iterable[str]
) -> Optional[str]:
    """Return the most recent commit present in both histories, if any.

    `ancestry_path` is scanned from its tail (oldest commit) towards its head,
    and the first commit also found in `first_parent` is returned.
    """
    mainline = set(first_parent)

    for commit in reversed(ancestry_path):
        if commit in mainline:
            return commit

    return None


def format_result(
    scm: AbstractHistoryQuery, commit: Optional[str], show_log: bool = False
) -> Optional[str]:
    """Return the text to print for a merge commit, or `None` if none was found."""
    if commit is None:
        return None

    if show_log:
        return scm.show_record(commit)

    return commit


def find_merge(
    scm: AbstractHistoryQuery,
    commit: str,
    branch: Optional[str] = None,
    show_log: bool = False,
) -> Optional[str]:
    """Find the commit in which `commit` was merged into `branch`.

    Parameters:
        scm (AbstractHistoryQuery): The repository to query.
        commit (str): The commit to look for.
        branch (Optional[str]): The branch that was merged to. Defaults to the
        current branch head.
        show_log (bool): If True, return the full record of the merge commit
        rather than its identifier.

    Returns:
        Optional[str]: The text to print, or None if no merge was found.
    """
    commit_range = resolve_range(scm, commit, branch)
    logger.debug("looking for merge of %s in %s", commit, scm)

    ancestry_path = scm.list_ancestry_path(commit_range)
    first_parent = scm.list_first_parent(commit_range)
    merge_commit = find_last_common(ancestry_path, first_parent)

    if merge_commit is None:
        logger.info("no merge of %s found in %s", commit, commit_range)
    else:
        logger.info("%s was merged in %s", commit, merge_commit)

    return format_result(scm, merge_commit, show_log)

# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
import enum


@enum.unique
class TraversalMode(str, enum.Enum):
    """Enumeration of the history traversal orders used to locate a merge.

    The value of each member is the `git rev-list` flag selecting that order.
    """

    # Every commit on any path between the range endpoints.
    ANCESTRY_PATH = "--ancestry-path"

    # The mainline only, following the first parent of each merge.
    FIRST_PARENT = "--first-parent"

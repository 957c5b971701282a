# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
from find_merge.scm.abstract_scm import AbstractHistoryQuery, CommitRange
from find_merge.scm.consts import TraversalMode
from find_merge.scm.exceptions import EncodingError, QueryError, SCMException
from find_merge.scm.git import GitHistoryQuery

__all__ = [
    "AbstractHistoryQuery",
    "CommitRange",
    "EncodingError",
    "GitHistoryQuery",
    "QueryError",
    "SCMException",
    "TraversalMode",
]

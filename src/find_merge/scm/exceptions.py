# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.


class SCMException(Exception):
    """A base exception class for errors coming from interactions with an SCM."""

    out: str
    err: str
    msg: str

    def __init__(self, msg: str, out: str = "", err: str = ""):
        self.out = out
        self.err = err
        super().__init__(msg)


class QueryError(SCMException):
    """Exception when a history query exits with a non-zero status."""

    returncode: int

    def __init__(self, msg: str, out: str, err: str, returncode: int):
        self.returncode = returncode
        super().__init__(msg, out, err)


class EncodingError(SCMException):
    """Exception when the output of a history query is not valid UTF-8."""

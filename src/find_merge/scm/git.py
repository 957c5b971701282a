# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
import logging
import subprocess
import uuid

from typing_extensions import override

from find_merge.scm.consts import TraversalMode
from find_merge.scm.exceptions import EncodingError, QueryError

from .abstract_scm import AbstractHistoryQuery, CommitRange

logger = logging.getLogger(__name__)


class GitHistoryQuery(AbstractHistoryQuery):
    """An implementation of the AbstractHistoryQuery running the `git` command line."""

    @classmethod
    @override
    def scm_name(cls) -> str:
        """Return a _human-friendly_ string identifying the supported SCM."""
        return "Git"

    @override
    def list_commits(
        self, commit_range: CommitRange, mode: TraversalMode
    ) -> list[str]:
        """List the commits in a range with `git rev-list`, newest first."""
        return self._git_run(
            "rev-list", str(commit_range), mode.value, cwd=self.path
        ).splitlines()

    @override
    def resolve_head(self) -> str:
        """Return the SHA of the currently checked out commit."""
        return self._git_run("rev-parse", "--verify", "HEAD", cwd=self.path)

    @override
    def show_record(self, commit: str) -> str:
        """Return the `git show` output for a commit, trailing newlines included."""
        return self._git_run("show", commit, cwd=self.path, rstrip=False)

    @classmethod
    def _git_run(cls, *args, cwd: str | None = None, rstrip: bool = True) -> str:
        """Run a git command and return full output.

        Parameters:

        args: list[str]
            Arguments to git

        cwd: str
            Optional path to work in, default to the current directory

        Returns:
            str: the standard output of the command
        """
        correlation_id = str(uuid.uuid4())
        command = ["git"] + list(args)
        logger.info(
            "running git command #%s: %s",
            correlation_id,
            command,
            extra={
                "command": command,
                "command_id": correlation_id,
                "path": cwd,
            },
        )

        result = subprocess.run(command, cwd=cwd, capture_output=True)

        if result.returncode:
            # Stdout of a failed command is only kept for diagnostics.
            out = result.stdout.decode("utf-8", errors="replace").strip()
            err = cls._decode(result.stderr, command).strip()
            raise QueryError(
                f"Git command failed with code {result.returncode}: {err}",
                out,
                err,
                result.returncode,
            )

        out = cls._decode(result.stdout, command)
        out = out.lstrip()
        if rstrip:
            out = out.rstrip()

        if out:
            logger.debug(
                "output from git command #%s: %s",
                correlation_id,
                out,
                extra={
                    "command_id": correlation_id,
                    "output": out,
                    "path": cwd,
                },
            )

        return out

    @staticmethod
    def _decode(output: bytes, command: list[str]) -> str:
        try:
            return output.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingError(
                f"Output of git command is not valid UTF-8; {command=}: {exc}",
                err=str(exc),
            ) from exc

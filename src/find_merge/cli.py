# This Source Code Form is subject to the terms of the Mozilla Public
# License, v. 2.0. If a copy of the MPL was not distributed with this
# file, You can obtain one at http://mozilla.org/MPL/2.0/.
import logging
from typing import Optional

import click

from find_merge import __version__
from find_merge.merge import find_merge
from find_merge.scm import GitHistoryQuery, SCMException
from find_merge.settings import configure_logging, load_config, log_level

logger = logging.getLogger(__name__)


@click.command(name="find-merge")
@click.version_option(__version__, prog_name="Find Merge")
@click.argument("commit")
@click.argument("branch", required=False)
@click.option(
    "--log",
    "show_log",
    is_flag=True,
    help="Whether to show the entire log entry instead of just the hash.",
)
@click.option(
    "-C",
    "--repo",
    "repo_path",
    type=click.Path(exists=True, file_okay=False),
    help="The repository to search in. Defaults to the current directory.",
)
@click.option("-v", "--verbose", count=True, help="Log more details to stderr.")
def cli(
    commit: str,
    branch: Optional[str],
    show_log: bool,
    repo_path: Optional[str],
    verbose: int,
):
    """Finds commit in which the specified hash was merged into the current branch.

    COMMIT is the hash of the commit to look for, BRANCH the branch that was
    merged to.
    """
    configure_logging(log_level(load_config(), verbose))

    scm = GitHistoryQuery(repo_path)
    try:
        output = find_merge(scm, commit, branch, show_log=show_log)
    except SCMException as exc:
        logger.debug("history query failed in %s", scm, exc_info=True)
        raise click.ClickException(str(exc)) from exc

    if output is not None:
        click.echo(output)


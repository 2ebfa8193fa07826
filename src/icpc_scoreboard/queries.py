import logging
from typing import Optional

from icpc_scoreboard.scoreboard import Scoreboard
from icpc_scoreboard.types import RankQueryResult, Submission

logger = logging.getLogger(__name__)


def query_rank(scoreboard: Scoreboard, team_name: str) -> RankQueryResult:
    scoreboard.ensure_running()
    team = scoreboard.get_team(team_name)
    rank = scoreboard.visible_order.index(team.name) + 1
    if scoreboard.is_frozen:
        logger.debug(f"Rank of team {team_name} queried while the scoreboard is frozen")
    return RankQueryResult(rank=rank, is_stale=scoreboard.is_frozen)


def query_submission(
        scoreboard: Scoreboard,
        team_name: str,
        problem_name: Optional[str] = None,
        status: Optional[str] = None,
) -> Optional[Submission]:
    """Finds the most recently received submission of a team matching the filters, a `None` filter matches all."""
    scoreboard.ensure_running()
    team = scoreboard.get_team(team_name)
    for submission in reversed(team.submissions):
        if problem_name is not None and submission.problem_name != problem_name:
            continue
        if status is not None and submission.status != status:
            continue
        return submission
    return None

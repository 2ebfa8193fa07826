import logging
from typing import Dict, List, Optional, Tuple

from icpc_scoreboard.ledger import TeamLedger
from icpc_scoreboard.standings import sort_standings
from icpc_scoreboard.types import Submission, SubmissionStatus, ScoreboardStatus, StandingsRow, \
    DuplicateTeamError, UnknownTeamError, AlreadyFrozenError, NotFrozenError, CompetitionEndedError, \
    InvalidSubmissionTimeError

logger = logging.getLogger(__name__)


class Scoreboard:
    """Owns every team ledger, the visible order of the teams and the freeze status.

    The visible order is only recomputed by `flush` and `scroll`, so after any other operation it may
    disagree with the order the latest ledgers would produce.
    """
    _teams: Dict[str, TeamLedger]
    _visible_order: List[str]
    _submissions: List[Submission]
    _status: ScoreboardStatus
    _duration: Optional[int]
    _has_ended: bool

    def __init__(self) -> None:
        self._teams = {}
        self._visible_order = []
        self._submissions = []
        self._status = ScoreboardStatus.VISIBLE
        self._duration = None
        self._has_ended = False

    @property
    def status(self) -> ScoreboardStatus:
        return self._status

    @property
    def is_frozen(self) -> bool:
        return self._status == ScoreboardStatus.FROZEN

    @property
    def has_ended(self) -> bool:
        return self._has_ended

    @property
    def duration(self) -> Optional[int]:
        return self._duration

    @property
    def visible_order(self) -> Tuple[str, ...]:
        return tuple(self._visible_order)

    @property
    def submissions(self) -> Tuple[Submission, ...]:
        return tuple(self._submissions)

    def ensure_running(self) -> None:
        if self._has_ended:
            raise CompetitionEndedError("The competition has ended")

    def get_team(self, team_name: str) -> TeamLedger:
        team = self._teams.get(team_name)
        if not team:
            raise UnknownTeamError(f"Team {team_name} is not registered")
        return team

    def start(self, duration: int) -> None:
        self.ensure_running()
        self._duration = duration
        logger.debug(f"Competition started with a duration of {duration} minutes")

    def register_team(self, team_name: str) -> None:
        self.ensure_running()
        if team_name in self._teams:
            raise DuplicateTeamError(f"Team {team_name} is already registered")

        self._teams[team_name] = TeamLedger(name=team_name)
        self._visible_order.append(team_name)
        logger.debug(f"Registered team {team_name}")

    def submit(self, team_name: str, problem_name: str, status: str, time: int) -> None:
        """Records a submission, `status` is any status text and only `Accepted` counts as a solve."""
        self.ensure_running()
        team = self.get_team(team_name)
        if time < 0:
            raise InvalidSubmissionTimeError(f"Submission time must not be negative, got {time}")

        submission = Submission(
            team_name=team_name, problem_name=problem_name, status=SubmissionStatus.as_text(status), time=time)
        self._submissions.append(submission)
        team.apply_submission(submission)

    def flush(self) -> None:
        self.ensure_running()
        self._sort_visible_order()

    def freeze(self) -> None:
        self.ensure_running()
        if self.is_frozen:
            raise AlreadyFrozenError("The scoreboard is already frozen")
        self._status = ScoreboardStatus.FROZEN
        logger.debug("Scoreboard frozen")

    def scroll(self) -> List[StandingsRow]:
        """Unfreezes the scoreboard and reveals every change since the last sort at once."""
        self.ensure_running()
        if not self.is_frozen:
            raise NotFrozenError("The scoreboard is not frozen")
        self._status = ScoreboardStatus.VISIBLE
        logger.debug("Scoreboard unfrozen")
        self._sort_visible_order()
        return self.standings()

    def standings(self) -> List[StandingsRow]:
        rows = []
        for place, team_name in enumerate(self._visible_order, start=1):
            team = self._teams[team_name]
            rows.append(StandingsRow(
                team_name=team_name, rank=place, solved=team.solved_count, penalty=team.penalty))
        return rows

    def end(self) -> None:
        self.ensure_running()
        self._has_ended = True
        logger.debug("Competition ended")

    def _sort_visible_order(self) -> None:
        sorted_teams = sort_standings(self._teams.values())
        self._visible_order = [team.name for team in sorted_teams]
        logger.debug(f"Sorted the standings of {len(self._visible_order)} teams")

import enum
from dataclasses import dataclass


class ScoreboardError(Exception):
    pass


class DuplicateTeamError(ScoreboardError):
    pass


class UnknownTeamError(ScoreboardError):
    pass


class AlreadyFrozenError(ScoreboardError):
    pass


class NotFrozenError(ScoreboardError):
    pass


class CompetitionEndedError(ScoreboardError):
    pass


class InvalidSubmissionTimeError(ScoreboardError):
    pass


@enum.unique
class SubmissionStatus(str, enum.Enum):
    """Well known submission outcomes, any other status text is also a rejection."""
    ACCEPTED = "Accepted"
    WRONG_ANSWER = "Wrong_Answer"
    RUNTIME_ERROR = "Runtime_Error"
    TIME_LIMIT_EXCEEDED = "Time_Limit_Exceed"

    @staticmethod
    def as_text(status: str) -> str:
        if isinstance(status, SubmissionStatus):
            return status.value
        return status

    @staticmethod
    def is_accepted(status: str) -> bool:
        return status == SubmissionStatus.ACCEPTED


@enum.unique
class ScoreboardStatus(enum.Enum):
    VISIBLE = "visible"
    FROZEN = "frozen"


@dataclass(frozen=True)
class Submission:
    team_name: str
    problem_name: str
    # Raw status text as received
    status: str
    time: int

    @property
    def is_accepted(self) -> bool:
        return SubmissionStatus.is_accepted(self.status)


@dataclass(frozen=True)
class StandingsRow:
    team_name: str
    rank: int
    solved: int
    penalty: int


@dataclass(frozen=True)
class RankQueryResult:
    rank: int
    # The rank was computed at the last flush or scroll and may miss newer submissions
    is_stale: bool

from dataclasses import dataclass
from typing import Optional, Union


class InvalidCommandError(Exception):
    pass


@dataclass(frozen=True)
class StartCommand:
    duration: int


@dataclass(frozen=True)
class AddTeamCommand:
    team_name: str


@dataclass(frozen=True)
class SubmitCommand:
    team_name: str
    problem_name: str
    # Any status other than Accepted is a rejection
    status: str
    time: int


@dataclass(frozen=True)
class FlushCommand:
    pass


@dataclass(frozen=True)
class FreezeCommand:
    pass


@dataclass(frozen=True)
class ScrollCommand:
    pass


@dataclass(frozen=True)
class QueryRankingCommand:
    team_name: str


@dataclass(frozen=True)
class QuerySubmissionCommand:
    team_name: str
    # None matches any problem or status
    problem_name: Optional[str]
    status: Optional[str]


@dataclass(frozen=True)
class EndCommand:
    pass


Command = Union[
    StartCommand, AddTeamCommand, SubmitCommand, FlushCommand, FreezeCommand, ScrollCommand,
    QueryRankingCommand, QuerySubmissionCommand, EndCommand,
]

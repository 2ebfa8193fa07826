import logging
from typing import Callable, Dict, Iterable, TextIO, Type

from icpc_scoreboard.command_parser import parse_command
from icpc_scoreboard.command_types import Command, InvalidCommandError, StartCommand, AddTeamCommand, \
    SubmitCommand, FlushCommand, FreezeCommand, ScrollCommand, QueryRankingCommand, QuerySubmissionCommand, \
    EndCommand
from icpc_scoreboard.queries import query_rank, query_submission
from icpc_scoreboard.scoreboard import Scoreboard
from icpc_scoreboard.types import StandingsRow, Submission, DuplicateTeamError, UnknownTeamError, \
    AlreadyFrozenError, NotFrozenError, ScoreboardError

logger = logging.getLogger(__name__)

_FROZEN_RANKING_WARNING = "[Warning]Scoreboard is frozen. The ranking may be inaccurate until it were scrolled."


def _format_standings_row(row: StandingsRow) -> str:
    return f"{row.team_name} {row.rank} {row.solved} {row.penalty}"


def _format_submission(submission: Submission) -> str:
    return f"{submission.team_name} {submission.problem_name} {submission.status} {submission.time}"


class ScoreboardRunner:
    """Applies a stream of text commands to a scoreboard and writes the outcome of each one."""
    _scoreboard: Scoreboard
    _output: TextIO
    _handlers: Dict[Type, Callable]

    def __init__(self, scoreboard: Scoreboard, output: TextIO) -> None:
        self._scoreboard = scoreboard
        self._output = output
        self._handlers = {
            StartCommand: self._start,
            AddTeamCommand: self._add_team,
            SubmitCommand: self._submit,
            FlushCommand: self._flush,
            FreezeCommand: self._freeze,
            ScrollCommand: self._scroll,
            QueryRankingCommand: self._query_ranking,
            QuerySubmissionCommand: self._query_submission,
            EndCommand: self._end,
        }

    def run(self, lines: Iterable[str]) -> None:
        logger.debug("Starting to read commands")
        for line in lines:
            try:
                command = parse_command(line)
            except InvalidCommandError as e:
                logger.warning(f"Skipping invalid command {line.strip()!r}: {e}")
                continue
            if not command:
                continue

            self.execute(command)
            if self._scoreboard.has_ended:
                logger.debug("Competition has ended, no more commands will be read")
                return

    def execute(self, command: Command) -> None:
        handler = self._handlers[type(command)]
        try:
            handler(command)
        except ScoreboardError as e:
            # Failures without a message of their own, such as commands after the competition ended
            logger.warning(f"Could not execute {type(command).__name__}: {e}")

    def _send_message(self, text: str) -> None:
        self._output.write(f"{text}\n")

    def _start(self, command: StartCommand) -> None:
        self._scoreboard.start(command.duration)
        self._send_message("[Info]Competition starts.")

    def _add_team(self, command: AddTeamCommand) -> None:
        try:
            self._scoreboard.register_team(command.team_name)
        except DuplicateTeamError:
            self._send_message("[Error]Add failed: duplicated team name.")
            return
        self._send_message("[Info]Add successfully.")

    def _submit(self, command: SubmitCommand) -> None:
        try:
            self._scoreboard.submit(command.team_name, command.problem_name, command.status, command.time)
        except UnknownTeamError:
            self._send_message("[Error]Submit failed: cannot find the team.")
            return
        self._send_message("[Info]Submit successfully.")

    def _flush(self, _: FlushCommand) -> None:
        self._scoreboard.flush()
        self._send_message("[Info]Flush scoreboard.")

    def _freeze(self, _: FreezeCommand) -> None:
        try:
            self._scoreboard.freeze()
        except AlreadyFrozenError:
            self._send_message("[Error]Freeze failed: scoreboard has been frozen.")
            return
        self._send_message("[Info]Freeze scoreboard.")

    def _scroll(self, _: ScrollCommand) -> None:
        try:
            standings = self._scoreboard.scroll()
        except NotFrozenError:
            self._send_message("[Error]Scroll failed: scoreboard has not been frozen.")
            return
        self._send_message("[Info]Scroll scoreboard.")
        for row in standings:
            self._send_message(_format_standings_row(row))

    def _query_ranking(self, command: QueryRankingCommand) -> None:
        try:
            result = query_rank(self._scoreboard, command.team_name)
        except UnknownTeamError:
            self._send_message("[Error]Query ranking failed: cannot find the team.")
            return
        if result.is_stale:
            self._send_message(_FROZEN_RANKING_WARNING)
        self._send_message(f"[{command.team_name}] NOW AT RANKING {result.rank}")

    def _query_submission(self, command: QuerySubmissionCommand) -> None:
        try:
            submission = query_submission(
                self._scoreboard, command.team_name, command.problem_name, command.status)
        except UnknownTeamError:
            self._send_message("[Error]Query submission failed: cannot find the team.")
            return
        self._send_message("[Info]Complete query submission.")
        if not submission:
            self._send_message("Cannot find any submission.")
            return
        self._send_message(_format_submission(submission))

    def _end(self, _: EndCommand) -> None:
        self._scoreboard.end()
        self._send_message("[Info]Competition ends.")

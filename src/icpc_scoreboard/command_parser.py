from typing import List, Optional

from icpc_scoreboard.command_types import Command, InvalidCommandError, StartCommand, AddTeamCommand, \
    SubmitCommand, FlushCommand, FreezeCommand, ScrollCommand, QueryRankingCommand, QuerySubmissionCommand, \
    EndCommand

_MATCH_ALL = "ALL"


def _get_token(tokens: List[str], idx: int) -> str:
    if idx >= len(tokens):
        raise InvalidCommandError(f"Expected at least {idx + 1} tokens in {tokens[0]} command")
    return tokens[idx]


def _parse_time(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise InvalidCommandError(f"Expected an integer but got {text}")
    if value < 0:
        raise InvalidCommandError(f"Expected a non-negative integer but got {text}")
    return value


def _parse_condition(text: str) -> str:
    # Conditions look like PROBLEM=A or STATUS=Accepted
    separator = text.find("=")
    return text[separator + 1:]


def parse_command(line: str) -> Optional[Command]:
    """Parses a single input line, blank lines yield None."""
    tokens = line.split()
    if not tokens:
        return None

    name = tokens[0]
    if name == "START":
        # START DURATION <minutes> PROBLEM <count>
        return StartCommand(duration=_parse_time(_get_token(tokens, 2)))
    if name == "ADD_TEAM":
        return AddTeamCommand(team_name=_get_token(tokens, 1))
    if name == "SUBMIT":
        # SUBMIT <team> <problem> <status> AT <time>
        return SubmitCommand(
            team_name=_get_token(tokens, 1),
            problem_name=_get_token(tokens, 2),
            status=_get_token(tokens, 3),
            time=_parse_time(_get_token(tokens, 5)),
        )
    if name == "FLUSH":
        return FlushCommand()
    if name == "FREEZE":
        return FreezeCommand()
    if name == "SCROLL":
        return ScrollCommand()
    if name == "QUERY_RANKING":
        return QueryRankingCommand(team_name=_get_token(tokens, 1))
    if name == "QUERY_SUBMISSION":
        # QUERY_SUBMISSION <team> WHERE PROBLEM=<problem> AND STATUS=<status>
        problem_name = _parse_condition(_get_token(tokens, 3))
        status_text = _parse_condition(_get_token(tokens, 5))
        return QuerySubmissionCommand(
            team_name=_get_token(tokens, 1),
            problem_name=None if problem_name == _MATCH_ALL else problem_name,
            status=None if status_text == _MATCH_ALL else status_text,
        )
    if name == "END":
        return EndCommand()

    raise InvalidCommandError(f"Unknown command {name}")

from typing import Iterable, List, Tuple

from icpc_scoreboard.ledger import TeamLedger


def standings_key(team: TeamLedger) -> Tuple[int, int, List[int], str]:
    """Sort key of a team, the best ranked team has the smallest key.

    Teams with the same solved count have solve time lists of the same length, so those lists are compared
    position by position from the largest solve time down, and the smaller time wins.
    """
    return -team.solved_count, team.penalty, team.solve_times, team.name


def compare_teams(a: TeamLedger, b: TeamLedger) -> int:
    """Negative when `a` ranks before `b`, positive when after, zero only for the same team name."""
    a_key = standings_key(a)
    b_key = standings_key(b)
    return (a_key > b_key) - (a_key < b_key)


def sort_standings(teams: Iterable[TeamLedger]) -> List[TeamLedger]:
    return sorted(teams, key=standings_key)

import pytest

from icpc_scoreboard.scoreboard import Scoreboard
from icpc_scoreboard.types import SubmissionStatus, ScoreboardStatus, StandingsRow, DuplicateTeamError, \
    UnknownTeamError, AlreadyFrozenError, NotFrozenError, CompetitionEndedError, InvalidSubmissionTimeError


@pytest.fixture
def scoreboard() -> Scoreboard:
    scoreboard = Scoreboard()
    scoreboard.start(300)
    return scoreboard


def test_register_team_appends_to_visible_order(scoreboard):
    scoreboard.register_team("zeta")
    scoreboard.register_team("alpha")

    assert scoreboard.visible_order == ("zeta", "alpha")
    assert scoreboard.get_team("alpha").solved_count == 0


def test_register_duplicate_team_fails_without_mutation(scoreboard):
    scoreboard.register_team("alpha")
    scoreboard.submit("alpha", "A", SubmissionStatus.ACCEPTED, 10)

    with pytest.raises(DuplicateTeamError):
        scoreboard.register_team("alpha")

    assert scoreboard.visible_order == ("alpha",)
    assert scoreboard.get_team("alpha").solved_count == 1


def test_submit_to_unknown_team_fails(scoreboard):
    with pytest.raises(UnknownTeamError):
        scoreboard.submit("ghost", "A", SubmissionStatus.ACCEPTED, 10)
    assert scoreboard.submissions == ()


def test_submit_rejects_negative_time(scoreboard):
    scoreboard.register_team("alpha")
    with pytest.raises(InvalidSubmissionTimeError):
        scoreboard.submit("alpha", "A", SubmissionStatus.ACCEPTED, -1)
    assert scoreboard.get_team("alpha").submissions == []


def test_submit_records_global_log(scoreboard):
    scoreboard.register_team("alpha")
    scoreboard.register_team("beta")
    scoreboard.submit("alpha", "A", SubmissionStatus.WRONG_ANSWER, 1)
    scoreboard.submit("beta", "A", SubmissionStatus.ACCEPTED, 2)

    assert [(s.team_name, s.time) for s in scoreboard.submissions] == [("alpha", 1), ("beta", 2)]


def test_flush_scenario(scoreboard):
    scoreboard.register_team("B")
    scoreboard.register_team("A")
    scoreboard.submit("A", "p1", SubmissionStatus.ACCEPTED, 10)
    scoreboard.submit("B", "p1", SubmissionStatus.WRONG_ANSWER, 5)
    scoreboard.submit("B", "p1", SubmissionStatus.ACCEPTED, 15)
    scoreboard.flush()

    assert scoreboard.visible_order == ("A", "B")
    assert scoreboard.standings() == [
        StandingsRow(team_name="A", rank=1, solved=1, penalty=10),
        StandingsRow(team_name="B", rank=2, solved=1, penalty=35),
    ]


def test_visible_order_only_changes_on_flush(scoreboard):
    scoreboard.register_team("alpha")
    scoreboard.register_team("beta")
    scoreboard.flush()
    assert scoreboard.visible_order == ("alpha", "beta")

    scoreboard.submit("beta", "A", SubmissionStatus.ACCEPTED, 10)
    assert scoreboard.visible_order == ("alpha", "beta")

    scoreboard.register_team("gamma")
    scoreboard.freeze()
    assert scoreboard.visible_order == ("alpha", "beta", "gamma")

    scoreboard.flush()
    assert scoreboard.visible_order == ("beta", "alpha", "gamma")


def test_flush_does_not_change_freeze_status(scoreboard):
    scoreboard.flush()
    assert not scoreboard.is_frozen

    scoreboard.freeze()
    scoreboard.flush()
    assert scoreboard.is_frozen


def test_freeze_twice_fails(scoreboard):
    scoreboard.freeze()
    assert scoreboard.status == ScoreboardStatus.FROZEN

    with pytest.raises(AlreadyFrozenError):
        scoreboard.freeze()
    assert scoreboard.is_frozen


def test_scroll_without_freeze_fails(scoreboard):
    scoreboard.register_team("beta")
    scoreboard.register_team("alpha")

    with pytest.raises(NotFrozenError):
        scoreboard.scroll()
    assert not scoreboard.is_frozen
    assert scoreboard.visible_order == ("beta", "alpha")


def test_scroll_unfreezes_and_reveals_standings(scoreboard):
    scoreboard.register_team("alpha")
    scoreboard.register_team("beta")
    scoreboard.flush()
    scoreboard.freeze()
    scoreboard.submit("beta", "A", SubmissionStatus.RUNTIME_ERROR, 100)
    scoreboard.submit("beta", "A", SubmissionStatus.ACCEPTED, 120)
    assert scoreboard.visible_order == ("alpha", "beta")

    standings = scoreboard.scroll()

    assert not scoreboard.is_frozen
    assert standings == [
        StandingsRow(team_name="beta", rank=1, solved=1, penalty=140),
        StandingsRow(team_name="alpha", rank=2, solved=0, penalty=0),
    ]
    assert scoreboard.visible_order == ("beta", "alpha")


def test_can_freeze_again_after_scroll(scoreboard):
    scoreboard.freeze()
    scoreboard.scroll()
    scoreboard.freeze()
    assert scoreboard.is_frozen


def test_operations_fail_after_end(scoreboard):
    scoreboard.register_team("alpha")
    scoreboard.end()

    assert scoreboard.has_ended
    with pytest.raises(CompetitionEndedError):
        scoreboard.register_team("beta")
    with pytest.raises(CompetitionEndedError):
        scoreboard.submit("alpha", "A", SubmissionStatus.ACCEPTED, 1)
    with pytest.raises(CompetitionEndedError):
        scoreboard.flush()
    with pytest.raises(CompetitionEndedError):
        scoreboard.end()


def test_start_records_duration():
    scoreboard = Scoreboard()
    assert scoreboard.duration is None
    scoreboard.start(180)
    assert scoreboard.duration == 180


def test_submit_keeps_status_as_text(scoreboard):
    scoreboard.register_team("alpha")
    scoreboard.submit("alpha", "A", "Memory_Limit_Exceed", 1)
    scoreboard.submit("alpha", "A", SubmissionStatus.ACCEPTED, 5)

    statuses = [submission.status for submission in scoreboard.get_team("alpha").submissions]
    assert statuses == ["Memory_Limit_Exceed", "Accepted"]
    assert all(type(status) is str for status in statuses)
    assert scoreboard.get_team("alpha").penalty == 25

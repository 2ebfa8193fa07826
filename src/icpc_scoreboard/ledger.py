import logging
from dataclasses import dataclass, field
from typing import Dict, List

from icpc_scoreboard.types import Submission

logger = logging.getLogger(__name__)

WRONG_SUBMISSION_PENALTY = 20


@dataclass
class TeamLedger:
    """Accumulated contest state of a single team."""
    name: str
    solved_count: int = 0
    penalty: int = 0
    wrong_submissions: Dict[str, int] = field(default_factory=dict)
    first_accepted_at: Dict[str, int] = field(default_factory=dict)
    # Sorted in descending order, one entry per solved problem
    solve_times: List[int] = field(default_factory=list)
    submissions: List[Submission] = field(default_factory=list)

    def is_solved(self, problem_name: str) -> bool:
        return problem_name in self.first_accepted_at

    def wrong_submissions_for(self, problem_name: str) -> int:
        return self.wrong_submissions.get(problem_name, 0)

    def apply_submission(self, submission: Submission) -> None:
        self.submissions.append(submission)
        problem_name = submission.problem_name

        if not submission.is_accepted:
            # Also counted after the problem was solved, which no longer affects the penalty
            self.wrong_submissions[problem_name] = self.wrong_submissions_for(problem_name) + 1
            return

        if self.is_solved(problem_name):
            logger.debug(f"Team {self.name} already solved {problem_name}, ignoring the acceptance")
            return

        problem_penalty = WRONG_SUBMISSION_PENALTY * self.wrong_submissions_for(problem_name) + submission.time
        self.first_accepted_at[problem_name] = submission.time
        self.penalty += problem_penalty
        self.solved_count += 1
        self.solve_times.append(submission.time)
        self.solve_times.sort(reverse=True)
        logger.debug(f"Team {self.name} solved {problem_name} at {submission.time} "
                     f"with a penalty of {problem_penalty} minutes")

import logging
import sys
from typing import Iterable, Optional, TextIO

import environ
import google.cloud.logging

from icpc_scoreboard import settings
from icpc_scoreboard.command_runner import ScoreboardRunner
from icpc_scoreboard.scoreboard import Scoreboard


def start(input_stream: Optional[Iterable[str]] = None, output_stream: Optional[TextIO] = None) -> None:
    logging.basicConfig(level=logging.INFO)
    logging.getLogger('icpc_scoreboard').setLevel(settings.get_log_level())
    if input_stream is None:
        input_stream = sys.stdin
    if output_stream is None:
        output_stream = sys.stdout

    runner = ScoreboardRunner(Scoreboard(), output_stream)
    runner.run(input_stream)


def main() -> None:
    environ.Env.read_env()
    if settings.use_cloud_logging():
        client = google.cloud.logging.Client()
        client.setup_logging()

    try:
        start()
    except KeyboardInterrupt:
        pass

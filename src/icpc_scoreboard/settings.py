import environ

env = environ.Env(
    SCOREBOARD_LOG_LEVEL=(str, "INFO"),
    USE_CLOUD_LOGGING=(bool, False),
)


def get_log_level() -> str:
    return env("SCOREBOARD_LOG_LEVEL").upper()


def use_cloud_logging() -> bool:
    return env("USE_CLOUD_LOGGING")

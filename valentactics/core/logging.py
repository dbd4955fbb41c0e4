"""로깅 설정"""

import logging

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 외부 SDK 로그는 WARNING 이상만
NOISY_LOGGERS = ("httpx", "httpcore", "google", "urllib3")


def setup_logging(level: str = "INFO") -> None:
    """루트 로거 설정. 알 수 없는 레벨 이름은 INFO."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

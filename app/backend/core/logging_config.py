import logging
import os
import sys


def setup_logging(level: str | int | None = None) -> None:
    """루트 로거에 stdout 핸들러 1개. LOG_LEVEL 환경변수로 레벨 조정."""
    logger = logging.getLogger()
    if logger.handlers:
        return  # 중복 설정 방지
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO").upper()
    logger.setLevel(level)
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s - %(message)s"
    ))
    logger.addHandler(h)
    # 요청마다 찍히는 SQL 은 기본으로 끈다
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

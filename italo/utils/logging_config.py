"""로깅 설정

라이브러리로 쓸 때는 호출하지 않으며 CLI 진입점에서만 초기화한다.
명령 결과는 stdout, 로그는 stderr로 분리한다.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# 패키지 접두어는 콘솔에서 생략 (italo.skill.catalog → skill.catalog)
_PACKAGE_PREFIX = "italo."

_LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[35m",
}
_RESET = "\033[0m"

# 요청마다 DEBUG를 쏟아내는 외부 로거
_QUIET_LOGGERS = {
    "aiohttp": logging.WARNING,
    "asyncio": logging.WARNING,
}


class ConsoleFormatter(logging.Formatter):
    """짧은 로거 이름 + 선택적 레벨 컬러"""

    def __init__(self, color: bool = False) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)-8s %(name)s │ %(message)s",
            datefmt="%H:%M:%S",
        )
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        # 같은 레코드를 파일 핸들러도 쓰므로 복사본만 수정
        record = logging.makeLogRecord(record.__dict__)
        if record.name.startswith(_PACKAGE_PREFIX):
            record.name = record.name[len(_PACKAGE_PREFIX):]
        if self.color:
            color = _LEVEL_COLORS.get(record.levelno, "")
            record.levelname = f"{color}{record.levelname:<8}{_RESET}"
        return super().format(record)


def _console_handler(stream: TextIO, color: bool) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setFormatter(ConsoleFormatter(color=color))
    return handler


def _file_handler(log_file: str | Path) -> logging.Handler:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    return handler


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str | Path] = None,
    color: Optional[bool] = None,
) -> logging.Logger:
    """루트 로거 초기화

    Args:
        level: DEBUG, INFO, WARNING, ERROR 중 하나 (대소문자 무시)
        log_file: 로그 파일 경로 (None이면 콘솔만)
        color: 컬러 출력 여부 (None이면 stderr가 TTY일 때만)

    Returns:
        설정된 루트 로거
    """
    name = level.upper()
    if name not in LEVELS:
        raise ValueError(f"알 수 없는 로그 레벨: {level!r}")

    root = logging.getLogger()
    root.setLevel(name)
    root.handlers.clear()

    if color is None:
        color = sys.stderr.isatty()
    root.addHandler(_console_handler(sys.stderr, color))
    if log_file:
        root.addHandler(_file_handler(log_file))

    for logger_name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(logger_name).setLevel(quiet_level)
    return root

# commands/types.py
# 명령 정의 / 실행 컨텍스트

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Optional, Tuple


@dataclass(frozen=True)
class CommandContext:
    """
    명령 핸들러 한 번 실행에 필요한 요청 단위 컨텍스트.

    :param text: 사용자가 보낸 원문
    :param token: 서비스 계정 Bearer 토큰
    :param now: 요청 기준 시각(UTC)
    :param correlation_id: 로그 추적용 ID
    :param calendar: list_events/create_event를 제공하는 캘린더 어댑터
    """

    text: str
    token: str
    now: datetime
    correlation_id: str
    calendar: Any


@dataclass(frozen=True)
class Command:
    """
    텍스트 매처와 핸들러의 쌍.

    match(text, now)는 파라미터 객체 또는 None만 반환하며 예외를 던지지 않는다.
    handler(ctx, params)는 사용자에게 보낼 답장 문자열을 반환한다.
    """

    id: str
    description: str
    examples: Tuple[str, ...]
    match: Callable[[str, datetime], Optional[Any]] = field(repr=False, compare=False)
    handler: Callable[[CommandContext, Any], str] = field(repr=False, compare=False)
    tags: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ResolvedCommand:
    command: Command
    params: Any

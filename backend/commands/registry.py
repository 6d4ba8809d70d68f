# commands/registry.py
# 명령 레지스트리: 등록 순서대로 매칭(먼저 맞는 명령이 이김)

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from commands.types import Command, ResolvedCommand
from routes.schedule_time import now_utc

logger = logging.getLogger(__name__)

HELP_HEADER = "지원 명령:"


class DuplicateCommandError(ValueError):
    pass


class CommandRegistry:
    """
    시작 시 한 번 만들어지는 불변 명령 목록.

    점수 계산이나 최장 일치 없이 등록 순서가 곧 우선순위다.
    겹치는 패턴은 감지하지 않으므로 구체적인 명령을 앞에 등록해야 한다.
    """

    def __init__(self, commands: Iterable[Command]):
        items: Tuple[Command, ...] = tuple(commands)
        seen = set()
        for c in items:
            if c.id in seen:
                raise DuplicateCommandError(f"duplicate command id: {c.id}")
            seen.add(c.id)
        self._commands = items

    @property
    def commands(self) -> Tuple[Command, ...]:
        return self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def resolve(self, text: str, now: Optional[datetime] = None) -> Optional[ResolvedCommand]:
        """
        text에 맞는 첫 번째 명령과 추출된 파라미터를 반환한다.

        :param text: 사용자 입력
        :type text: str
        :param now: 날짜 계산 기준 시각(없으면 현재 UTC)
        :type now: Optional[datetime]
        :return: ResolvedCommand 또는 None(매칭 없음)
        :rtype: Optional[ResolvedCommand]
        """

        now = now or now_utc()
        for command in self._commands:
            params = command.match(text, now)
            if params is not None:
                logger.debug("[Registry] %r -> %s", text, command.id)
                return ResolvedCommand(command=command, params=params)
        logger.debug("[Registry] %r -> none", text)
        return None

    def catalog(self) -> List[Dict[str, Any]]:
        return [
            {
                "id": c.id,
                "description": c.description,
                "examples": list(c.examples),
                "tags": list(c.tags),
            }
            for c in self._commands
        ]

    def help_text(self) -> str:
        lines = [f"- {c['description']}: {', '.join(c['examples'])}" for c in self.catalog()]
        return HELP_HEADER + "\n" + "\n".join(lines)

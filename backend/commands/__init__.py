from commands import create_event, list_events
from commands.registry import CommandRegistry

# 등록 순서 = 매칭 우선순위. 구조화된 패턴(일정 추가)을 키워드 매칭보다 먼저 둔다.
ALL_COMMANDS = [
    create_event.command,
    list_events.command,
]

REGISTRY = CommandRegistry(ALL_COMMANDS)

"""일정 추가 명령: '내일 3시 회의 추가', '오늘 14:30 치과 등록'.

형식: (오늘|내일) 시[:분] [시] 제목 (추가|등록)
분이 없으면 0분, 길이는 항상 60분.
"""

import re
from dataclasses import dataclass
from datetime import datetime

from commands.types import Command, CommandContext
from routes.schedule_time import add_minutes, at_kst, pretty_kst

DURATION_MINUTES = 60

_DAY_OFFSETS = {"오늘": 0, "내일": 1}

_PATTERN = re.compile(
    r"(오늘|내일)\s+([0-9]{1,2})(?::([0-9]{2}))?\s*(시)?\s*(.+?)\s*(추가|등록)")


@dataclass(frozen=True)
class CreateParams:
    title: str
    start: datetime
    end: datetime


def match(text, now):
    m = _PATTERN.fullmatch(text)
    if not m:
        return None

    title = m.group(5).strip()
    if not title:
        return None

    hour = int(m.group(2))
    minute = int(m.group(3)) if m.group(3) else 0
    start = at_kst(now, _DAY_OFFSETS[m.group(1)], hour, minute)
    return CreateParams(title, start, add_minutes(start, DURATION_MINUTES))


def handle(ctx: CommandContext, p: CreateParams) -> str:
    created = ctx.calendar.create_event(p.title, p.start, p.end)
    title = (created or {}).get("summary") or p.title
    return f"추가 완료: {title} ({pretty_kst(p.start)})"


command = Command(
    id="create-event",
    description="간단 문장으로 일정 추가",
    examples=("내일 3시 회의 추가", "오늘 14:30 치과 추가"),
    tags=("calendar", "create"),
    match=match,
    handler=handle,
)

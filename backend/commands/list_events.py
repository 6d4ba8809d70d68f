"""일정 조회 명령: '오늘 일정', '내일 일정 알려줘', '다음 일정 보여줘'."""

from dataclasses import dataclass
from datetime import datetime

from commands.types import Command, CommandContext
from routes.schedule_render import format_list, format_next
from routes.schedule_time import add_days, day_range_kst

TODAY = "오늘"
TOMORROW = "내일"
NEXT = "다음"

_SCHEDULE_WORD = "일정"


@dataclass(frozen=True)
class ListParams:
    label: str
    start: datetime
    end: datetime
    max_results: int


def match(text, now):
    if _SCHEDULE_WORD not in text:
        return None

    if TODAY in text:
        start, end = day_range_kst(now, 0)
        return ListParams(TODAY, start, end, 20)
    if TOMORROW in text:
        start, end = day_range_kst(now, 1)
        return ListParams(TOMORROW, start, end, 20)
    if NEXT in text:
        return ListParams(NEXT, now, add_days(now, 7), 1)
    return None


def handle(ctx: CommandContext, p: ListParams) -> str:
    events = ctx.calendar.list_events(p.start, p.end, p.max_results)
    if p.label == NEXT:
        return format_next(events)
    return format_list(p.label, events)


command = Command(
    id="list-events",
    description="오늘/내일/다음 일정 조회",
    examples=("오늘 일정 알려줘", "내일 일정", "다음 일정 보여줘"),
    tags=("calendar", "list"),
    match=match,
    handler=handle,
)

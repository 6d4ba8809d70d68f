# routes/schedule_render.py
# 렌더 / 서식

from typing import Any, Dict, List

from routes.schedule_time import parse_rfc3339, pretty_kst

# 목록 응답에 보여줄 최대 줄 수(건수 헤더는 실제 총 개수)
MAX_LINES = 10

NO_TITLE = "(제목없음)"
NO_UPCOMING = "앞으로 7일 내 일정이 없습니다."


def format_one(e: Dict[str, Any]) -> str:
    """
    이벤트 하나를 한 줄로 만든다.
    종일 이벤트는 '(종일)', 시간 지정 이벤트는 KST 시작 시각을 붙인다.

    :param e: Google 이벤트 객체
    :type e: Dict[str, Any]
    :return: '제목 (YYYY-MM-DD HH:MM)' / '제목 (종일)' / '제목'
    :rtype: str
    """

    e = e or {}
    title = e.get("summary") or NO_TITLE
    start = e.get("start") or {}

    # 종일 이벤트(date-only)
    if start.get("date"):
        return f"{title} (종일)"

    dt = parse_rfc3339(start.get("dateTime"))
    if dt is None:
        return title
    return f"{title} ({pretty_kst(dt)})"


def format_list(label: str, events: List[Dict[str, Any]]) -> str:
    if not events:
        return f"{label} 일정 없습니다."

    lines = [f"- {format_one(e)}" for e in events[:MAX_LINES]]
    return f"{label} 일정 {len(events)}건:\n" + "\n".join(lines)


def format_next(events: List[Dict[str, Any]]) -> str:
    if not events:
        return NO_UPCOMING
    return f"다음 일정: {format_one(events[0])}"

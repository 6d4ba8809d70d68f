# routes/schedule_time.py
# 시간 계산 / 포맷 (KST 고정 오프셋)
#
# '오늘/내일' 계산은 모두 UTC+9 고정 달력 기준이며 서머타임은 없다.
# 반환되는 시각은 모두 UTC 기준 aware datetime이다.

from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

KST = timezone(timedelta(hours=9))


def now_utc() -> datetime:
    """
    현재 시각(UTC, aware)을 반환한다.

    :return: UTC datetime
    :rtype: datetime
    """

    return datetime.now(timezone.utc)


def start_of_day_kst(now: datetime) -> datetime:
    """
    now가 속한 KST 날짜의 자정을 UTC 시각으로 반환한다.

    :param now: 기준 시각(aware)
    :type now: datetime
    :return: KST 00:00에 해당하는 UTC datetime
    :rtype: datetime
    """

    local = now.astimezone(KST)
    midnight = local.replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight.astimezone(timezone.utc)


def add_days(dt: datetime, days: int) -> datetime:
    return dt + timedelta(days=days)


def add_minutes(dt: datetime, minutes: int) -> datetime:
    return dt + timedelta(minutes=minutes)


def day_range_kst(now: datetime, day_offset: int = 0) -> Tuple[datetime, datetime]:
    """
    KST 기준 하루 구간 [자정, 다음 자정)을 반환한다.

    :param now: 기준 시각
    :type now: datetime
    :param day_offset: 0=오늘, 1=내일
    :type day_offset: int
    :return: (start, end) UTC datetime 튜플
    :rtype: Tuple[datetime, datetime]
    """

    start = add_days(start_of_day_kst(now), day_offset)
    return start, add_days(start, 1)


def at_kst(now: datetime, day_offset: int, hour: int, minute: int = 0) -> datetime:
    """
    KST 자정 + day_offset일 + hour시간 + minute분.
    24시 이상도 단순 더하기로 다음 날로 넘어간다.
    """

    base = add_days(start_of_day_kst(now), day_offset)
    return base + timedelta(hours=hour, minutes=minute)


def pretty_kst(dt: datetime) -> str:
    """
    'YYYY-MM-DD HH:MM' (KST, 분 단위 절삭) 문자열로 만든다.

    :param dt: aware datetime
    :type dt: datetime
    :return: 사람이 읽는 시각 문자열
    :rtype: str
    """

    return dt.astimezone(KST).strftime("%Y-%m-%d %H:%M")


def rfc3339(dt: datetime) -> str:
    """
    datetime을 RFC3339 UTC(Z) 문자열로 반환한다. (timeMin/timeMax/dateTime 용)
    """

    return (
        dt.astimezone(timezone.utc)
        .replace(microsecond=0)
        .isoformat()
        .replace("+00:00", "Z")
    )


def parse_rfc3339(s: Optional[str]) -> Optional[datetime]:
    """
    구글 캘린더 dateTime 문자열을 aware datetime으로 파싱한다.
    타임존이 없으면 UTC로 간주하고, 파싱 실패 시 None.

    :param s: RFC3339 문자열('Z' 또는 오프셋 포함)
    :type s: Optional[str]
    :return: aware datetime 또는 None
    :rtype: Optional[datetime]
    """

    if not s:
        return None
    try:
        # 'Z'를 +00:00으로 바꾼 뒤 파싱
        dt = datetime.fromisoformat(s.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt

# Google Calendar API 래퍼 모듈
# - 서비스 계정 Bearer 토큰으로 이벤트 조회/생성
# - 명령 핸들러는 GoogleCalendar 객체를 통해서만 이 함수들을 호출함
import logging, os, requests
from datetime import datetime
from typing import Optional, List, Dict, Any
from urllib.parse import quote

from routes.schedule_time import rfc3339

logger = logging.getLogger(__name__)

GCAL_BASE = "https://www.googleapis.com/calendar/v3"
TZ_NAME = "Asia/Seoul"
# 원래는 타임아웃이 없었음. 느린 응답이 요청을 무한정 붙잡지 않도록 명시함
GCAL_TIMEOUT = float(os.getenv("GCAL_TIMEOUT", "10"))


class CalendarApiError(Exception):
    """
    Google Calendar API가 실패 응답을 줬거나 연결 자체가 실패함.

    :param operation: 'listEvents' / 'createEvent'
    :param status: HTTP 상태코드(연결 실패 시 None)
    :param body: 응답 본문(또는 예외 메시지)
    """

    def __init__(self, operation: str, status: Optional[int], body: str = ""):
        self.operation = operation
        self.status = status
        self.body = body
        super().__init__(f"{operation} {status if status is not None else 'unreachable'}")


def _cid(s: str) -> str:
    """
    캘린더 ID를 URL 경로 세그먼트로 안전하게 인코딩한다.

    :param s: 캘린더 ID
    :type s: str
    :return: 인코딩된 캘린더 ID
    :rtype: str
    """

    return quote(s, safe='')


def _auth_header(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def gcal_list_events(
    token: str,
    calendar_id: str,
    time_min: datetime,
    time_max: datetime,
    max_results: int = 20,
) -> List[Dict[str, Any]]:
    """
    단일 캘린더의 이벤트를 조회한다. 단일 인스턴스 전개(singleEvents) + 시작시간 정렬

    :param token: Bearer 액세스 토큰
    :type token: str
    :param calendar_id: 대상 캘린더 ID
    :type calendar_id: str
    :param time_min: 하한(포함)
    :type time_min: datetime
    :param time_max: 상한(제외)
    :type time_max: datetime
    :param max_results: 최대 개수
    :type max_results: int
    :return: 이벤트 리스트
    :rtype: List[Dict[str, Any]]
    :raises CalendarApiError: Google API 오류
    """

    params: Dict[str, Any] = {
        "singleEvents": "true",
        "orderBy": "startTime",
        "timeMin": rfc3339(time_min),
        "timeMax": rfc3339(time_max),
        "maxResults": str(max_results),
    }
    try:
        r = requests.get(
            f"{GCAL_BASE}/calendars/{_cid(calendar_id)}/events",
            headers=_auth_header(token),
            params=params,
            timeout=GCAL_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error("[GCAL] list events unreachable cid=%s | %s", calendar_id, e)
        raise CalendarApiError("listEvents", None, str(e)) from e

    if not r.ok:
        logger.error("[GCAL] List events failed(%s) cid=%s | %s", r.status_code, calendar_id, r.text)
        raise CalendarApiError("listEvents", r.status_code, r.text)

    items = r.json().get("items") or []
    logger.info("[GCAL] %s -> %d items", calendar_id, len(items))
    return items


def gcal_insert_event(
    token: str,
    calendar_id: str,
    title: str,
    start: datetime,
    end: datetime,
) -> Dict[str, Any]:
    """
    새 이벤트를 생성한다.

    :param token: Bearer 액세스 토큰
    :type token: str
    :param calendar_id: 대상 캘린더 ID
    :type calendar_id: str
    :param title: 일정 제목(summary)
    :type title: str
    :param start: 시작 시각
    :type start: datetime
    :param end: 종료 시각
    :type end: datetime
    :return: 생성된 이벤트
    :rtype: Dict[str, Any]
    :raises CalendarApiError: Google API 오류
    """

    payload = {
        "summary": title,
        "start": {"dateTime": rfc3339(start), "timeZone": TZ_NAME},
        "end": {"dateTime": rfc3339(end), "timeZone": TZ_NAME},
    }
    try:
        r = requests.post(
            f"{GCAL_BASE}/calendars/{_cid(calendar_id)}/events",
            headers=_auth_header(token),
            json=payload,
            timeout=GCAL_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error("[GCAL] insert event unreachable cid=%s | %s", calendar_id, e)
        raise CalendarApiError("createEvent", None, str(e)) from e

    if not r.ok:
        logger.error("[GCAL] Insert event failed(%s) cid=%s | %s", r.status_code, calendar_id, r.text)
        raise CalendarApiError("createEvent", r.status_code, r.text)
    return r.json()


class GoogleCalendar:
    """
    토큰과 캘린더 ID를 묶어 명령 핸들러에 넘기는 얇은 어댑터.
    요청마다 새로 만들어지며 공유되지 않는다.
    """

    def __init__(self, calendar_id: str, token: str):
        self.calendar_id = calendar_id
        self._token = token

    def list_events(self, time_min: datetime, time_max: datetime, max_results: int = 20) -> List[Dict[str, Any]]:
        return gcal_list_events(self._token, self.calendar_id, time_min, time_max, max_results)

    def create_event(self, title: str, start: datetime, end: datetime) -> Dict[str, Any]:
        return gcal_insert_event(self._token, self.calendar_id, title, start, end)

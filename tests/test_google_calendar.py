"""Google Calendar REST wrappers and event rendering."""

from datetime import datetime, timezone

import pytest
import requests

from routes import google_calendar as gcal
from routes.google_calendar import CalendarApiError, GoogleCalendar
from routes.schedule_render import format_list, format_next, format_one

UTC = timezone.utc
T0 = datetime(2026, 10, 18, 15, 0, tzinfo=UTC)
T1 = datetime(2026, 10, 19, 15, 0, tzinfo=UTC)


class TestListEvents:
    def test_request_shape(self, monkeypatch, fake_response):
        seen = {}

        def fake_get(url, headers=None, params=None, timeout=None):
            seen.update(url=url, headers=headers, params=params, timeout=timeout)
            return fake_response(200, {"items": [{"summary": "a"}]})

        monkeypatch.setattr(gcal.requests, "get", fake_get)
        items = GoogleCalendar("team@group.calendar.google.com", "tok").list_events(T0, T1, 20)

        assert items == [{"summary": "a"}]
        assert seen["url"] == f"{gcal.GCAL_BASE}/calendars/team%40group.calendar.google.com/events"
        assert seen["headers"] == {"Authorization": "Bearer tok"}
        assert seen["params"] == {
            "singleEvents": "true",
            "orderBy": "startTime",
            "timeMin": "2026-10-18T15:00:00Z",
            "timeMax": "2026-10-19T15:00:00Z",
            "maxResults": "20",
        }
        assert seen["timeout"] == gcal.GCAL_TIMEOUT

    def test_missing_items(self, monkeypatch, fake_response):
        monkeypatch.setattr(gcal.requests, "get", lambda *a, **kw: fake_response(200, {}))
        assert GoogleCalendar("primary", "tok").list_events(T0, T1) == []

    def test_error_status(self, monkeypatch, fake_response):
        monkeypatch.setattr(gcal.requests, "get", lambda *a, **kw: fake_response(403, {"error": "forbidden"}))
        with pytest.raises(CalendarApiError) as exc:
            GoogleCalendar("primary", "tok").list_events(T0, T1)
        assert exc.value.operation == "listEvents"
        assert exc.value.status == 403
        assert str(exc.value) == "listEvents 403"

    def test_unreachable(self, monkeypatch):
        def boom(*a, **kw):
            raise requests.Timeout("slow")

        monkeypatch.setattr(gcal.requests, "get", boom)
        with pytest.raises(CalendarApiError) as exc:
            GoogleCalendar("primary", "tok").list_events(T0, T1)
        assert exc.value.status is None


class TestInsertEvent:
    def test_payload(self, monkeypatch, fake_response):
        seen = {}

        def fake_post(url, headers=None, json=None, timeout=None):
            seen.update(url=url, json=json)
            return fake_response(200, {"summary": json["summary"], "id": "e1"})

        monkeypatch.setattr(gcal.requests, "post", fake_post)
        created = GoogleCalendar("primary", "tok").create_event("회의", T0, T1)

        assert created["id"] == "e1"
        assert seen["url"].endswith("/calendars/primary/events")
        assert seen["json"] == {
            "summary": "회의",
            "start": {"dateTime": "2026-10-18T15:00:00Z", "timeZone": "Asia/Seoul"},
            "end": {"dateTime": "2026-10-19T15:00:00Z", "timeZone": "Asia/Seoul"},
        }

    def test_error_status(self, monkeypatch, fake_response):
        monkeypatch.setattr(gcal.requests, "post", lambda *a, **kw: fake_response(500, None, text="oops"))
        with pytest.raises(CalendarApiError) as exc:
            GoogleCalendar("primary", "tok").create_event("회의", T0, T1)
        assert (exc.value.operation, exc.value.status, exc.value.body) == ("createEvent", 500, "oops")


class TestRender:
    def test_timed(self):
        assert format_one({"summary": "회의", "start": {"dateTime": "2026-10-19T05:30:45Z"}}) == "회의 (2026-10-19 14:30)"

    def test_all_day(self):
        assert format_one({"summary": "휴가", "start": {"date": "2026-10-19"}}) == "휴가 (종일)"

    def test_no_title_no_start(self):
        assert format_one({}) == "(제목없음)"
        assert format_one(None) == "(제목없음)"

    def test_list_and_next(self):
        assert format_list("오늘", []) == "오늘 일정 없습니다."
        assert format_next([]) == "앞으로 7일 내 일정이 없습니다."
        assert format_list("내일", [{"summary": "a", "start": {"date": "2026-10-20"}}]) == "내일 일정 1건:\n- a (종일)"

# 자연어 명령 라우터.
# 텍스트 -> 명령 매칭 -> 서비스 계정 토큰 발급 -> 명령 핸들러 실행 -> 답장
# 어떤 단계에서 실패해도 HTTP 오류 대신 {"reply": "오류: ..."} 로 답한다.
import logging, secrets, uuid
from typing import Any, Callable, Dict, List

from fastapi import APIRouter, Depends, Header
from fastapi.responses import PlainTextResponse

from commands import REGISTRY
from commands.registry import CommandRegistry
from commands.types import CommandContext
from routes.google_calendar import CalendarApiError, GoogleCalendar
from routes.schedule_time import now_utc
from routes.service_account import (
    KeyImportError,
    SigningError,
    TokenCache,
    TokenExchangeError,
    issue_token,
)
from schemas.command_schema import CommandIn, CommandInfo, CommandOut
from settings import Settings, get_settings

logger = logging.getLogger(__name__)
router = APIRouter(tags=["command"])

EMPTY_TEXT_REPLY = "명령이 비어 있습니다."
AUTH_FAILED_REPLY = "오류: 서비스 계정 인증에 실패했습니다."
GENERIC_FAILED_REPLY = "오류: 요청을 처리하는 중 문제가 발생했습니다."
# 토큰 엔드포인트 응답 본문은 진단용으로 앞부분만 노출
DETAIL_LIMIT = 200

# GCAL_TOKEN_CACHE=1 일 때만 사용
_TOKEN_CACHE = TokenCache()


def get_registry() -> CommandRegistry:
    return REGISTRY


def get_token_issuer(settings: Settings = Depends(get_settings)) -> Callable[[], str]:
    """
    현재 설정으로 Bearer 토큰을 발급하는 함수를 돌려준다.
    캐시가 꺼져 있으면 호출할 때마다 새로 서명/교환한다.
    """

    cache = _TOKEN_CACHE if settings.token_cache else None

    def _issue() -> str:
        return issue_token(
            settings.sa_email,
            settings.scope,
            settings.audience,
            settings.sa_private_key.get_secret_value(),
            cache=cache,
        )

    return _issue


def get_calendar_factory() -> Callable[[str, str], Any]:
    return GoogleCalendar


def is_authorized(settings: Settings, api_key: str) -> bool:
    expected = settings.api_key.get_secret_value()
    return bool(expected) and secrets.compare_digest(api_key.encode("utf-8"), expected.encode("utf-8"))


def _status(status) -> str:
    # 연결 자체가 실패하면 상태코드가 없음
    return str(status) if status is not None else "unreachable"


def _error_reply(e: Exception) -> str:
    """
    실패 종류별 사용자 답장. 개인키 내용은 어떤 경우에도 포함하지 않는다.
    """

    if isinstance(e, (KeyImportError, SigningError)):
        return AUTH_FAILED_REPLY
    if isinstance(e, TokenExchangeError):
        detail = (e.body or "").strip()[:DETAIL_LIMIT]
        return f"오류: 토큰 발급 실패 ({_status(e.status)}) {detail}".rstrip()
    if isinstance(e, CalendarApiError):
        return f"오류: {e.operation} {_status(e.status)}"
    return GENERIC_FAILED_REPLY


@router.post("/command", response_model=CommandOut)
def command(
    body: CommandIn,
    x_api_key: str = Header("", alias="X-API-Key"),
    settings: Settings = Depends(get_settings),
    registry: CommandRegistry = Depends(get_registry),
    token_issuer: Callable[[], str] = Depends(get_token_issuer),
    calendar_factory: Callable[[str, str], Any] = Depends(get_calendar_factory),
):
    """
    자연어 명령 하나를 처리한다.

    :param body: {"text": "..."}
    :type body: CommandIn
    :param x_api_key: X-API-Key 헤더
    :type x_api_key: str
    :return: {"reply": "..."} / 인증 실패 시 401
    :rtype: CommandOut
    """

    if not is_authorized(settings, x_api_key):
        return PlainTextResponse("Unauthorized", status_code=401)

    text = str(body.text or "").strip()
    if not text:
        return CommandOut(reply=EMPTY_TEXT_REPLY)

    correlation_id = str(uuid.uuid4())
    now = now_utc()

    resolved = registry.resolve(text, now)
    if resolved is None:
        logger.info("[Command] cid=%s | no match: %r", correlation_id, text)
        return CommandOut(reply=registry.help_text())

    logger.info("[Command] cid=%s | %r -> %s", correlation_id, text, resolved.command.id)
    try:
        token = token_issuer()
        ctx = CommandContext(
            text=text,
            token=token,
            now=now,
            correlation_id=correlation_id,
            calendar=calendar_factory(settings.calendar_id, token),
        )
        reply = resolved.command.handler(ctx, resolved.params)
    except (KeyImportError, SigningError, TokenExchangeError, CalendarApiError) as e:
        logger.error("[Command] cid=%s | %s failed: %s", correlation_id, resolved.command.id, type(e).__name__)
        return CommandOut(reply=_error_reply(e))
    except Exception:
        logger.exception("[Command] cid=%s | %s failed", correlation_id, resolved.command.id)
        return CommandOut(reply=GENERIC_FAILED_REPLY)

    return CommandOut(reply=reply)


@router.get("/commands", response_model=List[CommandInfo])
def list_commands(
    x_api_key: str = Header("", alias="X-API-Key"),
    settings: Settings = Depends(get_settings),
    registry: CommandRegistry = Depends(get_registry),
):
    """
    등록된 명령 카탈로그(등록 순서 유지)를 반환한다.
    """

    if not is_authorized(settings, x_api_key):
        return PlainTextResponse("Unauthorized", status_code=401)
    catalog: List[Dict[str, Any]] = registry.catalog()
    return catalog

# settings.py
# 환경 변수 기반 설정 로딩

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, SecretStr

load_dotenv()

# 서비스 계정 토큰 요청 시 사용할 기본 스코프/대상
DEFAULT_SCOPE = "https://www.googleapis.com/auth/calendar"
DEFAULT_AUDIENCE = "https://oauth2.googleapis.com/token"


class Settings(BaseModel):
    """
    프로세스 단위 설정. 시작 시 한 번 만들어지고 이후 변경되지 않는다.
    """

    api_key: SecretStr = SecretStr("")
    sa_email: str = ""
    sa_private_key: SecretStr = SecretStr("")
    calendar_id: str = "primary"
    scope: str = DEFAULT_SCOPE
    audience: str = DEFAULT_AUDIENCE
    token_cache: bool = False
    log_level: str = "INFO"


def _flag(v: str) -> bool:
    return v.strip().lower() in ("1", "true", "yes", "on")


def load_settings() -> Settings:
    """
    환경 변수에서 설정을 읽어 Settings를 만든다.

    :return: 설정 객체
    :rtype: Settings
    """

    return Settings(
        api_key=SecretStr(os.getenv("API_KEY", "")),
        sa_email=os.getenv("GCAL_SA_EMAIL", ""),
        sa_private_key=SecretStr(os.getenv("GCAL_SA_PRIVATE_KEY", "")),
        calendar_id=os.getenv("GCAL_CALENDAR_ID", "primary"),
        scope=os.getenv("GCAL_SCOPE", DEFAULT_SCOPE),
        token_cache=_flag(os.getenv("GCAL_TOKEN_CACHE", "0")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # FastAPI 의존성으로 주입됨(테스트에서는 dependency_overrides로 교체)
    return load_settings()

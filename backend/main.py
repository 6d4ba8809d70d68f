import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from routes.command import router as command_router, EMPTY_TEXT_REPLY, is_authorized
from settings import get_settings

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI()

app.include_router(command_router)


@app.exception_handler(RequestValidationError)
async def invalid_body(request: Request, exc: RequestValidationError):
    # 본문이 JSON이 아니거나 형식이 틀리면 빈 명령으로 취급함
    settings = app.dependency_overrides.get(get_settings, get_settings)()
    if not is_authorized(settings, request.headers.get("X-API-Key", "")):
        return PlainTextResponse("Unauthorized", status_code=401)
    return JSONResponse({"reply": EMPTY_TEXT_REPLY})


@app.get("/health")
def health():
    return {"ok": True}

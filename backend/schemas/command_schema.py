# schemas/command_schema.py
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


class CommandIn(BaseModel):
    text: Optional[str] = None

    @field_validator("text", mode="before")
    @classmethod
    def _to_text(cls, v):
        # 숫자 등 문자열이 아닌 값도 문자열로 받아 명령 매칭에 넘김
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, bool):
            return "true" if v else "false"
        return str(v)


class CommandOut(BaseModel):
    reply: str


class CommandInfo(BaseModel):
    id: str
    description: str
    examples: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)

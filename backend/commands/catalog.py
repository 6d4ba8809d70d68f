# commands/catalog.py
# 등록된 명령 목록을 docs/COMMANDS.md 표로 생성
#
# 사용법: (backend 디렉터리에서) python -m commands.catalog [출력경로]

import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from commands import REGISTRY

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path(__file__).resolve().parents[2] / "docs" / "COMMANDS.md"


def render_catalog_markdown(catalog: List[Dict[str, Any]]) -> str:
    """
    catalog() 결과를 마크다운 표로 만든다.

    :param catalog: [{id, description, examples, tags}, ...]
    :type catalog: List[Dict[str, Any]]
    :return: 마크다운 문자열
    :rtype: str
    """

    lines = [
        "# Command Catalog",
        "",
        "자동 생성된 명령어 목록입니다. (python -m commands.catalog)",
        "",
        "| ID | Description | Examples | Tags |",
        "| --- | --- | --- | --- |",
    ]
    for c in catalog:
        examples = "<br/>".join(c["examples"])
        tags = ", ".join(c["tags"])
        lines.append(f"| {c['id']} | {c['description']} | {examples} | {tags} |")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> Path:
    argv = sys.argv[1:] if argv is None else argv
    out = Path(argv[0]) if argv else DEFAULT_OUTPUT
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_catalog_markdown(REGISTRY.catalog()), encoding="utf-8")
    logger.info("[Catalog] generated %s", out)
    print(f"Generated {out}")
    return out


if __name__ == "__main__":
    main()

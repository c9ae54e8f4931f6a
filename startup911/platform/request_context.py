import re
import uuid
from contextvars import ContextVar, Token
from typing import Optional

_request_id_ctx: ContextVar[Optional[str]] = ContextVar("startup911_request_id", default=None)

# Client-supplied ids are echoed into logs and headers, so keep them short and printable
_REQUEST_ID_RE = re.compile(r"[A-Za-z0-9._:-]{1,64}")


def normalize_request_id(raw: Optional[str]) -> str:
    """Return ``raw`` when it is a usable request id, otherwise a fresh uuid4."""
    candidate = (raw or "").strip()
    if _REQUEST_ID_RE.fullmatch(candidate):
        return candidate
    return str(uuid.uuid4())


def set_request_id(request_id: str) -> Token:
    return _request_id_ctx.set(request_id)


def reset_request_id(token: Token) -> None:
    _request_id_ctx.reset(token)


def get_request_id() -> Optional[str]:
    return _request_id_ctx.get()

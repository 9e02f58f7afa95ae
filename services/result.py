"""Success/error pair returned by every remote call.

Views never see backend exceptions: `remote_call` turns them into
`ApiResult(error=...)` after logging, and the page decides whether to show a
banner or a toast. There is no retry.
"""
from __future__ import annotations
import functools
from dataclasses import dataclass
from typing import Any, Callable, Optional

from core.logging import get_logger

logger = get_logger(__name__)

NOT_CONFIGURED_MESSAGE = "后端未配置：请设置 SUPABASE_URL 和 SUPABASE_ANON_KEY"


@dataclass
class ApiResult:
    data: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def error_message(exc: BaseException) -> str:
    # postgrest.APIError and the auth errors both carry a `message` attribute
    msg = getattr(exc, 'message', None)
    if isinstance(msg, str) and msg:
        return msg
    return str(exc) or exc.__class__.__name__


def remote_call(operation: str) -> Callable[[Callable[..., Any]], Callable[..., ApiResult]]:
    """Wrap a `fn(client, ...)` data-access function into an ApiResult producer."""

    def decorator(func: Callable[..., Any]) -> Callable[..., ApiResult]:
        @functools.wraps(func)
        def wrapper(client, *args, **kwargs) -> ApiResult:
            if client is None:
                logger.warning("Remote call skipped, no client", operation=operation)
                return ApiResult(error=NOT_CONFIGURED_MESSAGE)
            try:
                data = func(client, *args, **kwargs)
            except Exception as exc:
                logger.error("Remote call failed", operation=operation,
                             error=error_message(exc), error_type=exc.__class__.__name__)
                return ApiResult(error=error_message(exc))
            logger.debug("Remote call ok", operation=operation)
            return ApiResult(data=data)

        return wrapper

    return decorator

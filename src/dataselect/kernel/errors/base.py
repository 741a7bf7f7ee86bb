"""BaseError – root of every error raised by dataselect.

The selection pipeline itself is total; these errors come from the layers
around it: resolving a resource kind, validating a secret before it is
created, loading settings.
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """Error carrying a stable ``code`` and a JSON-ready ``detail`` payload.

    Args:
        message: Text shown to operators and API clients.
        code: Stable slug for clients to branch on; ``default_code`` if omitted.
        detail: Context such as the resource kind or setting involved.
        cause: Lower-level exception, also chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def to_dict(self) -> dict[str, Any]:
        """Error body for a list endpoint or a structured log event."""
        body: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            body["cause"] = repr(self.cause)
        return body

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code!r}, {self.message!r})"


__all__ = ["BaseError"]

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Protocol, TypeAlias, Union

from fastapi import APIRouter, Request
from starlette.responses import Response

CallNext: TypeAlias = Callable[[Request], Awaitable[Response]]
RequestMiddleware: TypeAlias = Callable[[Request, CallNext], Awaitable[Response]]
ErrorHandlerFunc: TypeAlias = Callable[[Request, Exception], Awaitable[Response]]
ErrorKey: TypeAlias = Union[int, type[Exception]]


class ServiceDescriptor(Protocol):
    """A router mounted under a URL path prefix."""

    path: str
    router: APIRouter


@dataclass(frozen=True)
class ErrorHandler:
    """An error-handling stage and the exception classes (or status codes) it receives."""

    handler: ErrorHandlerFunc
    exception_classes: tuple[ErrorKey, ...] = (Exception,)

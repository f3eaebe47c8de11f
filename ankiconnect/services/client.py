"""Клиентские вызовы к AnkiConnect."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .. import config
from ..errors import AnkiConnectError, ResultDecodeError, ServerError, TransportError
from ..schemas import RequestEnvelope, ResponseEnvelope
from ..schemas._decoding import format_error_from

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def _normalize_params(params: Any) -> Optional[Dict[str, Any]]:
    if params is None:
        return None
    if isinstance(params, BaseModel):
        return params.model_dump(by_alias=True, exclude_none=True)
    if isinstance(params, Mapping):
        return dict(params)
    raise TypeError("params must be a mapping of argument names to values or a Pydantic model")


class Client:
    """Транспорт AnkiConnect: один эндпоинт, один POST на вызов.

    Если `http_client` передан снаружи, клиент им только пользуется и не
    закрывает его в `close()`. Таймаут в этом случае задаётся самим
    `http_client`, поэтому передавать ещё и `timeout` нельзя.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        *,
        timeout: Optional[float] = None,
        version: int = config.API_VERSION,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        if isinstance(version, bool) or not isinstance(version, int):
            raise TypeError("version must be an integer")
        if http_client is not None and timeout is not None:
            raise TypeError(
                "timeout cannot be combined with http_client; configure the http_client instead"
            )

        self.url = url or config.ANKI_URL
        self.version = version
        if http_client is None:
            self._http = httpx.Client(
                timeout=timeout if timeout is not None else config.ANKI_TIMEOUT
            )
            self._owns_http = True
        else:
            self._http = http_client
            self._owns_http = False

    def invoke(self, action: str, params: Any = None, result_type: Any = Any) -> Any:
        """Выполнить RPC-вызов AnkiConnect и разобрать `result` в `result_type`.

        Ошибки сети и неразборчивые ответы превращаются в `TransportError`,
        непустое поле `error` в `ServerError`, а несоответствие результата
        типу в `ResultDecodeError`.
        """

        if not isinstance(action, str):
            raise TypeError("action must be a string")
        trimmed_action = action.strip()
        if not trimmed_action:
            raise ValueError("action must be a non-empty string")

        request = RequestEnvelope(
            action=trimmed_action,
            version=self.version,
            params=_normalize_params(params),
        )
        logger.debug("AnkiConnect call %s -> %s", trimmed_action, self.url)

        try:
            response = self._http.post(self.url, json=request.to_payload())
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("AnkiConnect call %s failed: %s", trimmed_action, exc)
            raise TransportError() from exc

        try:
            envelope = ResponseEnvelope.model_validate(body)
        except ValidationError as exc:
            logger.warning("AnkiConnect call %s returned a malformed envelope: %r", trimmed_action, body)
            raise TransportError() from exc

        if envelope.error is not None:
            logger.debug("AnkiConnect call %s rejected: %s", trimmed_action, envelope.error)
            raise ServerError(envelope.error)

        if result_type is Any:
            return envelope.result

        try:
            return _adapter(result_type).validate_python(envelope.result)
        except ValidationError as exc:
            detail = str(format_error_from(exc))
            logger.warning("AnkiConnect call %s: cannot decode result: %s", trimmed_action, detail)
            raise ResultDecodeError(detail) from exc

    def is_responsive(self) -> bool:
        """Проверить, что AnkiConnect доступен и поддерживает нужную версию протокола."""

        try:
            server_version = self.invoke("version", result_type=int)
        except AnkiConnectError:
            return False
        return server_version >= config.API_VERSION

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


__all__ = ["Client"]

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from clients.rental_admin_sdk.config import SDKConfig, normalize_language
from clients.rental_admin_sdk.errors import ApiError

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(
        self,
        config: SDKConfig | None = None,
        client: httpx.Client | None = None,
        language: str | None = None,
    ) -> None:
        self.config = config or SDKConfig.from_env()
        self._client = client or httpx.Client(
            base_url=self.config.base_url,
            timeout=self.config.timeout_seconds,
            verify=self.config.verify_ssl,
        )
        self.language = normalize_language(language or self.config.language)
        self._retry_max_attempts = max(1, self.config.retry_max_attempts)
        self._retry_backoff_ms = max(0, self.config.retry_backoff_ms)

    def set_language(self, language: str) -> None:
        self.language = normalize_language(language)

    def request(
        self,
        method: str,
        path: str,
        json_body: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        params: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        request_headers = {"accept-language": self.language, "Content-Type": "application/json"}
        request_headers.update(headers or {})

        normalized_path = path if path.startswith("/") else f"/{path}"
        allow_retry = method.upper() == "GET"

        for attempt in range(1, self._retry_max_attempts + 1):
            try:
                response = self._client.request(
                    method=method,
                    url=normalized_path,
                    json=json_body,
                    headers=request_headers,
                    params=params,
                )
            except httpx.TimeoutException as exc:
                if (not allow_retry) or attempt >= self._retry_max_attempts:
                    raise ApiError(
                        code="TIMEOUT_ERROR",
                        message="The rental API did not answer in time.",
                        details=str(exc),
                    ) from exc
                self._backoff(attempt, method, normalized_path)
                continue
            except httpx.TransportError as exc:
                if (not allow_retry) or attempt >= self._retry_max_attempts:
                    raise ApiError(
                        code="NETWORK_ERROR",
                        message="Could not reach the rental API.",
                        details=str(exc),
                    ) from exc
                self._backoff(attempt, method, normalized_path)
                continue

            if response.status_code >= 400:
                error = ApiError.from_http_response(response)
                if allow_retry and self._is_retryable_status(error.status_code) and attempt < self._retry_max_attempts:
                    self._backoff(attempt, method, normalized_path)
                    continue
                raise error

            return self._parse_success(response)

        raise ApiError(code="NETWORK_ERROR", message="Could not reach the rental API.", details="retry exhausted")

    def close(self) -> None:
        self._client.close()

    def _backoff(self, attempt: int, method: str, path: str) -> None:
        logger.debug("retrying %s %s (attempt %s)", method, path, attempt + 1)
        time.sleep((self._retry_backoff_ms * attempt) / 1000)

    @staticmethod
    def _is_retryable_status(status_code: int | None) -> bool:
        return bool(status_code and 500 <= status_code <= 599)

    @staticmethod
    def _parse_success(response: httpx.Response) -> dict[str, Any]:
        if not response.content:
            return {}
        try:
            payload = response.json()
        except ValueError:
            return {"message": response.text}
        return payload if isinstance(payload, dict) else {"data": payload}

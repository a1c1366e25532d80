from __future__ import annotations

from typing import Any, Iterable

from clients.rental_admin_sdk.config import API_PREFIX
from clients.rental_admin_sdk.errors import ApiError, TenantScopeError, UnsupportedOperationError
from clients.rental_admin_sdk.http_client import HttpClient
from clients.rental_admin_sdk.models import ALL, ListQuery, ListResult, ResourceScope, SaveResult, submit_error_from
from clients.rental_admin_sdk.normalizers import extract_message, extract_record, normalize_listing
from clients.rental_admin_sdk.resources import ResourceSpec


class ResourceClient:
    """CRUD gateway for one tenant-scoped collection under ``/api/v1/admin``.

    Every operation refuses to run without a resolved tenant and raises
    ``TenantScopeError`` before touching the network. ``create`` and ``update``
    never raise for backend rejections; they return a ``SaveResult`` carrying
    either the persisted record or the submit error to render inline.
    """

    def __init__(self, http_client: HttpClient, spec: ResourceSpec) -> None:
        self.http_client = http_client
        self.spec = spec

    def list(self, query: ListQuery, scope: ResourceScope) -> ListResult:
        tenant_id = self._require_tenant(scope, "list")
        params = build_list_params(self.spec, query, tenant_id)
        payload = self.http_client.request("GET", self._path(self.spec.collection_path), params=params)
        return normalize_listing(payload, page=query.page, page_size=query.page_size)

    def get(self, record_id: int, scope: ResourceScope) -> dict[str, Any]:
        tenant_id = self._require_tenant(scope, "get")
        payload = self.http_client.request(
            "GET",
            self._path(self.spec.item_path(record_id)),
            params={"tenant_id": tenant_id},
        )
        return extract_record(payload) or payload

    def create(self, draft: dict[str, Any], scope: ResourceScope) -> SaveResult:
        tenant_id = self._require_tenant(scope, "create")
        body = {**draft, "tenant_id": tenant_id}
        return self._save("POST", self._path(self.spec.collection_path), body)

    def update(self, record_id: int, draft: dict[str, Any], scope: ResourceScope) -> SaveResult:
        tenant_id = self._require_tenant(scope, "update")
        body = {**draft, "tenant_id": tenant_id}
        body.pop("id", None)
        return self._save("PUT", self._path(self.spec.item_path(record_id)), body)

    def remove(self, record_id: int, scope: ResourceScope) -> str:
        tenant_id = self._require_tenant(scope, "remove")
        payload = self.http_client.request(
            "DELETE",
            self._path(self.spec.item_path(record_id)),
            json_body={"tenant_id": tenant_id},
        )
        return extract_message(payload) or ""

    def remove_bulk(self, record_ids: Iterable[int], scope: ResourceScope) -> str:
        tenant_id = self._require_tenant(scope, "remove_bulk")
        if not self.spec.supports_bulk_delete:
            raise UnsupportedOperationError.for_resource(self.spec.name, "bulk delete")
        payload = self.http_client.request(
            "DELETE",
            self._path(self.spec.collection_path),
            json_body={"tenant_id": tenant_id, self.spec.bulk_ids_key: sorted(record_ids)},
        )
        return extract_message(payload) or ""

    def _save(self, method: str, path: str, body: dict[str, Any]) -> SaveResult:
        try:
            payload = self.http_client.request(method, path, json_body=body)
        except ApiError as error:
            return SaveResult.failure(submit_error_from(error))
        return SaveResult.success(extract_record(payload), extract_message(payload))

    def _require_tenant(self, scope: ResourceScope, operation: str) -> int:
        if not scope.is_resolved:
            raise TenantScopeError.unresolved(self.spec.name, operation)
        return scope.tenant_id

    @staticmethod
    def _path(path: str) -> str:
        return f"{API_PREFIX}{path}"


def build_list_params(spec: ResourceSpec, query: ListQuery, tenant_id: int) -> dict[str, Any]:
    params: dict[str, Any] = {
        "tenant_id": tenant_id,
        "page": query.page,
        "pageSize": query.page_size,
        "search": query.search_text.strip(),
        "sortBy": spec.sort_by,
        "sortOrder": spec.sort_order,
        "status": None if query.status_filter == ALL else query.status_filter,
    }
    if spec.secondary_filter_key:
        params[spec.secondary_filter_key] = query.secondary_filter
    return _build_query_params(**params)


def _build_query_params(**kwargs: Any) -> dict[str, Any]:
    return {key: value for key, value in kwargs.items() if value not in (None, "")}

from clients.rental_admin_sdk.config import SDKConfig
from clients.rental_admin_sdk.errors import ApiError, TenantScopeError, UnsupportedOperationError
from clients.rental_admin_sdk.http_client import HttpClient
from clients.rental_admin_sdk.models import (
    FieldErrors,
    ListQuery,
    ListResult,
    MessageError,
    ResourceScope,
    SaveResult,
    TenantOption,
)
from clients.rental_admin_sdk.resource_client import ResourceClient
from clients.rental_admin_sdk.resources import RESOURCES, ResourceSpec, get_resource
from clients.rental_admin_sdk.tenants_client import TenantsClient

__all__ = [
    "SDKConfig",
    "ApiError",
    "TenantScopeError",
    "UnsupportedOperationError",
    "HttpClient",
    "ListQuery",
    "ListResult",
    "MessageError",
    "FieldErrors",
    "ResourceScope",
    "SaveResult",
    "TenantOption",
    "ResourceClient",
    "ResourceSpec",
    "RESOURCES",
    "get_resource",
    "TenantsClient",
]

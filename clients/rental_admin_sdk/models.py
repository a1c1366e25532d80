from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from clients.rental_admin_sdk.errors import ApiError

ALL = "all"


class TenantOption(BaseModel):
    id: int
    name: str


class ResourceScope(BaseModel):
    model_config = ConfigDict(frozen=True)

    tenant_id: int | None = None
    secondary_id: int | None = None

    @property
    def is_resolved(self) -> bool:
        return self.tenant_id is not None


class ListQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int = Field(default=1, ge=1)
    page_size: int = Field(default=10, ge=1)
    search_text: str = ""
    status_filter: str = ALL
    secondary_filter: int | None = None

    def with_page(self, page: int) -> "ListQuery":
        return self.model_copy(update={"page": max(1, int(page))})

    def with_search(self, search_text: str) -> "ListQuery":
        return self.model_copy(update={"search_text": search_text, "page": 1})

    def with_status(self, status_filter: str | None) -> "ListQuery":
        return self.model_copy(update={"status_filter": status_filter or ALL, "page": 1})

    def with_secondary(self, secondary_filter: int | None) -> "ListQuery":
        return self.model_copy(update={"secondary_filter": secondary_filter, "page": 1})


class ListResult(BaseModel):
    items: list[dict[str, Any]] = Field(default_factory=list)
    page: int = 1
    total_pages: int = 1
    total_count: int = 0

    @classmethod
    def empty(cls) -> "ListResult":
        return cls()

    @property
    def ids(self) -> list[int]:
        return [item["id"] for item in self.items if item.get("id") is not None]


class MessageError(BaseModel):
    kind: Literal["message"] = "message"
    text: str


class FieldErrors(BaseModel):
    kind: Literal["fieldErrors"] = "fieldErrors"
    items: list[str]


SubmitError = Annotated[Union[MessageError, FieldErrors], Field(discriminator="kind")]


def submit_error_from(error: ApiError) -> MessageError | FieldErrors:
    if isinstance(error.details, list) and error.details:
        return FieldErrors(items=error.messages)
    return MessageError(text=error.message)


class SaveResult(BaseModel):
    ok: bool
    record: dict[str, Any] | None = None
    message: str | None = None
    error: SubmitError | None = None

    @classmethod
    def success(cls, record: dict[str, Any] | None, message: str | None = None) -> "SaveResult":
        return cls(ok=True, record=record, message=message)

    @classmethod
    def failure(cls, error: MessageError | FieldErrors) -> "SaveResult":
        return cls(ok=False, error=error)

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SORT_BY = "created_at"
DEFAULT_SORT_ORDER = "desc"


@dataclass(frozen=True)
class ResourceSpec:
    name: str
    label: str
    bulk_ids_key: str | None
    page_size: int = 6
    secondary_filter_key: str | None = None
    sort_by: str = DEFAULT_SORT_BY
    sort_order: str = DEFAULT_SORT_ORDER

    @property
    def collection_path(self) -> str:
        return f"/{self.name}"

    def item_path(self, record_id: int) -> str:
        return f"/{self.name}/{record_id}"

    @property
    def supports_bulk_delete(self) -> bool:
        return self.bulk_ids_key is not None


RESOURCES: dict[str, ResourceSpec] = {
    spec.name: spec
    for spec in (
        ResourceSpec("vehicles", "vehicle", "vehicle_ids", page_size=6, secondary_filter_key="branch_id"),
        ResourceSpec("customers", "customer", "customer_ids", page_size=6),
        ResourceSpec("branches", "branch", "branch_ids", page_size=6),
        ResourceSpec("invoices", "invoice", "invoice_ids", page_size=10),
        ResourceSpec("payments", "payment", "payment_ids", page_size=10),
        ResourceSpec("inspections", "inspection", "inspection_ids", page_size=6),
        ResourceSpec("inspection-damages", "inspection damage", "damage_ids", page_size=6, secondary_filter_key="inspection_id"),
        ResourceSpec("roles", "role", "role_ids", page_size=6),
        ResourceSpec("rental-contracts", "rental contract", None, page_size=10),
        ResourceSpec("contract-templates", "contract template", "template_ids", page_size=6),
        ResourceSpec("plans", "plan", "plan_ids", page_size=6),
        ResourceSpec("subscriptions", "subscription", "subscription_ids", page_size=6),
        ResourceSpec(
            "vehicle-maintenance-records",
            "maintenance record",
            "maintenance_ids",
            page_size=6,
            secondary_filter_key="vehicle_id",
        ),
        ResourceSpec("users", "user", "user_ids", page_size=6),
        ResourceSpec("bookings", "booking", "booking_ids", page_size=6),
        ResourceSpec("customer-documents", "customer document", "document_ids", page_size=6, secondary_filter_key="customer_id"),
    )
}


def get_resource(name: str) -> ResourceSpec:
    try:
        return RESOURCES[name]
    except KeyError as exc:
        raise KeyError(f"Unknown resource: {name}") from exc

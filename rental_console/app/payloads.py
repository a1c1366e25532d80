from __future__ import annotations

import calendar
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

DEFAULT_VAT_RATE = 15
DEFAULT_CURRENCY = "SAR"

Draft = dict[str, Any]


def clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def optional_text(value: Any) -> str | None:
    return clean_text(value) or None


def optional_number(value: Any) -> int | float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    text = clean_text(value)
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    return int(number) if number.is_integer() and "." not in text else number


def _hydrate_with(defaults: Callable[[], Draft]) -> Callable[[dict[str, Any]], Draft]:
    def _hydrate(record: dict[str, Any]) -> Draft:
        draft = defaults()
        for key in draft:
            value = record.get(key)
            if value is not None:
                draft[key] = value
        draft["id"] = record.get("id")
        return draft

    return _hydrate


@dataclass(frozen=True)
class PayloadShaper:
    defaults: Callable[[], Draft]
    hydrate: Callable[[dict[str, Any]], Draft]
    shape: Callable[[Draft], dict[str, Any]]


def shape_generic(draft: Draft) -> dict[str, Any]:
    """Strip text fields and drop the client-side ``id``; everything else passes through."""
    payload: dict[str, Any] = {}
    for key, value in draft.items():
        if key == "id":
            continue
        payload[key] = value.strip() if isinstance(value, str) else value
    return payload


def branch_defaults() -> Draft:
    return {
        "name": "",
        "name_ar": "",
        "address": "",
        "address_ar": "",
        "latitude": "",
        "longitude": "",
        "status": "active",
    }


def shape_branch(draft: Draft) -> dict[str, Any]:
    return {
        "name": clean_text(draft.get("name")),
        "name_ar": optional_text(draft.get("name_ar")),
        "address": optional_text(draft.get("address")),
        "address_ar": optional_text(draft.get("address_ar")),
        "latitude": optional_number(draft.get("latitude")),
        "longitude": optional_number(draft.get("longitude")),
    }


def invoice_defaults() -> Draft:
    return {
        "booking_id": None,
        "customer_id": None,
        "subtotal": 0,
        "vat_rate": DEFAULT_VAT_RATE,
        "status": "draft",
        "currency_code": DEFAULT_CURRENCY,
        "notes": "",
    }


def shape_invoice(draft: Draft) -> dict[str, Any]:
    return {
        "booking_id": optional_number(draft.get("booking_id")),
        "customer_id": optional_number(draft.get("customer_id")),
        "subtotal": optional_number(draft.get("subtotal")) or 0,
        "status": draft.get("status") or "draft",
        "vat_rate": optional_number(draft.get("vat_rate")) or 0,
        "currency_code": clean_text(draft.get("currency_code")) or DEFAULT_CURRENCY,
        "notes": optional_text(draft.get("notes")),
    }


@dataclass(frozen=True)
class InvoiceTotals:
    subtotal: Decimal
    vat_rate: Decimal
    vat_amount: Decimal
    total: Decimal
    currency_code: str = DEFAULT_CURRENCY


def _to_decimal(value: Any) -> Decimal:
    try:
        return Decimal(str(value if value not in (None, "") else 0))
    except InvalidOperation:
        return Decimal(0)


def invoice_totals(subtotal: Any, vat_rate: Any = DEFAULT_VAT_RATE, currency_code: str = DEFAULT_CURRENCY) -> InvoiceTotals:
    cents = Decimal("0.01")
    base = _to_decimal(subtotal)
    rate = _to_decimal(vat_rate)
    vat = (base * rate / 100).quantize(cents, rounding=ROUND_HALF_UP)
    return InvoiceTotals(
        subtotal=base.quantize(cents, rounding=ROUND_HALF_UP),
        vat_rate=rate,
        vat_amount=vat,
        total=(base + vat).quantize(cents, rounding=ROUND_HALF_UP),
        currency_code=currency_code,
    )


def vehicle_defaults() -> Draft:
    return {
        "make": "",
        "model": "",
        "year": None,
        "late_fee_day": None,
        "trim": "",
        "category": "",
        "price_per_day": 0,
        "license_plate": "",
        "vin": "",
        "color": "",
        "image": "",
        "fuel_type": "",
        "transmission": "",
        "mileage": None,
        "status": "available",
        "branch_id": None,
    }


def shape_vehicle(draft: Draft) -> dict[str, Any]:
    payload = shape_generic(draft)
    for key in ("year", "late_fee_day", "price_per_day", "mileage", "branch_id"):
        payload[key] = optional_number(draft.get(key))
    return payload


def customer_defaults() -> Draft:
    return {
        "customer_type": "individual",
        "status": "active",
        "first_name": "",
        "last_name": "",
        "full_name": "",
        "profile_image": None,
        "email": "",
        "phone": "",
        "whatsapp": "",
        "nationality": "",
        "date_of_birth": "",
        "gender": None,
        "id_type": None,
        "id_number": "",
        "driving_license_number": "",
        "license_country": "",
        "license_expiry_date": "",
        "address": "",
        "city": "",
        "country": "",
        "preferred_language": "en",
        "notes": "",
        "password": "",
    }


def shape_customer(draft: Draft) -> dict[str, Any]:
    payload = shape_generic(draft)
    # an empty password on edit keeps the stored one
    if not payload.get("password"):
        payload.pop("password", None)
    return payload


def role_defaults() -> Draft:
    return {"slug": "", "name": "", "name_ar": "", "description": "", "permissions": []}


def shape_role(draft: Draft) -> dict[str, Any]:
    payload = {
        "slug": clean_text(draft.get("slug")),
        "name": clean_text(draft.get("name")),
        "name_ar": optional_text(draft.get("name_ar")),
        "description": optional_text(draft.get("description")),
        "permissions": list(draft.get("permissions") or []),
    }
    return {key: value for key, value in payload.items() if value is not None}


def plan_defaults() -> Draft:
    return {
        "name": "",
        "description": "",
        "price": 0,
        "currency_code": "USD",
        "billing_cycle": "monthly",
        "max_cars": 0,
        "max_users": 0,
        "max_bookings": 0,
        "status": "active",
    }


def shape_plan(draft: Draft) -> dict[str, Any]:
    payload = shape_generic(draft)
    for key in ("price", "max_cars", "max_users", "max_bookings"):
        payload[key] = optional_number(draft.get(key)) or 0
    return payload


def _add_months(start: date, months: int) -> date:
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def subscription_period(start: date, billing_cycle: str) -> tuple[date, date]:
    """Monthly plans run one calendar month, every other cycle one year.

    Days past the end of the target month are clamped to its last day.
    """
    months = 1 if billing_cycle == "monthly" else 12
    return start, _add_months(start, months)


def subscription_defaults() -> Draft:
    return {
        "plan_id": None,
        "start_date": date.today().isoformat(),
        "billing_cycle": "monthly",
        "status": "active",
        "auto_renew": True,
    }


def shape_subscription(draft: Draft) -> dict[str, Any]:
    start = draft.get("start_date") or date.today()
    if isinstance(start, str):
        start = date.fromisoformat(start)
    start, end = subscription_period(start, str(draft.get("billing_cycle") or "monthly"))
    return {
        "plan_id": optional_number(draft.get("plan_id")),
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
        "status": draft.get("status") or "active",
        "auto_renew": bool(draft.get("auto_renew", True)),
    }


def _generic_defaults() -> Draft:
    return {}


def _generic_hydrate(record: dict[str, Any]) -> Draft:
    return {key: value for key, value in record.items() if key not in {"tenant_id", "created_at", "updated_at"}}


SHAPERS: dict[str, PayloadShaper] = {
    "branches": PayloadShaper(branch_defaults, _hydrate_with(branch_defaults), shape_branch),
    "invoices": PayloadShaper(invoice_defaults, _hydrate_with(invoice_defaults), shape_invoice),
    "vehicles": PayloadShaper(vehicle_defaults, _hydrate_with(vehicle_defaults), shape_vehicle),
    "customers": PayloadShaper(customer_defaults, _hydrate_with(customer_defaults), shape_customer),
    "roles": PayloadShaper(role_defaults, _hydrate_with(role_defaults), shape_role),
    "plans": PayloadShaper(plan_defaults, _hydrate_with(plan_defaults), shape_plan),
    "subscriptions": PayloadShaper(subscription_defaults, _hydrate_with(subscription_defaults), shape_subscription),
}

GENERIC_SHAPER = PayloadShaper(_generic_defaults, _generic_hydrate, shape_generic)


def shaper_for(resource_name: str) -> PayloadShaper:
    return SHAPERS.get(resource_name, GENERIC_SHAPER)

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from rental_console.app.error_presenter import build_error_payload
from rental_console.app.infrastructure.logging.logger import get_logger

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "fetch_failed": "Error fetching {label}",
        "details_failed": "Error fetching {label} details",
        "saved": "Saved",
        "saved_description": "{label} saved successfully",
        "save_failed": "Save failed",
        "deleted": "Deleted",
        "delete_failed": "Error",
        "tenants_failed": "Error fetching tenants",
        "error": "Error",
    },
    "ar": {
        "fetch_failed": "خطأ في جلب {label}",
        "details_failed": "خطأ في جلب بيانات {label}",
        "saved": "تم الحفظ",
        "saved_description": "تم حفظ {label} بنجاح",
        "save_failed": "فشل الحفظ",
        "deleted": "تم الحذف",
        "delete_failed": "خطأ",
        "tenants_failed": "خطأ في جلب المستأجرين",
        "error": "خطأ",
    },
}

logger = get_logger("rental_console.notifications")


def translate(language: str, key: str, **values: str) -> str:
    catalog = MESSAGES.get(language) or MESSAGES["en"]
    template = catalog.get(key) or MESSAGES["en"].get(key) or key
    return template.format(**values)


@dataclass(frozen=True)
class Notification:
    level: str
    title: str
    description: str = ""
    category: str | None = None


@dataclass
class Notifier:
    """Dismissable notification feed standing in for the dashboard toasts."""

    language: str = "en"
    sink: Callable[[Notification], None] | None = None
    history: list[Notification] = field(default_factory=list)

    def success(self, key: str, description: str = "", **values: str) -> Notification:
        return self._emit(Notification(level="success", title=translate(self.language, key, **values), description=description))

    def error(self, key: str, error: Exception | str, **values: str) -> Notification:
        if isinstance(error, str):
            description, category = error, None
        else:
            payload = build_error_payload(error)
            description, category = str(payload["message"] or ""), payload["category"]
        return self._emit(
            Notification(
                level="danger",
                title=translate(self.language, key, **values),
                description=description or translate(self.language, "error"),
                category=category,
            )
        )

    def text(self, key: str, **values: str) -> str:
        return translate(self.language, key, **values)

    def _emit(self, notification: Notification) -> Notification:
        self.history.append(notification)
        if notification.level == "danger":
            logger.warning("%s: %s", notification.title, notification.description)
        if self.sink:
            self.sink(notification)
        return notification

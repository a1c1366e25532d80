import json
import logging
from datetime import datetime, timezone


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    logger.setLevel(logging.INFO)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger


def log_action(
    logger: logging.Logger,
    module: str,
    action: str,
    role_id: int | None,
    tenant_id: int | None,
    outcome: str,
    detail: str | None = None,
) -> None:
    record = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "level": "INFO" if outcome == "success" else "WARNING",
        "module": module,
        "action": action,
        "role_id": role_id,
        "tenant_id": tenant_id,
        "outcome": outcome,
    }
    if detail:
        record["detail"] = detail
    level = logging.INFO if outcome == "success" else logging.WARNING
    logger.log(level, json.dumps(record, ensure_ascii=False))

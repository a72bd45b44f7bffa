from typing import Dict

import structlog

from ..config import get_settings

logger = structlog.get_logger(__name__)


def _header_prefix() -> str:
    return f"X-{get_settings().application_name}"


def create_alert(message: str, param: str) -> Dict[str, str]:
    prefix = _header_prefix()
    return {
        f"{prefix}-alert": message,
        f"{prefix}-params": param,
    }


def create_entity_creation_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"{get_settings().application_name}.{entity_name}.created", param)


def create_entity_update_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"{get_settings().application_name}.{entity_name}.updated", param)


def create_entity_deletion_alert(entity_name: str, param: str) -> Dict[str, str]:
    return create_alert(f"{get_settings().application_name}.{entity_name}.deleted", param)


def create_failure_alert(entity_name: str, error_key: str, default_message: str) -> Dict[str, str]:
    logger.error("Entity processing failed", entity=entity_name, error_key=error_key, reason=default_message)
    prefix = _header_prefix()
    return {
        f"{prefix}-error": f"error.{error_key}",
        f"{prefix}-params": entity_name,
    }

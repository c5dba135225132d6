import logging
from datetime import UTC, datetime
from typing import Any


def log_user_action(
    action: str, logger_name: str = "user_actions", **kwargs: Any
) -> None:
    """Log operator actions with consistent structure.

    Args:
        action: The action being performed (e.g., 'add_boat', 'accept_payment')
        logger_name: Name of the logger to use
        **kwargs: Additional context data
    """
    logger = logging.getLogger(logger_name)

    log_data = {
        "action": action,
        "timestamp": datetime.now(UTC).isoformat(),
        **kwargs,
    }

    logger.info(f"User action: {action}", extra=log_data)


def log_storage_operation(
    operation: str,
    path: str,
    success: bool = True,
    logger_name: str = "storage",
    **kwargs: Any,
) -> None:
    """Log inventory file operations.

    Args:
        operation: File operation (load, save)
        path: Inventory file path
        success: Whether the operation was successful
        logger_name: Name of the logger to use
        **kwargs: Additional context data
    """
    logger = logging.getLogger(logger_name)

    log_data = {"operation": operation, "path": path, "success": success, **kwargs}

    level = logging.INFO if success else logging.ERROR
    status = "succeeded" if success else "failed"

    logger.log(level, f"Inventory {operation} of {path} {status}", extra=log_data)


def log_validation_error(
    field: str, value: Any, error_message: str, logger_name: str = "validation"
) -> None:
    """Log rejected input with context.

    Args:
        field: Field or input name that failed validation
        value: The invalid value (will be shortened)
        error_message: Validation error message
        logger_name: Name of the logger to use
    """
    logger = logging.getLogger(logger_name)

    safe_value = str(value)[:100]

    logger.info(
        f"Validation failed for '{field}': {error_message}",
        extra={"field": field, "value": safe_value, "error": error_message},
    )

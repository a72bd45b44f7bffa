from typing import Optional, Dict, Any


class AndYetError(Exception):
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }


class ValidationError(AndYetError):
    """Rejected request for an entity; error_key ends up in the failure alert header."""

    def __init__(self, entity_name: str, error_key: str, message: str):
        self.entity_name = entity_name
        self.error_key = error_key
        super().__init__(
            message=message,
            error_code=error_key,
            details={"entity_name": entity_name}
        )


class MailDeliveryError(AndYetError):
    def __init__(self, recipient: str, reason: str):
        super().__init__(
            message=f"E-mail could not be sent to {recipient}: {reason}",
            error_code="MAIL_DELIVERY_FAILED",
            details={"recipient": recipient}
        )

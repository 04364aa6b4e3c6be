"""Validadores de mensagens interativas WhatsApp (native flow).

Uso:
    from interactive_buttons.adapters.whatsapp.validators import (
        InteractiveMessageValidator,
        InteractiveValidationError,
    )

    normalized, issues = InteractiveMessageValidator().validate(descriptor)
    if issues:
        raise InteractiveValidationError(issues)
"""

from interactive_buttons.adapters.whatsapp.validators.errors import (
    InteractiveValidationError,
    PayloadBuildError,
    ValidationError,
    ValidationIssue,
)
from interactive_buttons.adapters.whatsapp.validators.interactive import (
    InteractiveMessageValidator,
    validate_interactive_message,
)
from interactive_buttons.adapters.whatsapp.validators.rules import (
    KindRule,
    requirements_for,
    supported_kinds,
)

__all__ = [
    "InteractiveMessageValidator",
    "InteractiveValidationError",
    "KindRule",
    "PayloadBuildError",
    "ValidationError",
    "ValidationIssue",
    "requirements_for",
    "supported_kinds",
    "validate_interactive_message",
]

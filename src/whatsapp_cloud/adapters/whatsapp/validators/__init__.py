"""Validadores de entrada das operações WhatsApp/Meta.

Uso:
    from whatsapp_cloud.adapters.whatsapp.validators import (
        ValidationError,
        validate_flow_creation,
    )
"""

from whatsapp_cloud.adapters.whatsapp.validators.errors import ValidationError
from whatsapp_cloud.adapters.whatsapp.validators.flows import (
    validate_categories,
    validate_flow_creation,
    validate_migration_names,
    validate_required_fields,
)
from whatsapp_cloud.adapters.whatsapp.validators.interactive import (
    validate_list_button,
    validate_reply_buttons,
)
from whatsapp_cloud.adapters.whatsapp.validators.limits import (
    FLOW_CATEGORIES,
    MAX_BUTTONS_PER_MESSAGE,
)
from whatsapp_cloud.adapters.whatsapp.validators.media import (
    extension_from_mime,
    validate_upload_content,
)
from whatsapp_cloud.adapters.whatsapp.validators.templates import validate_template_data

__all__ = [
    "FLOW_CATEGORIES",
    "MAX_BUTTONS_PER_MESSAGE",
    "ValidationError",
    "extension_from_mime",
    "validate_categories",
    "validate_flow_creation",
    "validate_list_button",
    "validate_migration_names",
    "validate_reply_buttons",
    "validate_required_fields",
    "validate_template_data",
    "validate_upload_content",
]

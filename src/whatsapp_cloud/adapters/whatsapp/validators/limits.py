"""Limites e constantes para validação de requisições WhatsApp/Meta."""

MAX_BUTTONS_PER_MESSAGE = 3
MAX_TEMPLATE_NAME_LENGTH = 512
MAX_MIGRATION_FLOW_NAMES = 100
MAX_FLOW_JSON_SIZE_MB = 10
MAX_FILE_SIZE_MB = 100

# Categorias aceitas pela Flows API
FLOW_CATEGORIES = (
    "SIGN_UP",
    "SIGN_IN",
    "APPOINTMENT_BOOKING",
    "LEAD_GENERATION",
    "CONTACT_US",
    "CUSTOMER_SUPPORT",
    "SURVEY",
    "OTHER",
)

TEMPLATE_CATEGORIES = frozenset({"AUTHENTICATION", "MARKETING", "UTILITY"})
TEMPLATE_PARAMETER_FORMATS = frozenset({"NAMED", "POSITIONAL"})

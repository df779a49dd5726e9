"""Constants for the acquiring gateway REST API."""

# ============================================================================
# Endpoints
# ============================================================================

API_URI = "https://securepayments.sberbank.ru"
API_URI_TEST = "https://3dsec.sberbank.ru"

ALFABANK_PROD_URI = "https://pay.alfabank.ru"
ALFABANK_TEST_URI = "https://web.rbsuat.com"

API_PREFIX_DEFAULT = "/payment/rest/"
API_PREFIX_APPLE = "/payment/applepay/"
API_PREFIX_GOOGLE = "/payment/google/"
API_PREFIX_SAMSUNG = "/payment/samsung/"

# ============================================================================
# Protocol
# ============================================================================

# Error code the gateway reports for a successful action
ACTION_SUCCESS = 0

UNKNOWN_ERROR_MESSAGE = "Unknown error."

CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"
CONTENT_TYPE_JSON = "application/json"

# Timestamps in getLastOrdersForMerchants.do
DATE_FORMAT = "%Y%m%d%H%M%S"

# Binding expiry in extendBinding.do
EXPIRY_FORMAT = "%Y%m"

DEFAULT_TIMEOUT = 30.0

"""Status code catalog.

Every status code a caller can reference by name, each bound to exactly one
canonical message. Two numeric bands coexist without overlap:

* protocol-standard codes (100-599), following HTTP semantics;
* application codes (>= 4000), including the structured 6-digit scheme
  ``base * 1000 + sequence`` (e.g. 404001 is the first "not found" reason).

The integer values and message strings are the stable wire schema of this
library. Never renumber a code or reuse a retired one.
"""

from __future__ import annotations

from enum import IntEnum, unique
from types import MappingProxyType
from typing import Mapping

from response_envelope.errors import InvalidArgumentError

STRUCTURED_FACTOR = 1000


@unique
class StatusCode(IntEnum):
    """Catalog of status codes; each member carries its canonical ``message``."""

    message: str

    def __new__(cls, value: int, message: str) -> StatusCode:
        member = int.__new__(cls, value)
        member._value_ = value
        member.message = message
        return member

    # 1xx: Informational
    CONTINUE = 100, "Continue"
    SWITCHING_PROTOCOLS = 101, "Switching Protocols"
    PROCESSING = 102, "Processing"

    # 2xx: Success
    OK = 200, "OK"
    CREATED = 201, "Created"
    ACCEPTED = 202, "Accepted"
    NON_AUTHORITATIVE_INFORMATION = 203, "Non-Authoritative Information"
    NO_CONTENT = 204, "No Content"
    RESET_CONTENT = 205, "Reset Content"
    PARTIAL_CONTENT = 206, "Partial Content"

    # 3xx: Redirection
    MULTIPLE_CHOICES = 300, "Multiple Choices"
    MOVED_PERMANENTLY = 301, "Moved Permanently"
    FOUND = 302, "Found"
    SEE_OTHER = 303, "See Other"
    NOT_MODIFIED = 304, "Not Modified"
    TEMPORARY_REDIRECT = 307, "Temporary Redirect"
    PERMANENT_REDIRECT = 308, "Permanent Redirect"

    # 4xx: Client error
    BAD_REQUEST = 400, "Bad Request"
    UNAUTHORIZED = 401, "Unauthorized"
    PAYMENT_REQUIRED = 402, "Payment Required"
    FORBIDDEN = 403, "Forbidden"
    NOT_FOUND = 404, "Not Found"
    METHOD_NOT_ALLOWED = 405, "Method Not Allowed"
    NOT_ACCEPTABLE = 406, "Not Acceptable"
    PROXY_AUTHENTICATION_REQUIRED = 407, "Proxy Authentication Required"
    REQUEST_TIMEOUT = 408, "Request Timeout"
    CONFLICT = 409, "Conflict"
    GONE = 410, "Gone"
    LENGTH_REQUIRED = 411, "Length Required"
    PRECONDITION_FAILED = 412, "Precondition Failed"
    PAYLOAD_TOO_LARGE = 413, "Payload Too Large"
    URI_TOO_LONG = 414, "URI Too Long"
    UNSUPPORTED_MEDIA_TYPE = 415, "Unsupported Media Type"
    RANGE_NOT_SATISFIABLE = 416, "Range Not Satisfiable"
    EXPECTATION_FAILED = 417, "Expectation Failed"
    I_AM_A_TEAPOT = 418, "I'm a teapot"
    UNPROCESSABLE_ENTITY = 422, "Unprocessable Entity"
    LOCKED = 423, "Locked"
    FAILED_DEPENDENCY = 424, "Failed Dependency"
    TOO_EARLY = 425, "Too Early"
    UPGRADE_REQUIRED = 426, "Upgrade Required"
    PRECONDITION_REQUIRED = 428, "Precondition Required"
    TOO_MANY_REQUESTS = 429, "Too Many Requests"
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431, "Request Header Fields Too Large"
    UNAVAILABLE_FOR_LEGAL_REASONS = 451, "Unavailable For Legal Reasons"

    # 5xx: Server error
    INTERNAL_SERVER_ERROR = 500, "Internal Server Error"
    NOT_IMPLEMENTED = 501, "Not Implemented"
    BAD_GATEWAY = 502, "Bad Gateway"
    SERVICE_UNAVAILABLE = 503, "Service Unavailable"
    GATEWAY_TIMEOUT = 504, "Gateway Timeout"
    HTTP_VERSION_NOT_SUPPORTED = 505, "HTTP Version Not Supported"
    VARIANT_ALSO_NEGOTIATES = 506, "Variant Also Negotiates"
    INSUFFICIENT_STORAGE = 507, "Insufficient Storage"
    LOOP_DETECTED = 508, "Loop Detected"
    NOT_EXTENDED = 510, "Not Extended"
    NETWORK_AUTHENTICATION_REQUIRED = 511, "Network Authentication Required"

    # 40xx: Account and input errors
    SUCCESS = 4000, "SUCCESS"
    INVALID_MAIL_FORMAT = 4001, "Invalid mail format"
    ACCOUNTALREADY = 4002, "This account has already been withdrawn"
    EMAIL_ALREADY_EXISTS = 4003, "This email is already"
    USER_NOT_FOUND = 4004, "User not found"
    WRONG_PASS = 4005, "Wrong email or password"
    EMAIL_TIMEOUT = 4006, "email authentication is time out"
    AUTHEN_NOT_MATCH = 4007, "The authentication code does not match."
    BAD_REQUEST_TYPE = 4008, "Invalid request type"
    CONFLICT_NICKNAME = 4009, "Nickname conflicts with an existing one"
    REQUIRED_TYPE = 4010, "Required type is missing"
    NICKNAME_INVALID = 4011, "Invalid nickname"
    NICKNAME_ALREADY_TAKEN = 4012, "Nickname is already taken"
    NO_DATA_EXISTS = 4013, "No data exists"

    # 41xx
    FAIL = 4100, "Fail"
    BUSSINED_INFO_ERROR = 4101, "Business information error"
    PLEASE_TRY_AGAIN_LATER = 4102, "Please try again later"
    INVALID_EMAIL = 4108, "Invalid email format"
    INVALID_PHONE_NUMBER_FORMAT = 4109, "Invalid phone number format"
    INVALID_PASSWORD = 4110, "Invalid password"

    # 42xx
    SOURCING_REQUEST_FAILED_CREATE = 4200, "Failed to create sourcing request"
    CREATE_MALL_FAILED = 4201, "Failed to create mall"

    # 43xx
    TOKEN_EXPIRED = 4300, "Token expired"

    # 45xx
    CALL_AXIOS_ERROR = 4500, "Upstream HTTP call failed"

    # 49xx
    CONFLICT_CODE = 4900, "Conflict"

    # 50xx
    INTERNAL_SERVER_ERROR_CODE = 5000, "Internal server error"
    REDIS_ERROR = 5001, "Redis error"

    # 51xx
    SMS_OTP_FAILD = 5100, "Failed to send SMS OTP"

    # 70xx
    CONFLICT_CELEB = 7001, "Celebrity already exists"

    # 205xxx
    LT_RESET_CONTENT_TOKEN = 205001, "Access token expired, a new one must be issued"

    # 400xxx: Bad request reasons
    LT_BADREQUEST = 400000, "Bad request"
    LT_BADREQUEST_USER = 400001, "Invalid user data"
    LT_BADREQUEST_SOURCING_REQUEST = 400002, "Invalid sourcing request data"
    LT_BADREQUEST_MATCHING_CONTRACT_DEAL = 400003, "Invalid contract deal product data"
    LT_BADREQUEST_LIMIT = 400004, "Invalid limit data"
    LT_BADREQUEST_CATEGORY = 400005, "Invalid category data"
    LT_BADREQUEST_PRODUCT = 400006, "Invalid product data"
    LT_BADREQUEST_USER_CRAWLING = 400007, "User data is being updated"
    LT_BADREQUEST_PRODUCT_CRAWLING = 400008, "Product data is being updated"
    LT_BADREQUEST_USER_CRAWLING_FALSE = (
        400009,
        "Invalid SNS data, please update your SNS information",
    )
    LT_BADREQUEST_SOURCING_REQUEST_IS_COMPELED = 400010, "Sourcing request has been completed"
    LT_BADREQUEST_SHIPPING_POLICY = (
        400011,
        "Product has no shipping policy yet, please add a shipping policy to the product",
    )
    LT_BADREQUEST_PATH_INVALID = 400012, "Invalid path"
    LT_BADREQUEST_PATH_FORBIDDEN = 400013, "Address is not available"
    LT_BADREQUEST_PRODUCT_INSUFFICIENT_STOCK = (
        400014,
        "Some products have insufficient stock, please check the quantities and try again",
    )
    LT_BADREQUEST_POINT_INSUFFICIENT = 400015, "You do not have enough points to redeem"
    LT_BAD_REQUEST_ARTICLE_NOT_SUPPORTED = 400016, "Analysis of this article is not supported"
    LT_BADREQUEST_PRODUCT_NOT_ON_SALE = 400017, "Product is no longer on sale"
    LT_BADREQUEST_GOOGLE_VERTEX_INVALID_ARGUMENT = 400018, "Google Vertex AI invalid argument"
    LT_BADREQUEST_GOOGLE_VERTEX_FAILED_PRECONDITION = 400019, "Google Vertex AI failed precondition"
    LT_BADREQUEST_WAREHOUSE_USED = 400020, "This warehouse is in use"
    LT_BADREQUEST_RESELL_COMMISSION_NOT_SET = (
        400021,
        "Resell commission is not set for this product, please create a new request",
    )
    LT_BADREQUEST_SELLER_NOT_SELECTED = 400022, "Please select a seller"
    LT_BADREQUEST_NOT_VERIFY_OTP = 400023, "OTP has not been verified"
    LT_BADREQUEST_SOURCING_REQUEST_COMPLETED = (
        400024,
        "Sourcing request is completed and can no longer be updated",
    )
    LT_BADREQUEST_URL_EXPIRED = 400025, "URL has expired"
    LT_BADREQUEST_OTP_EXPIRED = 400026, "OTP has expired"
    LT_BADREQUEST_OTP_INVALID = 400027, "Invalid OTP"
    LT_BADREQUEST_SHIPPING_POLICY_DELETE = (
        400028,
        "Products are using this policy, please move them to another policy",
    )
    LT_BADREQUEST_SHIPPING_POLICY_DELETE_NOT_ALLOWED = (
        400029,
        "You are not allowed to delete this shipping policy",
    )

    # 403xxx: Forbidden reasons
    LT_FORBIDDEN_ACCESS = 403001, "You do not have access"
    LT_FORBIDDEN_ACCESS_TOKEN = 403002, "Token does not have access"
    LT_FORBIDDEN_GOOGLE_VERTEX_PERMISSION_DENIED = 403003, "Google Vertex AI permission denied"

    # 404xxx: Not found reasons
    LT_NOTFOUND = 404000, "Not found"
    LT_NOTFOUND_USER = 404001, "User not found"
    LT_NOTFOUND_SOURCING_REQUEST = 404002, "Sourcing request not found"
    LT_NOTFOUND_MATCHING_CONTRACT_DEAL = 404003, "Contract deal product not found"
    LT_NOTFOUND_PRODUCT = 404004, "Product not found"
    LT_NOTFOUND_SHIPPING_POLICY = 404005, "Shipping policy not found"
    LT_NOTFOUND_CATEGORY = 404006, "Category not found"
    LT_NOTFOUND_SALE_POLICY = 404007, "No sale policy data"
    LT_NOTFOUND_PRODUCT_PROMPT = (
        404008,
        "Product has no prompt yet, please create a prompt for the product",
    )
    LT_NOTFOUND_GOOGLE_VERTEX_NOT_FOUND = 404009, "Google Vertex AI resource not found"
    LT_NOTFOUND_SHIPMENT = 404010, "Shipment not found"

    # 409xxx: Conflict reasons
    LT_CONFLICT = 409000, "Conflict"
    LT_CONFLICT_USER = 409001, "User already exists"
    LT_CONFLICT_SOURCING_REQUEST = 409002, "You have already created a request"
    LT_CONFLICT_MATCHING_CONTRACT_DEAL = (
        409003,
        "Cannot create a product request because the product is already on shared sale",
    )
    LT_CONFLICT_PATH = 409004, "Domain already exists"
    LT_CONFLICT_NICKNAME = 409005, "Nickname already exists"
    LT_CONFLICT_SHIPPING_POLICY = 409006, "Policy already exists"
    LT_CONFLICT_SHIPPING_POLICY_DELETE = (
        409007,
        "Products are using this policy, please move them to another policy",
    )
    LT_CONFLICT_ORDER_NOT_PROCESSED = 409008, "This order cannot be processed."

    # 429xxx / 499xxx
    LT_TOO_MANY_REQUESTS_GOOGLE_VERTEX_RESOURCE_EXHAUSTED = (
        429001,
        "Google Vertex AI resource exhausted",
    )
    LT_BADREQUEST_GOOGLE_VERTEX_CANCELLED = 499002, "Google Vertex AI request cancelled"

    # 5xxxxx: Upstream failures
    LT_UNKNOWN_GOOGLE_VERTEX_ERROR = 500001, "Unknown error"
    LT_UNAVAILABLE_GOOGLE_VERTEX_ERROR = 503001, "Service unavailable"
    LT_DEADLINE_GOOGLE_VERTEX_EXCEEDED = 504001, "Deadline exceeded"


_MESSAGES: Mapping[int, str] = MappingProxyType(
    {member.value: member.message for member in StatusCode}
)


def message_for(code: int) -> str | None:
    """Return the canonical message for *code*, or None when unregistered."""
    return _MESSAGES.get(code)


def is_registered(code: int) -> bool:
    return code in _MESSAGES


def status_name(code: int) -> str | None:
    """Symbolic catalog name for *code* (e.g. 404 -> "NOT_FOUND")."""
    if code not in _MESSAGES:
        return None
    return StatusCode(code).name


def structured_code(base: int, sequence: int) -> int:
    """Compose a structured application code ``base * 1000 + sequence``.

    Raises:
        InvalidArgumentError: If *base* is not a standard code (100-599)
            or *sequence* is outside 0-999.
    """
    if not 100 <= base <= 599:
        raise InvalidArgumentError(
            "Structured base must be a standard status code (100-599)", base=base
        )
    if not 0 <= sequence < STRUCTURED_FACTOR:
        raise InvalidArgumentError(
            "Structured sequence must be between 0 and 999", sequence=sequence
        )
    return base * STRUCTURED_FACTOR + sequence


def split_structured(code: int) -> tuple[int, int] | None:
    """Split a 6-digit structured code into ``(base, sequence)``.

    Returns None for codes outside the structured band.
    """
    base, sequence = divmod(code, STRUCTURED_FACTOR)
    if not 100 <= base <= 599:
        return None
    return base, sequence

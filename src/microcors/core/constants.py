"""
Default values and header names used by the CORS layer.
"""

WILDCARD_ORIGIN = "*"

DEFAULT_ALLOW_METHODS: tuple[str, ...] = (
    "POST",
    "GET",
    "PUT",
    "PATCH",
    "DELETE",
    "OPTIONS",
)

DEFAULT_ALLOW_HEADERS: tuple[str, ...] = (
    "X-Requested-With",
    "Access-Control-Allow-Origin",
    "X-HTTP-Method-Override",
    "Content-Type",
    "Authorization",
    "Accept",
)

DEFAULT_EXPOSE_HEADERS: tuple[str, ...] = ()

DEFAULT_MAX_AGE_SECONDS = 60 * 60 * 24  # 24 hours

DEFAULT_ALLOW_CREDENTIALS = True

DEFAULT_RUN_HANDLER_ON_PREFLIGHT_REQUEST = False

PREFLIGHT_METHOD = "OPTIONS"

# Response header names, written exactly as below
ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
EXPOSE_HEADERS = "Access-Control-Expose-Headers"
ALLOW_METHODS = "Access-Control-Allow-Methods"
ALLOW_HEADERS = "Access-Control-Allow-Headers"
MAX_AGE = "Access-Control-Max-Age"
VARY = "Vary"

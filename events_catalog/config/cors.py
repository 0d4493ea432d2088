"""CORS configuration for the FastAPI application."""

from .environment import IS_PRODUCTION_ENVIRONMENT, FRONTEND_ORIGIN

# CORS Origins configuration
ALLOWED_ORIGINS = {
    False: ["*"],  # Development - allow all
    True: [],      # Production - only the configured front-end
}

# CORS Methods configuration
ALLOWED_METHODS = [
    "GET",      # For listing and fetching events
    "POST",     # For creating and seeding events
    "PUT",      # For updating events
    "DELETE",   # For deleting events
    "OPTIONS"   # Required for CORS preflight
]

# CORS Headers configuration
ALLOWED_HEADERS = [
    "Authorization",
    "Content-Type",   # For request bodies
    "Accept",        # For content negotiation
]


def get_allowed_origins():
    """Origins allowed to call the API, preferring the configured front-end."""
    if FRONTEND_ORIGIN:
        return [FRONTEND_ORIGIN]
    return ALLOWED_ORIGINS[IS_PRODUCTION_ENVIRONMENT]


# Additional CORS settings
CORS_CONFIG = {
    "allow_origins": get_allowed_origins(),
    "allow_credentials": True,
    "allow_methods": ALLOWED_METHODS,
    "allow_headers": ALLOWED_HEADERS,
    "expose_headers": [],
    "max_age": 3600,
}

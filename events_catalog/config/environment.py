"""Environment configuration module.

This module MUST be imported before any other project modules that depend on environment variables.
It loads the .env file and reads the process-level settings once at boot, both when running the
FastAPI app and when running standalone scripts.

Usage:
    from events_catalog.config.environment import IS_PRODUCTION_ENVIRONMENT, PORT

Note:
    This module handles loading of environment variables via python-dotenv.
    In production, environment variables should be set directly in the
    platform's environment configuration.
"""

import os
import logging
from dotenv import load_dotenv

# Load environment variables - this must happen before any other imports
load_dotenv()

# Environment configuration
env_setting = os.environ.get('ENVIRONMENT', '').lower()
IS_PRODUCTION_ENVIRONMENT = env_setting == 'production'

if env_setting not in ['development', 'production']:
    logging.warning(
        f"Environment setting '{env_setting}' is invalid or not specified. "
        "Expected 'development' or 'production'. Defaulting to development environment."
    )

# Port the HTTP server listens on
PORT = int(os.environ.get('PORT', '5000'))

# Connection string for the event store (required in production)
DATABASE_URL = os.environ.get('DATABASE_URL') or None

# Front-end origin allowed to call the API cross-origin
FRONTEND_ORIGIN = os.environ.get('FRONTEND_ORIGIN') or None

__all__ = ['IS_PRODUCTION_ENVIRONMENT', 'PORT', 'DATABASE_URL', 'FRONTEND_ORIGIN']

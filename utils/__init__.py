# Utility modules for the theme app
from .logging import get_logger
from .auth import admin_required, check_admin_credentials

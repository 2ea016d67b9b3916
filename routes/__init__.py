from .health import health_bp
from .auth import auth_bp
from .admin import admin_bp
from .appointments import appointments_bp
from .catalog import catalog_bp
from .sales import sales_bp

from .db import db
from .user import User, Role, user_roles
from .audit_log import AuditLog
from .session import Session
from .category import Category
from .service import Service
from .price_item import PriceItem
from .appointment import Appointment
from .sale import Sale
from .review import Review

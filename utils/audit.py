import json
import logging

from flask import request
from sqlalchemy.exc import SQLAlchemyError

from models import db
from models.audit_log import AuditLog

logger = logging.getLogger(__name__)

IP_MAX_LEN = 64


def client_ip():
    """First hop of X-Forwarded-For, else the socket address."""
    forwarded = request.headers.get("X-Forwarded-For", "")
    ip = forwarded.split(",")[0].strip() or request.remote_addr
    return ip[:IP_MAX_LEN] if ip else None


def log_event(action: str, user_id=None, entity=None, entity_id=None, metadata=None):
    """
    Record an audit row. Runs after the audited change has been committed,
    so a failure here is logged and rolled back, never raised.
    """
    user_agent = request.headers.get("User-Agent", "")

    row = AuditLog(
        user_id=user_id,
        action=action,
        entity=entity,
        entity_id=str(entity_id)[:80] if entity_id is not None else None,
        ip=client_ip(),
        user_agent=user_agent[:255] if user_agent else None,
        metadata_json=json.dumps(metadata) if metadata else None
    )
    db.session.add(row)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        logger.exception("audit event %s could not be stored", action)

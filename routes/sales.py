from datetime import datetime

from flask import Blueprint, request, jsonify, g
from pydantic import ValidationError

from models import db
from models.sale import Sale
from models.service import Service
from schemas import SaleCreate, error_details
from scheduling.slots import parse_date
from security.rbac import require_roles
from utils.audit import log_event

sales_bp = Blueprint("sales", __name__, url_prefix="/sales")

UNKNOWN_SERVICE = "Unknown Service"


# ---------- ADMIN: record a sale ----------
@sales_bp.post("")
@require_roles("ADMIN")
def create_sale():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    try:
        payload = SaleCreate.model_validate(data)
    except ValidationError as exc:
        return jsonify(error="Invalid sale data", details=error_details(exc)), 400

    service = db.session.get(Service, payload.service_id)
    sale = Sale(
        client_name=payload.client_name.strip(),
        service_id=payload.service_id,
        service_name=service.name if service else UNKNOWN_SERVICE,
        amount=payload.amount,
        date=payload.date,
        payment_method=payload.payment_method.strip(),
        created_at=datetime.utcnow(),
    )
    db.session.add(sale)
    db.session.commit()

    log_event("SALE_CREATE", user_id=g.user.id, entity="sale", entity_id=sale.id, metadata={"amount": sale.amount})
    return jsonify(sale.to_dict()), 201


# ---------- ADMIN: sales history ----------
@sales_bp.get("")
@require_roles("ADMIN")
def list_sales():
    rows = Sale.query.order_by(Sale.created_at.desc(), Sale.id.desc()).all()
    return jsonify([s.to_dict() for s in rows]), 200


@sales_bp.get("/filter")
@require_roles("ADMIN")
def filter_sales():
    start_str = request.args.get("start_date") or request.args.get("startDate")
    end_str = request.args.get("end_date") or request.args.get("endDate")

    if not start_str or not end_str:
        return jsonify(error="Start date and end date are required"), 400

    try:
        start = parse_date(start_str)
        end = parse_date(end_str)
    except ValueError:
        return jsonify(error="Invalid date format. Use YYYY-MM-DD"), 400

    # dates are stored as ISO strings, so lexical order is date order
    rows = (
        Sale.query
        .filter(Sale.date >= start.isoformat(), Sale.date <= end.isoformat())
        .order_by(Sale.date.asc(), Sale.id.asc())
        .all()
    )
    return jsonify([s.to_dict() for s in rows]), 200

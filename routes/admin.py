from flask import Blueprint, jsonify, g, request
from security.rbac import require_roles
from utils.audit import log_event
from models import db
from models.audit_log import AuditLog
from models.user import User, Role
from utils.roles import filter_role_names, normalize_role_names

admin_bp = Blueprint("admin", __name__, url_prefix="/admin")


@admin_bp.get("/users")
@require_roles("ADMIN")
def list_users():
    role_filter = (request.args.get("role") or "").strip().upper()
    q = User.query
    if role_filter:
        q = q.join(User.roles).filter(Role.name == role_filter)

    users = q.order_by(User.created_at.desc()).limit(200).all()
    return jsonify([
        {
            "id": u.id,
            "email": u.email,
            "full_name": u.full_name,
            "phone_number": u.phone_number,
            "roles": filter_role_names(u.roles),
            "created_at": u.created_at.isoformat(),
        }
        for u in users
    ]), 200


@admin_bp.post("/users/<int:user_id>/roles")
@require_roles("ADMIN")
def update_user_roles(user_id: int):
    data = request.get_json(silent=True) or {}
    roles = data.get("roles")
    if not isinstance(roles, list) or not roles:
        return jsonify(error="roles must be a non-empty list"), 400

    try:
        names = normalize_role_names(roles)
    except ValueError as exc:
        return jsonify(error=str(exc)), 400

    user = db.session.get(User, user_id)
    if not user:
        return jsonify(error="User not found"), 404

    if user.id == g.user.id and "ADMIN" not in names:
        return jsonify(error="Admins cannot remove their own ADMIN role"), 400

    role_rows = Role.query.filter(Role.name.in_(names)).all()
    if len(role_rows) != len(names):
        return jsonify(error="Role not seeded"), 400

    before = filter_role_names(user.roles)
    user.roles = role_rows
    db.session.commit()

    log_event(
        "ADMIN_USER_ROLES_UPDATE",
        user_id=g.user.id,
        entity="user",
        entity_id=user.id,
        metadata={"from": before, "to": names},
    )
    return jsonify(id=user.id, roles=filter_role_names(user.roles)), 200


@admin_bp.get("/audit-logs")
@require_roles("ADMIN")
def list_audit_logs():
    limit = request.args.get("limit", type=int) or 200
    limit = max(1, min(limit, 500))

    action = request.args.get("action")
    entity = request.args.get("entity")
    user_id = request.args.get("user_id", type=int)

    q = AuditLog.query
    if action:
        q = q.filter(AuditLog.action == action)
    if entity:
        q = q.filter(AuditLog.entity == entity)
    if user_id is not None:
        q = q.filter(AuditLog.user_id == user_id)

    rows = q.order_by(AuditLog.timestamp.desc(), AuditLog.id.desc()).limit(limit).all()
    return jsonify([
        {
            "id": r.id,
            "created_at": r.timestamp.isoformat() if r.timestamp else None,
            "user_id": r.user_id,
            "action": r.action,
            "entity": r.entity,
            "entity_id": r.entity_id,
            "ip": r.ip,
            "user_agent": r.user_agent,
            "metadata": r.metadata_json,
        }
        for r in rows
    ]), 200

from flask import Blueprint, jsonify

from models.category import Category
from models.service import Service
from models.price_item import PriceItem
from models.review import Review

catalog_bp = Blueprint("catalog", __name__)


def _service_dict(s):
    return {
        "id": s.id,
        "name": s.name,
        "description": s.description,
        "min_price": s.min_price,
        "max_price": s.max_price,
        "category_id": s.category_id,
        "icon": s.icon,
        "image_url": s.image_url,
        "featured": s.featured,
    }


def _price_dict(p):
    return {
        "id": p.id,
        "name": p.name,
        "min_price": p.min_price,
        "max_price": p.max_price,
        "category_id": p.category_id,
    }


@catalog_bp.get("/categories")
def list_categories():
    rows = Category.query.order_by(Category.id.asc()).all()
    return jsonify([{"id": c.id, "name": c.name, "icon": c.icon} for c in rows]), 200


@catalog_bp.get("/services/all")
def list_services():
    rows = Service.query.order_by(Service.id.asc()).all()
    return jsonify([_service_dict(s) for s in rows]), 200


@catalog_bp.get("/services/featured")
def featured_services():
    rows = Service.query.filter_by(featured=True).order_by(Service.id.asc()).all()
    return jsonify([_service_dict(s) for s in rows]), 200


@catalog_bp.get("/services/<int:category_id>")
def services_by_category(category_id: int):
    rows = Service.query.filter_by(category_id=category_id).order_by(Service.id.asc()).all()
    return jsonify([_service_dict(s) for s in rows]), 200


@catalog_bp.get("/prices")
def list_prices():
    rows = PriceItem.query.order_by(PriceItem.category_id.asc(), PriceItem.id.asc()).all()
    return jsonify([_price_dict(p) for p in rows]), 200


@catalog_bp.get("/prices/<int:category_id>")
def prices_by_category(category_id: int):
    rows = PriceItem.query.filter_by(category_id=category_id).order_by(PriceItem.id.asc()).all()
    return jsonify([_price_dict(p) for p in rows]), 200


@catalog_bp.get("/reviews")
def list_reviews():
    rows = Review.query.order_by(Review.created_at.desc(), Review.id.desc()).all()
    return jsonify([r.to_dict() for r in rows]), 200

from datetime import datetime
from models.db import db

class Review(db.Model):
    __tablename__ = "reviews"

    id = db.Column(db.Integer, primary_key=True)
    client_name = db.Column(db.String(120), nullable=False)
    rating = db.Column(db.Float, nullable=False)  # 1..5, halves allowed
    comment = db.Column(db.Text, nullable=False)
    likes = db.Column(db.Integer, default=0, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "client_name": self.client_name,
            "rating": self.rating,
            "comment": self.comment,
            "likes": self.likes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

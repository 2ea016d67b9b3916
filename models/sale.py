from datetime import datetime
from models.db import db

class Sale(db.Model):
    __tablename__ = "sales"

    id = db.Column(db.Integer, primary_key=True)

    client_name = db.Column(db.String(120), nullable=False)
    service_id = db.Column(db.Integer, nullable=False)
    service_name = db.Column(db.String(120), nullable=False)  # snapshot at sale time

    amount = db.Column(db.Float, nullable=False)
    date = db.Column(db.String(10), nullable=False, index=True)  # YYYY-MM-DD
    payment_method = db.Column(db.String(40), nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    def to_dict(self):
        return {
            "id": self.id,
            "client_name": self.client_name,
            "service_id": self.service_id,
            "service_name": self.service_name,
            "amount": self.amount,
            "date": self.date,
            "payment_method": self.payment_method,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

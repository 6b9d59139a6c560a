from uuid import uuid4

from foodchain.extensions import db

class Food(db.Model):
    __tablename__ = "foods"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid4()))
    name = db.Column(db.String(150), nullable=False)
    category = db.Column(db.String(30))
    allergens = db.Column(db.JSON)
    is_safe = db.Column(db.Boolean, nullable=False, default=True)
    is_try_bite = db.Column(db.Boolean, nullable=False, default=False)
    user_id = db.Column(db.String(64), nullable=False, index=True)
    household_id = db.Column(db.String(64), index=True)
    created_at = db.Column(db.DateTime, server_default=db.func.now(), nullable=False)
    updated_at = db.Column(db.DateTime, server_default=db.func.now(), onupdate=db.func.now(), nullable=False)

    @property
    def owner_id(self):
        return self.household_id or self.user_id

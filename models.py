from db import db
from datetime import datetime, timezone

CONSULTATION_REQUESTS_TABLE = 'consultation_requests'

# Engagement types offered by the form's select control
INTEREST_TYPES = (
    "Sustainability Advisory",
    "AI Automation",
    "Hybrid (Sustainability + AI)",
    "Not Sure",
)


def _utcnow():
    return datetime.now(timezone.utc)


class ConsultationRequest(db.Model):
    __tablename__ = CONSULTATION_REQUESTS_TABLE

    id = db.Column(db.Integer, primary_key=True)
    full_name = db.Column(db.String(200), nullable=False)
    company_name = db.Column(db.String(200))
    email = db.Column(db.String(254), nullable=False)
    challenge_description = db.Column(db.Text, nullable=False)
    interest_type = db.Column(db.String(64))
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)

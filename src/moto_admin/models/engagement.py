"""
Customer feedback and ambassador applications.
"""

from typing import Optional

from moto_admin.models.record import Record

AMBASSADOR_STATUSES = ("pending", "approved", "rejected")


class Feedback(Record):
    full_name: Optional[str] = None
    email: Optional[str] = None
    feedback_type: Optional[str] = None
    message: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None


class Ambassador(Record):
    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[str] = "pending"
    admin_notes: Optional[str] = None
    created_at: Optional[str] = None

# horeca/models/business.py
from tortoise import Model, fields
from datetime import datetime, timezone


class Business(Model):
    """
    Horeca business registered through onboarding. Owns menu items.
    """

    id = fields.UUIDField(pk=True)
    manager_first_name = fields.CharField(max_length=100)
    manager_last_name = fields.CharField(max_length=100)
    horeca_name = fields.CharField(max_length=255)
    address = fields.CharField(max_length=500)
    phone_number = fields.CharField(max_length=30)
    email = fields.CharField(max_length=255, unique=True, index=True)
    password_hash = fields.CharField(max_length=128)
    created_at = fields.DatetimeField(auto_now_add=True)

    menu_items: fields.ReverseRelation["MenuItem"]
    sessions: fields.ReverseRelation["Session"]

    class Meta:
        table = "business_info"

    def __str__(self) -> str:
        return f"{self.horeca_name} ({self.email})"


class Session(Model):
    """
    Server-side session keyed by the hash of the cookie token.
    """

    id = fields.UUIDField(pk=True)
    business = fields.ForeignKeyField("models.Business", related_name="sessions")
    session_token_hash = fields.CharField(max_length=64, unique=True, index=True)
    data = fields.JSONField(default=dict)
    expires_at = fields.DatetimeField()
    created_at = fields.DatetimeField(auto_now_add=True)
    last_activity = fields.DatetimeField(auto_now=True)
    user_agent = fields.TextField(null=True)
    ip_address = fields.CharField(max_length=45, null=True)

    class Meta:
        table = "sessions"
        ordering = ["-created_at"]

    def is_expired(self) -> bool:
        """
        Check if session is expired.

        Returns:
            True if session is expired, False otherwise
        """
        now = datetime.now(timezone.utc)
        expires_at = self.expires_at

        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)

        return now > expires_at

    def __str__(self) -> str:
        return f"Session for business {self.business_id} (expires: {self.expires_at})"

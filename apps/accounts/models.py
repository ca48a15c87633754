from django.contrib.auth.models import AbstractUser
from django.db import models
from django.db.models import UniqueConstraint
from django.db.models.functions import Lower

from apps.common.models import BaseModel


class User(BaseModel, AbstractUser):
    """Back-office user with UUID primary key and timestamps.

    Email is the login identifier (case-insensitive, unique). `tenant` links
    the user to the store they manage; users without a tenant can sign in
    but are refused by every admin page.
    """

    ROLE_CHOICES = [
        ("OWNER", "Owner"),
        ("STAFF", "Staff"),
    ]

    email = models.EmailField("email address", blank=True)
    name = models.CharField(max_length=160, blank=True)
    role = models.CharField(max_length=8, choices=ROLE_CHOICES, default="STAFF")
    tenant = models.ForeignKey(
        "tenants.Tenant", on_delete=models.SET_NULL, null=True, blank=True, related_name="users"
    )

    class Meta(AbstractUser.Meta):
        constraints = [
            UniqueConstraint(
                Lower("email"), name="accounts_user_email_lower_uniq", violation_error_message="E-mail já cadastrado"
            )
        ]

    def save(self, *args, **kwargs):
        if self.email:
            self.email = str(self.email).strip().lower()
        return super().save(*args, **kwargs)

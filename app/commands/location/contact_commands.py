"""Commands that add and remove directed contact edges."""

from __future__ import annotations

from app.commands.base import BaseCommand
from app.exceptions import NotFoundError, ValidationError
from app.models.contact import UserContact
from app.services.contact_service import ContactService
from app.services.user_service import UserService


class AddContactCommand(BaseCommand):
    """Add owner -> contact. Repeating the call keeps a single edge."""

    def execute(self, owner_id: int, contact_user_id: int) -> UserContact:
        if owner_id == contact_user_id:
            raise ValidationError("Cannot add yourself as a contact")

        with self.transaction():
            if not UserService(self.db).user_exists(contact_user_id):
                raise NotFoundError("Contact user not found")
            contact = ContactService(self.db).upsert_contact(owner_id, contact_user_id)

        self.logger.info("Contact %s -> %s saved", owner_id, contact_user_id)
        return contact


class RemoveContactCommand(BaseCommand):
    def execute(self, contact_id: int, owner_id: int) -> None:
        with self.transaction():
            if not ContactService(self.db).delete_contact(contact_id, owner_id):
                raise NotFoundError("Contact not found")

        self.logger.info("Contact %s removed by %s", contact_id, owner_id)

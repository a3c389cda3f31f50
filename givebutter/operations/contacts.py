# =============================================================================
# givebutter/operations/contacts.py  —  Contacts
# =============================================================================
#
# delete_contact archives (soft delete) with DELETE /contacts/{id}.
# restore_contact reverses it with PATCH /contacts/{id}/restore and no body.
# The verb asymmetry is the API's contract and must stay as is.
# =============================================================================

from givebutter.models import OperationDescriptor
from givebutter.operations.base import (
    PAGE_DESCRIPTION,
    ArgumentsModel,
    Integer,
    optional,
    required,
)


class ListContactsArgs(ArgumentsModel):
    page: Integer = optional(PAGE_DESCRIPTION)
    email: str = optional("Filter by email address")


class ContactIdArgs(ArgumentsModel):
    contact_id: Integer = required("The contact ID")


class CreateContactArgs(ArgumentsModel):
    email: str = required("Contact email address")
    first_name: str = optional("Contact first name")
    last_name: str = optional("Contact last name")
    phone: str = optional("Contact phone number")
    address_line1: str = optional("Street address line 1")
    address_line2: str = optional("Street address line 2")
    city: str = optional("City")
    state: str = optional("State/Province")
    zipcode: str = optional("ZIP/Postal code")
    country: str = optional("Country code (e.g., US)")


class UpdateContactArgs(ArgumentsModel):
    contact_id: Integer = required("The contact ID")
    email: str = optional("Contact email address")
    first_name: str = optional("Contact first name")
    last_name: str = optional("Contact last name")
    phone: str = optional("Contact phone number")
    address_line1: str = optional("Street address line 1")
    city: str = optional("City")
    state: str = optional("State/Province")
    zipcode: str = optional("ZIP/Postal code")
    country: str = optional("Country code")


class ArchiveContactArgs(ArgumentsModel):
    contact_id: Integer = required("The contact ID to archive")


class RestoreContactArgs(ArgumentsModel):
    contact_id: Integer = required("The contact ID to restore")


OPERATIONS = [
    OperationDescriptor(
        name="list_contacts",
        description="List all contacts in your Givebutter account",
        method="GET",
        path="/contacts",
        arguments=ListContactsArgs,
    ),
    OperationDescriptor(
        name="get_contact",
        description="Get details of a specific contact by ID",
        method="GET",
        path="/contacts/{contact_id}",
        arguments=ContactIdArgs,
    ),
    OperationDescriptor(
        name="create_contact",
        description="Create a new contact",
        method="POST",
        path="/contacts",
        arguments=CreateContactArgs,
    ),
    OperationDescriptor(
        name="update_contact",
        description="Update an existing contact",
        method="PATCH",
        path="/contacts/{contact_id}",
        arguments=UpdateContactArgs,
    ),
    OperationDescriptor(
        name="delete_contact",
        description="Archive a contact (soft delete)",
        method="DELETE",
        path="/contacts/{contact_id}",
        arguments=ArchiveContactArgs,
    ),
    OperationDescriptor(
        name="restore_contact",
        description="Restore an archived contact",
        method="PATCH",
        path="/contacts/{contact_id}/restore",
        arguments=RestoreContactArgs,
    ),
]

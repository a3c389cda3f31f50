# =============================================================================
# givebutter/operations/donations.py  —  Money-side resources (read only)
# =============================================================================
# Transactions, tickets, payouts, recurring plans and funds.  The API only
# offers list and get for these, with a few optional filters on the lists.
# =============================================================================

from givebutter.models import OperationDescriptor
from givebutter.operations.base import (
    PAGE_DESCRIPTION,
    ArgumentsModel,
    Integer,
    optional,
    required,
)


class PageArgs(ArgumentsModel):
    page: Integer = optional(PAGE_DESCRIPTION)


class ListTransactionsArgs(ArgumentsModel):
    page: Integer = optional(PAGE_DESCRIPTION)
    campaign_id: Integer = optional("Filter by campaign ID")
    contact_id: Integer = optional("Filter by contact ID")


class TransactionIdArgs(ArgumentsModel):
    transaction_id: Integer = required("The transaction ID")


class ListTicketsArgs(ArgumentsModel):
    page: Integer = optional(PAGE_DESCRIPTION)
    campaign_id: Integer = optional("Filter by campaign ID")


class TicketIdArgs(ArgumentsModel):
    ticket_id: Integer = required("The ticket ID")


class PayoutIdArgs(ArgumentsModel):
    payout_id: Integer = required("The payout ID")


class ListPlansArgs(ArgumentsModel):
    page: Integer = optional(PAGE_DESCRIPTION)
    contact_id: Integer = optional("Filter by contact ID")


class PlanIdArgs(ArgumentsModel):
    plan_id: Integer = required("The plan ID")


class FundIdArgs(ArgumentsModel):
    fund_id: Integer = required("The fund ID")


OPERATIONS = [
    # Transactions
    OperationDescriptor(
        name="list_transactions",
        description="List all transactions",
        method="GET",
        path="/transactions",
        arguments=ListTransactionsArgs,
    ),
    OperationDescriptor(
        name="get_transaction",
        description="Get details of a specific transaction by ID",
        method="GET",
        path="/transactions/{transaction_id}",
        arguments=TransactionIdArgs,
    ),
    # Tickets
    OperationDescriptor(
        name="list_tickets",
        description="List all tickets",
        method="GET",
        path="/tickets",
        arguments=ListTicketsArgs,
    ),
    OperationDescriptor(
        name="get_ticket",
        description="Get details of a specific ticket",
        method="GET",
        path="/tickets/{ticket_id}",
        arguments=TicketIdArgs,
    ),
    # Payouts
    OperationDescriptor(
        name="list_payouts",
        description="List all payouts",
        method="GET",
        path="/payouts",
        arguments=PageArgs,
    ),
    OperationDescriptor(
        name="get_payout",
        description="Get details of a specific payout",
        method="GET",
        path="/payouts/{payout_id}",
        arguments=PayoutIdArgs,
    ),
    # Plans (recurring donations)
    OperationDescriptor(
        name="list_plans",
        description="List all recurring donation plans",
        method="GET",
        path="/plans",
        arguments=ListPlansArgs,
    ),
    OperationDescriptor(
        name="get_plan",
        description="Get details of a specific recurring donation plan",
        method="GET",
        path="/plans/{plan_id}",
        arguments=PlanIdArgs,
    ),
    # Funds
    OperationDescriptor(
        name="list_funds",
        description="List all funds/designations",
        method="GET",
        path="/funds",
        arguments=PageArgs,
    ),
    OperationDescriptor(
        name="get_fund",
        description="Get details of a specific fund",
        method="GET",
        path="/funds/{fund_id}",
        arguments=FundIdArgs,
    ),
]

# =============================================================================
# givebutter/operations/campaigns.py  —  Campaigns, members and teams
# =============================================================================
#
# Members and teams are nested under a campaign, so their paths carry two
# identifiers.  Deleting a campaign or a member uses the DELETE verb like
# delete_contact; whether the platform archives or removes them is up to
# the API (only contacts have a restore endpoint).
# =============================================================================

from typing import Literal

from givebutter.models import OperationDescriptor
from givebutter.operations.base import (
    PAGE_DESCRIPTION,
    ArgumentsModel,
    Integer,
    IsoDateTime,
    optional,
    required,
)

CampaignScope = Literal["owned", "beneficiary", "chapter"]
CampaignType = Literal["standard", "event", "sweepstakes", "p2p"]


# --- Campaigns ---------------------------------------------------------------

class ListCampaignsArgs(ArgumentsModel):
    page: Integer = optional(PAGE_DESCRIPTION)
    scope: CampaignScope = optional("Filter by campaign scope")


class CampaignIdArgs(ArgumentsModel):
    campaign_id: Integer = required("The campaign ID")


class CreateCampaignArgs(ArgumentsModel):
    title: str = required("Campaign title")
    type: CampaignType = required("Campaign type - affects pricing tier")
    goal: Integer = optional("Fundraising goal in cents")
    description: str = optional("Campaign description")
    end_at: IsoDateTime = optional("End date in ISO 8601 format")


class UpdateCampaignArgs(ArgumentsModel):
    campaign_id: Integer = required("The campaign ID")
    title: str = optional("Campaign title")
    goal: Integer = optional("Fundraising goal in cents")
    description: str = optional("Campaign description")
    end_at: IsoDateTime = optional("End date in ISO 8601 format")


class DeleteCampaignArgs(ArgumentsModel):
    campaign_id: Integer = required("The campaign ID to delete")


# --- Members & teams ---------------------------------------------------------

class CampaignPageArgs(ArgumentsModel):
    campaign_id: Integer = required("The campaign ID")
    page: Integer = optional(PAGE_DESCRIPTION)


class CampaignMemberArgs(ArgumentsModel):
    campaign_id: Integer = required("The campaign ID")
    member_id: Integer = required("The member ID")


class DeleteCampaignMemberArgs(ArgumentsModel):
    campaign_id: Integer = required("The campaign ID")
    member_id: Integer = required("The member ID to remove")


class CampaignTeamArgs(ArgumentsModel):
    campaign_id: Integer = required("The campaign ID")
    team_id: Integer = required("The team ID")


OPERATIONS = [
    OperationDescriptor(
        name="list_campaigns",
        description="List all campaigns associated with your Givebutter account",
        method="GET",
        path="/campaigns",
        arguments=ListCampaignsArgs,
    ),
    OperationDescriptor(
        name="get_campaign",
        description="Get details of a specific campaign by ID",
        method="GET",
        path="/campaigns/{campaign_id}",
        arguments=CampaignIdArgs,
    ),
    OperationDescriptor(
        name="create_campaign",
        description="Create a new campaign",
        method="POST",
        path="/campaigns",
        arguments=CreateCampaignArgs,
    ),
    OperationDescriptor(
        name="update_campaign",
        description="Update an existing campaign",
        method="PATCH",
        path="/campaigns/{campaign_id}",
        arguments=UpdateCampaignArgs,
    ),
    OperationDescriptor(
        name="delete_campaign",
        description="Delete a campaign",
        method="DELETE",
        path="/campaigns/{campaign_id}",
        arguments=DeleteCampaignArgs,
    ),
    OperationDescriptor(
        name="list_campaign_members",
        description="List all members of a campaign",
        method="GET",
        path="/campaigns/{campaign_id}/members",
        arguments=CampaignPageArgs,
    ),
    OperationDescriptor(
        name="get_campaign_member",
        description="Get details of a specific campaign member",
        method="GET",
        path="/campaigns/{campaign_id}/members/{member_id}",
        arguments=CampaignMemberArgs,
    ),
    OperationDescriptor(
        name="delete_campaign_member",
        description="Remove a member from a campaign",
        method="DELETE",
        path="/campaigns/{campaign_id}/members/{member_id}",
        arguments=DeleteCampaignMemberArgs,
    ),
    OperationDescriptor(
        name="list_campaign_teams",
        description="List all teams in a campaign",
        method="GET",
        path="/campaigns/{campaign_id}/teams",
        arguments=CampaignPageArgs,
    ),
    OperationDescriptor(
        name="get_campaign_team",
        description="Get details of a specific team in a campaign",
        method="GET",
        path="/campaigns/{campaign_id}/teams/{team_id}",
        arguments=CampaignTeamArgs,
    ),
]

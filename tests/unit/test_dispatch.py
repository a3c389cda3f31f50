import json
import os
import sys
import unittest
from unittest.mock import patch

import httpx

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from givebutter.config import API_BASE_URL
from givebutter.dispatch import format_result, invoke
from givebutter.errors import (
    InvalidArgumentError,
    MissingCredentialError,
    RemoteFailureError,
    UnknownOperationError,
)


class FakeApi:
    """Records requests and answers every one with the same response."""

    def __init__(self, status: int = 200, json_body=None, text: str | None = None):
        self.status = status
        self.json_body = {"data": []} if json_body is None and text is None else json_body
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status, text=self.text)
        if self.status == 204:
            return httpx.Response(204)
        return httpx.Response(self.status, json=self.json_body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


class DispatchTestCase(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        patcher = patch.dict(os.environ, {"GIVEBUTTER_API_KEY": "test-key"})
        patcher.start()
        self.addCleanup(patcher.stop)

    async def call(self, api: FakeApi, name: str, arguments=None):
        async with api.client() as client:
            return await invoke(name, arguments, client=client)


class TestScenarios(DispatchTestCase):
    async def test_list_campaigns_with_scope(self) -> None:
        api = FakeApi()
        await self.call(api, "list_campaigns", {"scope": "owned"})
        self.assertEqual(api.last.method, "GET")
        self.assertEqual(str(api.last.url), f"{API_BASE_URL}/campaigns?scope=owned")

    async def test_list_campaigns_without_arguments(self) -> None:
        api = FakeApi()
        await self.call(api, "list_campaigns")
        self.assertEqual(str(api.last.url), f"{API_BASE_URL}/campaigns")
        self.assertEqual(api.last.content, b"")

    async def test_create_campaign_body(self) -> None:
        api = FakeApi(status=201, json_body={"id": 1})
        result = await self.call(
            api,
            "create_campaign",
            {"title": "Spring Fundraiser", "type": "standard", "goal": 1000000},
        )
        self.assertEqual(api.last.method, "POST")
        self.assertEqual(str(api.last.url), f"{API_BASE_URL}/campaigns")
        self.assertEqual(
            json.loads(api.last.content),
            {"title": "Spring Fundraiser", "type": "standard", "goal": 1000000},
        )
        self.assertEqual(result, {"id": 1})

    async def test_delete_and_restore_contact(self) -> None:
        api = FakeApi(status=204)
        deleted = await self.call(api, "delete_contact", {"contact_id": 42})
        self.assertEqual(api.last.method, "DELETE")
        self.assertEqual(str(api.last.url), f"{API_BASE_URL}/contacts/42")
        self.assertEqual(deleted, {"success": True})

        api = FakeApi(json_body={"id": 42})
        await self.call(api, "restore_contact", {"contact_id": 42})
        self.assertEqual(api.last.method, "PATCH")
        self.assertEqual(str(api.last.url), f"{API_BASE_URL}/contacts/42/restore")
        self.assertEqual(api.last.content, b"")

    async def test_get_transaction_remote_500(self) -> None:
        api = FakeApi(status=500, text="upstream exploded")
        with self.assertRaises(RemoteFailureError) as ctx:
            await self.call(api, "get_transaction", {"transaction_id": 67890})
        self.assertEqual(str(api.last.url), f"{API_BASE_URL}/transactions/67890")
        self.assertEqual(ctx.exception.status, 500)
        self.assertEqual(
            str(ctx.exception),
            "API request failed: 500 Internal Server Error - upstream exploded",
        )

    async def test_remote_404_message(self) -> None:
        api = FakeApi(status=404, text='{"message":"Not found"}')
        with self.assertRaises(RemoteFailureError) as ctx:
            await self.call(api, "get_fund", {"fund_id": 1})
        self.assertIn("404", str(ctx.exception))
        self.assertIn('{"message":"Not found"}', str(ctx.exception))


class TestArgumentShaping(DispatchTestCase):
    async def test_update_sends_only_supplied_fields(self) -> None:
        api = FakeApi()
        await self.call(api, "update_contact", {"contact_id": 7, "city": "Austin"})
        self.assertEqual(str(api.last.url), f"{API_BASE_URL}/contacts/7")
        self.assertEqual(json.loads(api.last.content), {"city": "Austin"})

    async def test_update_with_no_fields_sends_empty_object(self) -> None:
        api = FakeApi()
        await self.call(api, "update_campaign", {"campaign_id": 5})
        self.assertEqual(json.loads(api.last.content), {})

    async def test_empty_string_is_a_supplied_value(self) -> None:
        api = FakeApi()
        await self.call(api, "update_campaign", {"campaign_id": 5, "description": ""})
        self.assertEqual(json.loads(api.last.content), {"description": ""})

    async def test_list_filters_go_to_query(self) -> None:
        api = FakeApi()
        await self.call(api, "list_transactions", {"page": 2, "campaign_id": 10, "contact_id": 3})
        self.assertEqual(
            str(api.last.url),
            f"{API_BASE_URL}/transactions?page=2&campaign_id=10&contact_id=3",
        )

    async def test_nested_path(self) -> None:
        api = FakeApi(status=204)
        await self.call(api, "delete_campaign_member", {"campaign_id": 3, "member_id": 9})
        self.assertEqual(api.last.method, "DELETE")
        self.assertEqual(str(api.last.url), f"{API_BASE_URL}/campaigns/3/members/9")

    async def test_path_id_only_list_uses_remaining_args_as_query(self) -> None:
        api = FakeApi()
        await self.call(api, "list_campaign_teams", {"campaign_id": 3, "page": 4})
        self.assertEqual(str(api.last.url), f"{API_BASE_URL}/campaigns/3/teams?page=4")

    async def test_numeric_string_id_is_coerced(self) -> None:
        api = FakeApi()
        await self.call(api, "get_contact", {"contact_id": "42"})
        self.assertEqual(str(api.last.url), f"{API_BASE_URL}/contacts/42")

    async def test_iso_end_date_passes_through(self) -> None:
        api = FakeApi()
        await self.call(
            api,
            "create_campaign",
            {"title": "Gala", "type": "event", "end_at": "2025-12-31T23:59:59Z"},
        )
        self.assertEqual(json.loads(api.last.content)["end_at"], "2025-12-31T23:59:59Z")

    async def test_iso_date_forms(self) -> None:
        for end_at in ("2025-12-31", "20251231", "2025-12-31T23:59:59.1Z", "2025-12-31T23:59:59+02:00"):
            api = FakeApi()
            await self.call(api, "update_campaign", {"campaign_id": 1, "end_at": end_at})
            self.assertEqual(json.loads(api.last.content), {"end_at": end_at})


class TestFailures(DispatchTestCase):
    async def assertInvalid(self, name: str, arguments: dict) -> InvalidArgumentError:
        api = FakeApi()
        with self.assertRaises(InvalidArgumentError) as ctx:
            await self.call(api, name, arguments)
        self.assertEqual(api.requests, [])
        self.assertEqual(ctx.exception.operation, name)
        return ctx.exception

    async def test_missing_required_field(self) -> None:
        exc = await self.assertInvalid("create_campaign", {"type": "standard"})
        self.assertIn("title", str(exc))

    async def test_enum_out_of_range(self) -> None:
        exc = await self.assertInvalid("create_campaign", {"title": "X", "type": "gala"})
        self.assertIn("type", str(exc))
        await self.assertInvalid("list_campaigns", {"scope": "everyone"})

    async def test_wrong_type(self) -> None:
        await self.assertInvalid("get_campaign", {"campaign_id": "abc"})
        await self.assertInvalid("list_contacts", {"page": "first"})

    async def test_bool_is_rejected(self) -> None:
        exc = await self.assertInvalid("delete_contact", {"contact_id": True})
        self.assertIn("contact_id", str(exc))
        await self.assertInvalid("delete_campaign", {"campaign_id": False})
        await self.assertInvalid("list_contacts", {"page": True})
        await self.assertInvalid("create_campaign", {"title": "X", "type": "standard", "goal": True})

    async def test_explicit_null_is_rejected(self) -> None:
        await self.assertInvalid("update_campaign", {"campaign_id": 1, "title": None})

    async def test_unknown_argument(self) -> None:
        await self.assertInvalid("get_fund", {"fund_id": 1, "expand": "all"})

    async def test_bad_iso_date(self) -> None:
        await self.assertInvalid("update_campaign", {"campaign_id": 1, "end_at": "next friday"})

    async def test_validation_happens_before_credential_check(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            await self.assertInvalid("get_campaign", {})

    async def test_missing_credential_blocks_network(self) -> None:
        api = FakeApi()
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(MissingCredentialError) as ctx:
                await self.call(api, "list_funds")
        self.assertIn("GIVEBUTTER_API_KEY", str(ctx.exception))
        self.assertEqual(api.requests, [])

    async def test_unknown_operation(self) -> None:
        with self.assertRaises(UnknownOperationError) as ctx:
            await self.call(FakeApi(), "refund_everything")
        self.assertIsInstance(ctx.exception, KeyError)
        self.assertEqual(str(ctx.exception), "Unknown operation 'refund_everything'")


class TestFormatResult(unittest.TestCase):
    def test_pretty_printed(self) -> None:
        self.assertEqual(format_result({"a": [1]}), '{\n  "a": [\n    1\n  ]\n}')


if __name__ == "__main__":
    unittest.main()

import json
import os
import sys
import unittest
from unittest.mock import patch

import httpx
from fastmcp import Client
from fastmcp.exceptions import ToolError

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from givebutter.operations import list_operations
from tools.mcp_server import build_server


class TestMcpServer(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, json={"data": [{"id": 1, "title": "Spring"}]})

        env = patch.dict(os.environ, {"GIVEBUTTER_API_KEY": "test-key"})
        env.start()
        self.addCleanup(env.stop)

        client = patch("givebutter.transport.build_client", side_effect=self._client)
        client.start()
        self.addCleanup(client.stop)

        self.server = build_server()

    def _handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.response

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self._handler))

    async def test_lists_every_operation(self) -> None:
        async with Client(self.server) as client:
            tools = await client.list_tools()
        self.assertEqual({t.name for t in tools}, {op.name for op in list_operations()})

    async def test_tool_schema_and_annotations(self) -> None:
        async with Client(self.server) as client:
            tools = {t.name: t for t in await client.list_tools()}

        get_campaign = tools["get_campaign"]
        self.assertEqual(get_campaign.description, "Get details of a specific campaign by ID")
        self.assertEqual(get_campaign.inputSchema["required"], ["campaign_id"])
        self.assertTrue(get_campaign.annotations.readOnlyHint)

        self.assertTrue(tools["delete_contact"].annotations.destructiveHint)
        self.assertTrue(tools["restore_contact"].annotations.idempotentHint)
        self.assertFalse(tools["create_contact"].annotations.idempotentHint)
        self.assertFalse(tools["create_contact"].annotations.readOnlyHint)

    async def test_success_is_one_pretty_json_text_block(self) -> None:
        async with Client(self.server) as client:
            result = await client.call_tool("list_campaigns", {"scope": "owned"})

        self.assertEqual(len(result.content), 1)
        self.assertEqual(result.content[0].type, "text")
        self.assertEqual(
            result.content[0].text,
            json.dumps({"data": [{"id": 1, "title": "Spring"}]}, indent=2),
        )
        self.assertEqual(
            str(self.requests[0].url), "https://api.givebutter.com/v1/campaigns?scope=owned"
        )

    async def test_no_content_acknowledgement(self) -> None:
        self.response = httpx.Response(204)
        async with Client(self.server) as client:
            result = await client.call_tool("delete_contact", {"contact_id": 42})
        self.assertEqual(json.loads(result.content[0].text), {"success": True})

    async def test_remote_failure_becomes_tool_error(self) -> None:
        self.response = httpx.Response(404, text='{"message":"Not found"}')
        async with Client(self.server) as client:
            with self.assertRaises(ToolError) as ctx:
                await client.call_tool("get_campaign", {"campaign_id": 99})
        self.assertIn('API request failed: 404 Not Found - {"message":"Not found"}', str(ctx.exception))

    async def test_missing_credential_becomes_tool_error(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            async with Client(self.server) as client:
                with self.assertRaises(ToolError) as ctx:
                    await client.call_tool("list_funds", {})
        self.assertIn("GIVEBUTTER_API_KEY environment variable is required", str(ctx.exception))
        self.assertEqual(self.requests, [])


if __name__ == "__main__":
    unittest.main()

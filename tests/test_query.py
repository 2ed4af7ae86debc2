"""
Tests for WorkflowQuery.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from zenaton.query import WorkflowQuery


@pytest.fixture
def fake_client():
    client = MagicMock()
    for method in (
        "find_workflow",
        "kill_workflow",
        "pause_workflow",
        "resume_workflow",
        "send_event",
    ):
        setattr(client, method, AsyncMock(return_value=method))
    return client


class TestWorkflowQuery:
    """Test WorkflowQuery delegation to the client."""

    def test_custom_id_is_stringified(self, fake_client):
        query = WorkflowQuery("Order", 42, client=fake_client)
        assert query.custom_id == "42"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "action, method",
        [
            ("find", "find_workflow"),
            ("kill", "kill_workflow"),
            ("pause", "pause_workflow"),
            ("resume", "resume_workflow"),
        ],
    )
    async def test_instance_actions(self, fake_client, action, method):
        query = WorkflowQuery("Order", "order-42", client=fake_client)

        result = await getattr(query, action)()

        assert result == method
        getattr(fake_client, method).assert_awaited_once_with("Order", "order-42")

    @pytest.mark.asyncio
    async def test_send_event(self, fake_client):
        query = WorkflowQuery("Order", "order-42", client=fake_client)

        await query.send_event("Paid", {"amount": 10})

        fake_client.send_event.assert_awaited_once_with(
            "Order", "order-42", "Paid", {"amount": 10}
        )

    @pytest.mark.asyncio
    async def test_uses_global_client_by_default(self, fake_client):
        query = WorkflowQuery("Order", "order-42")

        with patch("zenaton.query.get_client", return_value=fake_client):
            await query.kill()

        fake_client.kill_workflow.assert_awaited_once_with("Order", "order-42")

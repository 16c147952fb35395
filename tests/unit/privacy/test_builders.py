"""Unit tests for client response builders."""

import pytest

from callguard.privacy.builders import (
    create_client_agent_response,
    create_client_call_response,
    create_client_campaign_response,
    create_client_lead_response,
    determine_outcome,
    display_cost,
    execution_duration,
    mask_agent_data,
    sanitize_ai_response,
    sanitize_execution,
)
from callguard.privacy.encryption import FieldCipher
from callguard.privacy.masking import SYSTEM_PROMPT_MARKER
from callguard.privacy.validation import validate_client_response


@pytest.fixture
def lead() -> dict:
    return {
        "id": "lead-1",
        "name": "Ravi",
        "phone_number": "+919876543210",
        "email": "ravi@example.com",
        "stage": "interested",
        "interest_level": "high",
        "call_status": "completed",
        "call_summary": "Wants a demo",
        "sheet_row_id": 42,
        "client_id": "tenant-a",
        "created_at": "2026-01-01T00:00:00Z",
        "updated_at": "2026-01-02T00:00:00Z",
    }


@pytest.fixture
def execution() -> dict:
    """A raw voice provider execution."""
    return {
        "id": "exec-1",
        "status": "completed",
        "transcript": "Agent: Hi\nUser: Hello",
        "summary": "Short call",
        "created_at": "2026-01-01T10:00:00Z",
        "initiated_at": "2026-01-01T10:00:05Z",
        "updated_at": "2026-01-01T10:02:00Z",
        "total_cost": 3.25,
        "cost_breakdown": {"llm": 1.0, "telephony": 2.25},
        "usage_breakdown": {"tokens": 900},
        "latency_data": {"ttfb": 300},
        "provider": "plivo",
        "batch_id": "batch-9",
        "telephony_data": {
            "duration": "94.6",
            "to_number": "+919876543210",
            "from_number": "+918000000001",
            "recording_url": "https://cdn.provider.example/rec.mp3",
            "provider_call_id": "p-1",
        },
        "extracted_data": {"budget": 5000},
    }


class TestCallResponse:
    """Tests for create_client_call_response."""

    def test_allow_list(self, cipher: FieldCipher) -> None:
        call = {
            "id": "call-1",
            "status": "completed",
            "connected": True,
            "duration_seconds": 120,
            "transcript": "hello",
            "summary": None,
            "external_call_id": "ext-1",
            "recording_url": "https://cdn.provider.example/rec.mp3",
            "agent": {"name": "Priya", "system_prompt": "secret"},
            "metadata": {"source": "campaign", "llm_model": "gpt", "is_retry": False},
        }
        response = create_client_call_response(call, cipher=cipher)

        assert response["id"] == "call-1"
        assert "external_call_id" not in response
        assert response["recording_url"] == "proxy:recording:call-1"
        assert response["agent"] == {"name": "Priya"}
        assert response["metadata"] == {"source": "campaign", "is_retry": False, "campaign_id": None}
        assert cipher.decrypt(response["transcript"]) == "hello"
        assert response["summary"] is None
        assert validate_client_response(response).valid

    def test_agent_without_name_gets_default(self, cipher: FieldCipher) -> None:
        response = create_client_call_response({"id": "c", "agent": {}}, cipher=cipher)
        assert response["agent"] == {"name": "Agent"}

    def test_missing_relations(self, cipher: FieldCipher) -> None:
        response = create_client_call_response({"id": None}, cipher=cipher)
        assert response["agent"] is None
        assert response["metadata"] is None
        assert response["recording_url"] is None


class TestAgentResponse:
    """Tests for create_client_agent_response."""

    def test_only_business_fields(self, cipher: FieldCipher) -> None:
        agent = {
            "id": "a-1",
            "agent_name": "Sales",
            "status": "active",
            "system_prompt": "You are...",
            "external_agent_id": "ext",
            "llm_model": "gpt",
        }
        response = create_client_agent_response(agent, cipher=cipher)
        assert response == {
            "id": "a-1",
            "agent_name": "Sales",
            "status": "active",
            "created_at": None,
            "updated_at": None,
        }


class TestLeadResponse:
    """Tests for create_client_lead_response."""

    def test_non_owner_gets_stub(self, cipher: FieldCipher, lead: dict) -> None:
        """Exactly the id and stage, nothing else."""
        response = create_client_lead_response(lead, is_owner=False, cipher=cipher)
        assert response == {"id": "lead-1", "stage": "interested"}

    def test_owner_view(self, cipher: FieldCipher, lead: dict) -> None:
        response = create_client_lead_response(lead, is_owner=True, cipher=cipher)
        assert response["phone_number"] == "*********3210"
        assert response["email"] == "r***@example.com"
        assert cipher.decrypt(response["call_summary"]) == "Wants a demo"
        assert "sheet_row_id" not in response
        assert "client_id" not in response

    def test_missing_phone_gets_placeholder(self, cipher: FieldCipher, lead: dict) -> None:
        """A lead without a number still shows the masked placeholder."""
        lead["phone_number"] = None
        response = create_client_lead_response(lead, is_owner=True, cipher=cipher)
        assert response["phone_number"] == "****"

    def test_missing_email_stays_none(self, cipher: FieldCipher, lead: dict) -> None:
        del lead["email"]
        response = create_client_lead_response(lead, is_owner=True, cipher=cipher)
        assert response["email"] is None


class TestCampaignResponse:
    """Tests for create_client_campaign_response."""

    def test_non_owner_forbidden(self, cipher: FieldCipher) -> None:
        response = create_client_campaign_response({"id": "cmp"}, is_owner=False, cipher=cipher)
        assert response == {"error": "Forbidden"}

    def test_owner_view_drops_sheet_and_api_settings(self, cipher: FieldCipher) -> None:
        campaign = {
            "id": "cmp",
            "name": "Diwali",
            "total_leads": 10,
            "google_sheet_id": "sheet",
            "api_key": "k",
        }
        response = create_client_campaign_response(campaign, is_owner=True, cipher=cipher)
        assert response["name"] == "Diwali"
        assert response["total_leads"] == 10
        assert "google_sheet_id" not in response
        assert "api_key" not in response


class TestSanitizeAiResponse:
    """Tests for sanitize_ai_response."""

    def test_only_answer_kept(self) -> None:
        raw = {"response": "Looks good", "model": "gpt-4o", "usage": {"tokens": 10}}
        assert sanitize_ai_response(raw) == {"response": "Looks good"}


class TestSanitizeExecution:
    """Tests for sanitize_execution."""

    def test_whitelist(self, cipher: FieldCipher, execution: dict) -> None:
        result = sanitize_execution(execution, cipher=cipher)

        for dropped in ("total_cost", "cost_breakdown", "usage_breakdown", "latency_data",
                        "provider", "batch_id"):
            assert dropped not in result
        assert result["execution_id"] == "exec-1"
        assert result["duration"] == 95
        assert result["connected"] is True
        assert result["outcome"] == "contacted"
        assert result["display_cost"] == "2 min"
        assert result["has_recording"] is True
        assert result["timestamps"]["started_at"] == "2026-01-01T10:00:05Z"

    def test_telephony_masked_and_proxied(self, cipher: FieldCipher, execution: dict) -> None:
        telephony = sanitize_execution(execution, cipher=cipher)["telephony_data"]
        assert telephony == {
            "to_number": "*********3210",
            "from_number": "*********0001",
            "duration": "95",
            "recording_url": "proxy:recording:exec-1",
        }

    def test_content_encrypted(self, cipher: FieldCipher, execution: dict) -> None:
        result = sanitize_execution(execution, cipher=cipher)
        assert cipher.decrypt(result["transcript"]) == "Agent: Hi\nUser: Hello"
        assert cipher.decrypt(result["summary"]) == "Short call"
        assert cipher.decrypt(result["extracted_data"]) == '{"budget":5000}'

    def test_empty_execution(self, cipher: FieldCipher) -> None:
        result = sanitize_execution({"id": "e"}, cipher=cipher)
        assert result["status"] == "initiated"
        assert result["outcome"] == "pending"
        assert result["duration"] is None
        assert result["transcript"] is None
        assert result["has_transcript"] is False
        assert "extracted_data" not in result
        assert result["telephony_data"]["to_number"] == "****"

    def test_short_call_not_connected(self, cipher: FieldCipher) -> None:
        result = sanitize_execution(
            {"id": "e", "status": "completed", "conversation_duration": 30}, cipher=cipher
        )
        assert result["connected"] is False
        assert result["outcome"] == "no_contact"


class TestExecutionHelpers:
    """Tests for duration, outcome and cost helpers."""

    @pytest.mark.parametrize(
        "execution,expected",
        [
            ({"telephony_data": {"duration": "44.5"}}, 45),
            ({"telephony_data": {"duration": 12}}, 12),
            ({"conversation_duration": 59.4}, 59),
            ({"telephony_data": {"duration": "n/a"}}, None),
            ({}, None),
        ],
    )
    def test_execution_duration(self, execution: dict, expected: int | None) -> None:
        assert execution_duration(execution) == expected

    @pytest.mark.parametrize(
        "status,connected,expected",
        [
            ("completed", True, "contacted"),
            ("completed", False, "no_contact"),
            ("failed", False, "failed"),
            ("no-answer", False, "no_answer"),
            ("queued", False, "pending"),
        ],
    )
    def test_determine_outcome(self, status: str, connected: bool, expected: str) -> None:
        assert determine_outcome(status, connected) == expected

    @pytest.mark.parametrize(
        "seconds,expected", [(None, None), (0, None), (1, "1 min"), (60, "1 min"), (61, "2 min")]
    )
    def test_display_cost(self, seconds: int | None, expected: str | None) -> None:
        assert display_cost(seconds) == expected


class TestMaskAgentData:
    """Tests for mask_agent_data."""

    def test_prompts_masked(self) -> None:
        agent = {
            "id": "a",
            "agent_prompts": {
                "task_1": {"system_prompt": "You are a sales agent", "language": "hi"},
                "task_2": {"system_prompt": ""},
            },
        }
        masked = mask_agent_data(agent)
        assert masked["agent_prompts"]["task_1"] == {
            "system_prompt": SYSTEM_PROMPT_MARKER,
            "language": "hi",
        }
        assert masked["agent_prompts"]["task_2"]["system_prompt"] is None
        assert agent["agent_prompts"]["task_1"]["system_prompt"] == "You are a sales agent"

    def test_agent_without_prompts_unchanged(self) -> None:
        assert mask_agent_data({"id": "a"}) == {"id": "a"}

import asyncio

import pytest

from wordsmith.config import get_settings
from wordsmith.errors import EmptyResponseError, UpstreamError, ValidationError
from wordsmith.exporting import serialize_definitions
from wordsmith.models import DefinitionRecord
from wordsmith.services import FlowState, ToolSession, get_tool
from wordsmith.services.prompts import COMPARE_LEVEL_INSTRUCTIONS, SYNONYM_LEVEL_INSTRUCTIONS

from helpers import SCENARIO_RESPONSE, FakeClient


def _session(tool="define"):
    return ToolSession(get_tool(tool))


def test_submit_parses_records_and_becomes_ready():
    session = _session()
    client = FakeClient(SCENARIO_RESPONSE)
    snapshot = asyncio.run(session.submit(" Happy,\njoyful ", client))

    assert session.state == FlowState.READY
    assert snapshot.terms == ["happy", "joyful"]
    assert [record.word for record in snapshot.records] == ["happy", "joyful"]
    assert snapshot.warning is None
    assert "Define these words: happy, joyful" in client.prompts[0]


def test_too_few_terms_fail_before_any_request():
    session = _session("compare")
    client = FakeClient("unused")
    with pytest.raises(ValidationError):
        asyncio.run(session.submit("happy, HAPPY", client))
    assert client.prompts == []
    assert session.state == FlowState.IDLE


def test_upstream_failure_moves_to_error():
    session = _session()
    client = FakeClient(UpstreamError("quota exceeded"))
    with pytest.raises(UpstreamError, match="quota exceeded"):
        asyncio.run(session.submit("happy", client))
    assert session.state == FlowState.ERROR
    assert session.error == "quota exceeded"


def test_empty_response_is_an_error_not_a_warning():
    session = _session()
    with pytest.raises(EmptyResponseError):
        asyncio.run(session.submit("happy", FakeClient("   ")))
    assert session.state == FlowState.ERROR
    assert session.records == []
    assert session.warning is None


def test_unparseable_response_is_ready_with_warning():
    session = _session("synonyms")
    snapshot = asyncio.run(session.submit("happy", FakeClient("No headings here.")))
    assert session.state == FlowState.READY
    assert snapshot.records == []
    assert snapshot.warning is not None
    assert snapshot.raw_text == "No headings here."


def test_next_submit_clears_previous_results():
    session = _session()
    asyncio.run(session.submit("happy, joyful", FakeClient(SCENARIO_RESPONSE)))
    with pytest.raises(UpstreamError):
        asyncio.run(session.submit("sad", FakeClient(UpstreamError("offline"))))
    assert session.records == []
    assert session.terms == ["sad"]


def test_stale_response_is_discarded():
    first_response = "happy | adjective\nDefinition: glad."
    second_response = "joyful | adjective\nDefinition: full of joy."

    async def scenario():
        gate = asyncio.Event()

        class GatedClient:
            calls = 0

            async def generate(self, prompt):
                GatedClient.calls += 1
                if GatedClient.calls == 1:
                    await gate.wait()
                    return first_response
                return second_response

        session = _session()
        client = GatedClient()
        first = asyncio.create_task(session.submit("happy", client))
        await asyncio.sleep(0)
        second = await session.submit("joyful", client)
        gate.set()
        return session, await first, second

    session, first, second = asyncio.run(scenario())
    assert first is None
    assert second.request_id == 2
    assert session.state == FlowState.READY
    assert [record.word for record in session.records] == ["joyful"]


def test_import_and_export_round_trip():
    session = _session()
    records = [DefinitionRecord(word="happy", definition="glad.", examples=["I am happy."])]
    snapshot = session.load_import(serialize_definitions(records))
    assert session.state == FlowState.READY
    assert snapshot.records == records
    assert snapshot.terms == ["happy"]

    other = _session()
    other.load_import(session.export_text())
    assert other.records == records


def test_export_without_results_is_rejected():
    with pytest.raises(ValidationError):
        _session().export_text()


def test_etymology_has_no_export_format():
    session = _session("etymology")
    asyncio.run(session.submit("salary", FakeClient('{"word": "salary"}')))
    with pytest.raises(ValidationError):
        session.export_text()


def test_unexpected_client_failure_is_reported_as_upstream_error():
    session = _session()
    client = FakeClient(RuntimeError("connection reset"))
    with pytest.raises(UpstreamError, match="connection reset"):
        asyncio.run(session.submit("happy", client))
    assert session.state == FlowState.ERROR
    assert session.error == "connection reset"


def test_configured_english_level_is_used_when_none_is_given(monkeypatch):
    monkeypatch.setenv("WORDSMITH_ENGLISH_LEVEL", "advanced")
    get_settings.cache_clear()
    try:
        client = FakeClient("Happy is cheerful.\n---DETAILS---\n## happy", "## happy")
        asyncio.run(_session("compare").submit("happy, glad", client))
        asyncio.run(_session("synonyms").submit("happy", client))
    finally:
        get_settings.cache_clear()

    assert COMPARE_LEVEL_INSTRUCTIONS["advanced"] in client.prompts[0]
    assert SYNONYM_LEVEL_INSTRUCTIONS["advanced"] in client.prompts[1]


def test_explicit_level_overrides_the_configured_one():
    client = FakeClient("Happy is cheerful.\n---DETAILS---\n## happy")
    asyncio.run(_session("compare").submit("happy, glad", client, level="beginner"))
    assert COMPARE_LEVEL_INSTRUCTIONS["beginner"] in client.prompts[0]

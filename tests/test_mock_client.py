"""Tests for the offline MockClient."""

import pytest

from prettymd.clients.mock_client import MOCK_MODEL, MockClient


@pytest.fixture
def client():
    return MockClient(delay=0)


def test_properties(client):
    assert client.provider_name == "Mock"
    assert client.is_available is True


@pytest.mark.asyncio
async def test_process_markdown_result(client):
    content = "# Title\n\nSome text here.\n"
    result = await client.process_markdown(content, "default")
    assert result.model == MOCK_MODEL
    assert result.tokens_used == len(content) // 4


@pytest.mark.asyncio
async def test_process_markdown_is_deterministic(client):
    content = "#Title\n\nThe app  is really very fast.\n-  item\n"
    first = await client.process_markdown(content, "technical")
    second = await client.process_markdown(content, "technical")
    assert first == second


def test_concise_removes_filler_words(client):
    assert client.transform("This is really very good.", "concise") == "This is good."


def test_technical_expands_abbreviations(client):
    text = "The app config lives in the repo."
    assert client.transform(text, "TECHNICAL") == (
        "The application configuration lives in the repository."
    )


def test_technical_respects_word_boundaries(client):
    assert client.transform("An application and a happy apple.", "technical") == (
        "An application and a happy apple."
    )


def test_friendly_and_unknown_styles_keep_wording(client):
    text = "The app is really fast."
    assert client.transform(text, "friendly") == text
    assert client.transform(text, "pirate") == text


def test_heading_spacing(client):
    assert client.transform("#Title\n##   Sub  ", "default") == "# Title\n## Sub"


def test_list_marker_spacing_keeps_indent(client):
    assert client.transform("-   one\n  *  two", "default") == "- one\n  * two"


def test_collapses_inner_spaces_only(client):
    assert client.transform("    indented  code  line   ", "default") == "    indented code line"


def test_code_blocks_untouched(client):
    text = "```python\nx  =  1   \n#comment\n```\n#Title"
    assert client.transform(text, "technical") == "```python\nx  =  1   \n#comment\n```\n# Title"

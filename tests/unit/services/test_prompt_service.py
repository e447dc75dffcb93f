"""
Unit tests for the prompts service.
"""

import pytest

from contextforge.exceptions import ResponseDecodeError
from contextforge.schemas.pagination import PromptListOptions
from contextforge.schemas.prompt_models import PromptArgument, PromptCreate, PromptUpdate


BASE = "https://gateway.example.com/api/"


@pytest.mark.unit
class TestPromptsService:
    """Tests for PromptsService."""

    def test_list(self, client, session, ctx):
        session.queue(body=[{"id": 1, "name": "greet", "template": "Hi {{ name }}"}])
        prompts, _ = client.prompts.list(ctx, PromptListOptions(tags="demo"))
        assert session.last_request.url == BASE + "prompts?tags=demo"
        assert prompts[0].id == "1"

    def test_render_with_arguments(self, client, session, ctx):
        session.queue(
            body={
                "messages": [{"role": "user", "content": {"type": "text", "text": "Hi Ada"}}],
                "description": "Greeting",
            }
        )
        result, _ = client.prompts.get(ctx, "greet", {"name": "Ada"})
        assert session.last_request.method == "POST"
        assert session.last_request.url == BASE + "prompts/greet"
        assert session.last_json() == {"args": {"name": "Ada"}}
        assert result.messages[0].content.text == "Hi Ada"

    def test_render_without_arguments(self, client, session, ctx):
        session.queue(body={"messages": []})
        client.prompts.get(ctx, 12)
        assert session.last_request.url == BASE + "prompts/12"
        assert session.last_json() == {}

    def test_create(self, client, session, ctx):
        session.queue(body={"id": 5, "name": "greet"})
        prompt = PromptCreate(
            name="greet",
            template="Hi {{ name }}",
            arguments=[PromptArgument(name="name", required=True)],
        )
        created, _ = client.prompts.create(ctx, prompt)
        assert session.last_json() == {
            "prompt": {
                "name": "greet",
                "template": "Hi {{ name }}",
                "arguments": [{"name": "name", "required": True}],
            }
        }
        assert created.id == "5"

    def test_update_with_integer_id(self, client, session, ctx):
        session.queue(body={"id": 5, "name": "greet"})
        client.prompts.update(ctx, 5, PromptUpdate(template="Hello {{ name }}"))
        assert session.last_request.method == "PUT"
        assert session.last_request.url == BASE + "prompts/5"
        assert session.last_json() == {"template": "Hello {{ name }}"}

    def test_delete(self, client, session, ctx):
        client.prompts.delete(ctx, 5)
        assert session.last_request.method == "DELETE"
        assert session.last_request.url == BASE + "prompts/5"

    def test_toggle(self, client, session, ctx):
        session.queue(body={"status": "success", "prompt": {"id": 5, "name": "greet", "isActive": True}})
        prompt, _ = client.prompts.toggle(ctx, 5, True)
        assert session.last_request.url == BASE + "prompts/5/toggle?activate=true"
        assert prompt.is_active is True

    def test_toggle_reply_without_prompt(self, client, session, ctx):
        session.queue(body={"status": "success"})
        prompt, _ = client.prompts.toggle(ctx, 5, False)
        assert prompt is None

    def test_malformed_prompt_in_toggle_reply(self, client, session, ctx):
        session.queue(body={"status": "success", "prompt": "oops"})
        with pytest.raises(ResponseDecodeError, match="^decode response body: "):
            client.prompts.toggle(ctx, 5, False)

# tests/test_assistant_config.py - Provider resolution and the placeholder reply
import pytest
from langchain_anthropic import ChatAnthropic
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from tasklist.core.config import Settings
from tasklist.core.constants import MessageRole
from tasklist.core.exceptions import ProviderConfigurationError
from tasklist.models.message import Message
from tasklist.services.assistant import AssistantConfig, build_task_assistant


def _settings(openai_key: str = "", anthropic_key: str = "") -> Settings:
    settings = Settings()
    settings.OPENAI_API_KEY = openai_key
    settings.ANTHROPIC_API_KEY = anthropic_key
    return settings


def test_openai_is_preferred():
    config = AssistantConfig.from_settings(_settings("sk-openai", "sk-anthropic"))
    assert config.provider == "openai"
    assert config.api_key == "sk-openai"
    assert config.model == "gpt-4o-mini"


def test_falls_back_to_anthropic():
    config = AssistantConfig.from_settings(_settings(anthropic_key="sk-anthropic"))
    assert config.provider == "anthropic"
    assert config.model == "claude-3-5-sonnet-20241022"


def test_no_provider_fails():
    with pytest.raises(ProviderConfigurationError):
        AssistantConfig.from_settings(_settings())


def test_builds_matching_chat_model():
    openai = build_task_assistant(AssistantConfig("openai", "gpt-4o-mini", "sk-test"))
    anthropic = build_task_assistant(AssistantConfig("anthropic", "claude-3-5-sonnet-20241022", "sk-test"))
    assert isinstance(openai.llm, ChatOpenAI)
    assert isinstance(anthropic.llm, ChatAnthropic)


def test_unknown_provider_fails():
    with pytest.raises(ProviderConfigurationError):
        build_task_assistant(AssistantConfig("nobody", "model", "key"))


def test_prompt_and_placeholder_reply(assistant):
    history = [
        Message(thread_id=1, user_id=1, role=MessageRole.USER, content="Plan my week"),
        Message(thread_id=1, user_id=1, role=MessageRole.ASSISTANT, content="Sure"),
    ]
    prompt = assistant.prepare_messages(history)
    assert [type(m) for m in prompt] == [SystemMessage, HumanMessage, AIMessage]

    reply = assistant.respond("Plan my week", history)
    assert reply.startswith('I\'m your task assistant. I received your message: "Plan my week".')

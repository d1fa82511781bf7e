from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

from langchain_anthropic import ChatAnthropic
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from tasklist.core.config import Settings
from tasklist.core.constants import MessageRole
from tasklist.core.exceptions import ProviderConfigurationError
from tasklist.core.logging import logger
from tasklist.models.message import Message

TASK_ASSISTANT_INSTRUCTIONS = """You are a helpful task management assistant for an ultraminimal to-do list application.

Your role is to help users:
- Break down complex tasks into manageable subtasks
- Prioritize tasks based on urgency and importance
- Suggest better task descriptions and titles
- Provide motivation and productivity tips
- Answer questions about their tasks

Keep your responses:
- Concise and actionable
- Friendly but professional
- Focused on the user's specific tasks
- Practical and immediately useful

Remember: This is an ultraminimal app, so keep suggestions simple and focused."""

PLACEHOLDER_RESPONSE = """I'm your task assistant. I received your message: "{content}".

In a full implementation, I would:
- Analyze your message for task-related insights
- Provide helpful suggestions for task management
- Help you break down complex tasks
- Offer productivity tips

This is a placeholder response. To enable full AI functionality, ensure your AI provider (OpenAI or Anthropic) is properly configured."""


@dataclass(frozen=True)
class AssistantConfig:
    """Which provider backs the assistant. Resolved once, at process start."""

    provider: str
    model: str
    api_key: str

    @classmethod
    def from_settings(cls, settings: Settings) -> "AssistantConfig":
        """
        Pick the first configured provider: OpenAI, then Anthropic.

        Raises:
            ProviderConfigurationError: if neither API key is set
        """
        if settings.OPENAI_API_KEY:
            return cls(provider="openai", model=settings.OPENAI_MODEL, api_key=settings.OPENAI_API_KEY)
        if settings.ANTHROPIC_API_KEY:
            return cls(provider="anthropic", model=settings.ANTHROPIC_MODEL, api_key=settings.ANTHROPIC_API_KEY)
        raise ProviderConfigurationError(
            "No AI provider configured. Please set OPENAI_API_KEY or ANTHROPIC_API_KEY in your environment variables."
        )


# Chat model builders, keyed by provider name
MODEL_BUILDERS: Dict[str, Callable[[AssistantConfig], BaseChatModel]] = {
    "openai": lambda config: ChatOpenAI(model=config.model, api_key=config.api_key),
    "anthropic": lambda config: ChatAnthropic(model=config.model, api_key=config.api_key),
}


class TaskAssistant:
    """
    Helps users organize, prioritize and manage their to-do lists.

    The chat model is constructed from the resolved provider but replies are
    still the fixed placeholder text; no inference request is made.
    """

    def __init__(self, config: AssistantConfig, llm: BaseChatModel,
                 instructions: str = TASK_ASSISTANT_INSTRUCTIONS):
        self.config = config
        self.llm = llm
        self.instructions = instructions

    @property
    def name(self) -> str:
        return "Task Assistant"

    def prepare_messages(self, history: Sequence[Message]) -> List[BaseMessage]:
        """Turn stored messages (oldest first) into a prompt headed by the instructions."""
        prompt: List[BaseMessage] = [SystemMessage(content=self.instructions)]
        for message in history:
            if message.role == MessageRole.USER:
                prompt.append(HumanMessage(content=message.content))
            else:
                prompt.append(AIMessage(content=message.content))
        return prompt

    def respond(self, content: str, history: Sequence[Message]) -> str:
        prompt = self.prepare_messages(history)
        logger.debug(
            "assistant_response_synthesized",
            provider=self.config.provider,
            model=self.config.model,
            prompt_messages=len(prompt),
        )
        return PLACEHOLDER_RESPONSE.format(content=content)


def build_task_assistant(config: AssistantConfig) -> TaskAssistant:
    try:
        builder = MODEL_BUILDERS[config.provider]
    except KeyError:
        raise ProviderConfigurationError(f"Unknown AI provider: {config.provider}") from None

    assistant = TaskAssistant(config, builder(config))
    logger.info("task_assistant_initialized", provider=config.provider, model=config.model)
    return assistant

"""
LLM integration for the architecture chat assistant.

This module wraps Google's Gemini models (through the google-genai SDK) to answer
architecture questions. When the model cannot be reached, the assistant answers
with the rule-based reply from architecture_core.advisor instead of failing.
"""

from typing import List, Optional

from google import genai
from google.api_core.exceptions import GoogleAPIError
from google.genai import errors as genai_errors
from google.genai import types

from architecture_core import config
from architecture_core.advisor import (
    analyze_message,
    build_system_prompt,
    fallback_reply,
    follow_up_questions,
    suggestions,
)
from architecture_core.logger import exception, get_logger, info, warning
from architecture_core.models import ChatReply, ConversationContext

logger = get_logger(__name__)

# Model configuration
DEFAULT_TEMPERATURE = 0.7
DEFAULT_TOP_P = 0.9
DEFAULT_MAX_OUTPUT_TOKENS = 800

_client: Optional[genai.Client] = None


def get_client() -> genai.Client:
    """
    Initializes and returns the Generative AI client.

    Uses Vertex AI when GOOGLE_GENAI_USE_VERTEXAI is set or no API key is
    available, otherwise the API key. The client is created once per process.

    Raises:
        ValueError: If neither an API key nor a Google Cloud project is configured.
    """
    global _client

    if _client is not None:
        return _client

    if config.USE_VERTEXAI or not config.GOOGLE_API_KEY:
        if not config.GOOGLE_CLOUD_PROJECT:
            raise ValueError(
                "Neither GOOGLE_API_KEY nor GOOGLE_CLOUD_PROJECT found. Cannot initialize client."
            )
        logger.info("Configuring Google Generative AI with Vertex AI")
        _client = genai.Client(
            vertexai=True,
            project=config.GOOGLE_CLOUD_PROJECT,
            location=config.GOOGLE_CLOUD_LOCATION,
            http_options=types.HttpOptions(api_version="v1"),
        )
    else:
        logger.info("Configuring Google Generative AI with API Key")
        _client = genai.Client(
            api_key=config.GOOGLE_API_KEY,
            http_options=types.HttpOptions(api_version="v1"),
        )

    return _client


def build_contents(context: ConversationContext, message: str) -> List[types.Content]:
    """Convert the conversation history plus the new message into Gemini contents."""
    contents = [
        types.Content(
            role="user" if turn.sender == "user" else "model",
            parts=[types.Part(text=turn.text)],
        )
        for turn in context.messages
    ]
    contents.append(types.Content(role="user", parts=[types.Part(text=message)]))
    return contents


async def generate_chat_reply(
    message: str,
    context: Optional[ConversationContext] = None,
) -> ChatReply:
    """
    Answer a chat message with Gemini, falling back to a rule-based reply.

    Args:
        message: The user's message
        context: Conversation so far; never modified

    Returns:
        ChatReply: The model's answer, or the rule-based reply with fallback=True
    """
    if context is None:
        context = ConversationContext()

    analysis = analyze_message(message)

    try:
        client = get_client()
    except ValueError as e:
        warning("Chat model not configured, using rule-based reply", reason=str(e))
        return fallback_reply(message)

    try:
        response = await client.aio.models.generate_content(
            model=config.CHAT_MODEL,
            contents=build_contents(context, message),
            config=types.GenerateContentConfig(
                system_instruction=build_system_prompt(analysis, context),
                temperature=DEFAULT_TEMPERATURE,
                top_p=DEFAULT_TOP_P,
                max_output_tokens=DEFAULT_MAX_OUTPUT_TOKENS,
            ),
        )
    except (GoogleAPIError, genai_errors.APIError) as e:
        exception("Chat model request failed, using rule-based reply", exc=e, model=config.CHAT_MODEL)
        return fallback_reply(message)

    text = getattr(response, "text", None)
    if not text:
        warning("Chat model returned no text, using rule-based reply", model=config.CHAT_MODEL)
        return fallback_reply(message)

    info(
        "Generated chat reply",
        model=config.CHAT_MODEL,
        topics=[topic.value for topic in analysis.topics],
        intent=analysis.intent.value,
    )

    return ChatReply(
        text=text.strip(),
        suggestions=suggestions(message, text),
        follow_up_questions=follow_up_questions(analysis),
        analysis=analysis,
    )

"""Tests for the rule-based parts of the chat assistant."""

import pydantic
import pytest

from architecture_core.advisor import (
    BASE_SYSTEM_PROMPT,
    DEFAULT_FALLBACK_TEXT,
    DEFAULT_FOLLOW_UPS,
    DEFAULT_SUGGESTIONS,
    analyze_message,
    build_system_prompt,
    detect_topics,
    fallback_reply,
    follow_up_questions,
    suggestions,
)
from architecture_core.models import ConversationContext, Industry, Intent, MessageAnalysis, Topic


# ---- Message analysis ----

def test_detect_topics_in_fixed_order():
    topics = detect_topics("Our REST api and database keep failing under load in microservices")
    assert topics == (Topic.MICROSERVICES, Topic.DATABASE, Topic.API, Topic.SCALABILITY)


@pytest.mark.parametrize(
    "message",
    ["We need more feedback from users", "The dbms vendor", "Present the restaurant menu", "Upload a file"],
)
def test_keywords_match_whole_words(message):
    """Keywords inside other words do not count."""
    assert detect_topics(message) == ()


@pytest.mark.parametrize(
    "message, intent",
    [
        ("Compare microservices vs monolith", Intent.COMPARISON),
        ("Which is the best database?", Intent.RECOMMENDATION),
        ("What should we pick?", Intent.RECOMMENDATION),
        ("We have a problem with our deployment", Intent.TROUBLESHOOTING),
        ("How does event sourcing work?", Intent.QUESTION),
        ("Tell me about hexagonal architecture", Intent.GENERAL),
    ],
)
def test_intent(message, intent):
    assert analyze_message(message).intent == intent


def test_comparison_wins_over_question():
    """A question that asks for a comparison is a comparison."""
    assert analyze_message("What is the difference between REST and gRPC?").intent == Intent.COMPARISON


@pytest.mark.parametrize(
    "message, industry",
    [
        ("We process medical records under HIPAA", Industry.HEALTHCARE),
        ("A banking platform", Industry.FINANCE),
        ("Our e-commerce store", Industry.ECOMMERCE),
        ("Building an MVP", Industry.STARTUP),
        ("Internal tooling", Industry.GENERAL),
    ],
)
def test_industry(message, industry):
    assert analyze_message(message).industry == industry


def test_complexity_and_technical_level():
    simple = analyze_message("I'm new to this, a simple explanation please")
    assert simple.complexity == "low"
    assert simple.technical_level == "beginner"

    advanced = analyze_message("Senior engineer here, enterprise setup")
    assert advanced.complexity == "high"
    assert advanced.technical_level == "expert"

    plain = analyze_message("Event sourcing")
    assert plain.complexity == "medium"
    assert plain.technical_level == "intermediate"


def test_analysis_is_immutable():
    analysis = analyze_message("serverless")
    with pytest.raises(pydantic.ValidationError):
        analysis.intent = Intent.COMPARISON


# ---- Follow-ups and suggestions ----

def test_follow_up_questions_capped_at_three():
    analysis = analyze_message("microservices with a database and an api on aws")
    questions = follow_up_questions(analysis)
    assert len(questions) == 3
    assert questions[0] == "What is your expected user load?"


def test_follow_up_questions_without_topics():
    assert follow_up_questions(MessageAnalysis()) == []


def test_suggestions_from_reply_text():
    """Topics mentioned only in the reply still drive suggestions."""
    result = suggestions("Any advice?", "Consider GraphQL for flexible clients.")
    assert result == ["REST vs GraphQL comparison", "API design best practices", "API documentation strategies"]


def test_default_suggestions():
    assert suggestions("Hello") == DEFAULT_SUGGESTIONS
    assert suggestions("Hello") is not DEFAULT_SUGGESTIONS


# ---- System prompt ----

def test_system_prompt_sections():
    analysis = analyze_message("Compare serverless vs microservices for our healthcare startup, simple terms")
    context = ConversationContext().with_message("user", "Hi")

    prompt = build_system_prompt(analysis, context)

    assert prompt.startswith(BASE_SYSTEM_PROMPT)
    assert "Focus on: microservices, serverless." in prompt
    assert "Consider healthcare industry requirements and compliance." in prompt
    assert "Emphasize HIPAA compliance" in prompt
    assert "Provide simple, beginner-friendly explanations." in prompt
    assert "Build upon previous conversation context." in prompt
    assert prompt.endswith("4. Recommend based on context")


def test_system_prompt_defaults():
    prompt = build_system_prompt(MessageAnalysis())
    assert "Focus on:" not in prompt
    assert "Build upon previous conversation context." not in prompt
    assert "Use this reasoning framework:\n1. Understand the question" in prompt


# ---- Conversation context ----

def test_with_message_returns_new_context():
    empty = ConversationContext()
    updated = empty.with_message("user", "Hello")
    assert empty.messages == ()
    assert [m.text for m in updated.messages] == ["Hello"]


def test_with_message_limit_keeps_latest():
    context = ConversationContext()
    for number in range(5):
        context = context.with_message("user", f"message {number}", limit=3)
    assert [m.text for m in context.messages] == ["message 2", "message 3", "message 4"]


# ---- Fallback reply ----

def test_fallback_reply_for_topic():
    reply = fallback_reply("How do I secure my API with authentication?")
    assert reply.fallback is True
    assert reply.text.startswith("API design is crucial")
    assert reply.suggestions[0] == "REST vs GraphQL comparison"
    assert len(reply.follow_up_questions) == 3


def test_fallback_reply_skips_topics_without_guidance():
    """Topics without canned guidance get the general reply."""
    reply = fallback_reply("Scaling our monolith")
    assert reply.analysis.topics == (Topic.MONOLITHIC, Topic.SCALABILITY)
    assert reply.text == DEFAULT_FALLBACK_TEXT
    assert reply.follow_up_questions == DEFAULT_FOLLOW_UPS

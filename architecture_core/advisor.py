"""
Chat assistant logic that does not depend on the LLM.

Message classification, follow-up questions, suggestions and system prompt
construction are pure functions of their inputs. Conversation history is passed
in explicitly as an immutable ConversationContext.
"""

import re
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from architecture_core.models import (
    ChatReply,
    ConversationContext,
    Industry,
    Intent,
    MessageAnalysis,
    Topic,
)

MAX_FOLLOW_UPS = 3
MAX_SUGGESTIONS = 3


def _pattern(*keywords: str) -> "re.Pattern[str]":
    alternatives = "|".join(re.escape(keyword) for keyword in keywords)
    return re.compile(rf"\b(?:{alternatives})\b", re.IGNORECASE)


# Order matters: topics are reported in this order
TOPIC_PATTERNS: List[Tuple[Topic, "re.Pattern[str]"]] = [
    (Topic.MICROSERVICES, _pattern("microservices", "microservice", "micro-service", "micro-services")),
    (Topic.MONOLITHIC, _pattern("monolithic", "monolith", "monoliths")),
    (Topic.SERVERLESS, _pattern("serverless", "lambda", "lambdas", "faas")),
    (Topic.DATABASE, _pattern("database", "databases", "db", "sql", "nosql")),
    (Topic.API, _pattern("api", "apis", "rest", "graphql", "grpc")),
    (Topic.SECURITY, _pattern("security", "auth", "authentication", "authorization", "encryption")),
    (Topic.CLOUD, _pattern("cloud", "aws", "azure", "gcp")),
    (Topic.SCALABILITY, _pattern("scalability", "scalable", "scaling", "performance", "load")),
]

# First match wins
INTENT_PATTERNS: List[Tuple[Intent, "re.Pattern[str]"]] = [
    (Intent.COMPARISON, _pattern("compare", "comparison", "vs", "versus", "difference", "differences")),
    (Intent.RECOMMENDATION, _pattern("best", "recommend", "recommendation", "should")),
    (Intent.TROUBLESHOOTING, _pattern("problem", "issue", "error", "bug", "failing")),
    (Intent.QUESTION, _pattern("how", "what", "why", "which", "when")),
]

INDUSTRY_PATTERNS: List[Tuple[Industry, "re.Pattern[str]"]] = [
    (Industry.HEALTHCARE, _pattern("healthcare", "medical", "hipaa")),
    (Industry.FINANCE, _pattern("finance", "banking", "pci", "fintech")),
    (Industry.ECOMMERCE, _pattern("ecommerce", "e-commerce", "retail", "shopping")),
    (Industry.STARTUP, _pattern("startup", "mvp", "prototype")),
]

_LOW_COMPLEXITY = _pattern("simple", "basic", "start", "starting")
_HIGH_COMPLEXITY = _pattern("advanced", "complex", "enterprise")
_BEGINNER = _pattern("beginner", "new", "learn", "learning")
_EXPERT = _pattern("expert", "advanced", "senior")


FOLLOW_UP_QUESTIONS: Dict[Topic, List[str]] = {
    Topic.MICROSERVICES: [
        "What is your expected user load?",
        "How many development teams do you have?",
        "What are your data consistency requirements?",
    ],
    Topic.DATABASE: [
        "What is your expected data volume?",
        "What are your primary query patterns?",
        "Do you need real-time analytics?",
    ],
    Topic.API: [
        "What is your expected API usage?",
        "Do you need real-time updates?",
        "What is your client diversity?",
    ],
    Topic.SECURITY: [
        "What compliance requirements apply?",
        "What is your threat model?",
        "Do you need audit trails?",
    ],
    Topic.CLOUD: [
        "What is your team's cloud experience?",
        "What is your budget?",
        "What specific services do you need?",
    ],
}

DEFAULT_FOLLOW_UPS = [
    "What type of application are you building?",
    "What are your main requirements?",
    "What's your team size and expertise?",
]

SUGGESTIONS: Dict[Topic, List[str]] = {
    Topic.MICROSERVICES: [
        "Show me microservices best practices",
        "How do I migrate from monolith to microservices?",
        "Microservices communication patterns",
    ],
    Topic.DATABASE: [
        "Compare SQL vs NoSQL databases",
        "Database scaling strategies",
        "Data modeling best practices",
    ],
    Topic.API: [
        "REST vs GraphQL comparison",
        "API design best practices",
        "API documentation strategies",
    ],
    Topic.SECURITY: [
        "Authentication patterns",
        "Data encryption strategies",
        "Security compliance guide",
    ],
    Topic.CLOUD: [
        "Cloud cost optimization",
        "Multi-cloud strategies",
        "Cloud migration guide",
    ],
}

DEFAULT_SUGGESTIONS = [
    "Take the architecture questionnaire",
    "Show me case studies",
    "Explain design patterns",
]

FALLBACK_TEXT: Dict[Topic, str] = {
    Topic.MICROSERVICES: (
        "Microservices architecture involves breaking down applications into small, independent "
        "services. Key considerations include service boundaries, communication patterns, data "
        "consistency, and operational complexity. What specific aspect of microservices would you "
        "like to explore?"
    ),
    Topic.DATABASE: (
        "Database selection depends on your data structure, access patterns, and scalability "
        "requirements. SQL databases excel at ACID compliance and complex queries, while NoSQL "
        "databases handle unstructured data and horizontal scaling better. What type of data will "
        "you be storing?"
    ),
    Topic.API: (
        "API design is crucial for system integration and scalability. REST APIs are simpler and "
        "more widely supported, while GraphQL provides flexibility for complex data requirements. "
        "gRPC excels at high-performance service-to-service communication. What's your primary use case?"
    ),
    Topic.SECURITY: (
        "Security is fundamental to any architecture. Consider OAuth 2.0 for authentication, JWT "
        "for stateless sessions, HTTPS everywhere, and encryption for sensitive data. What security "
        "requirements do you have?"
    ),
    Topic.CLOUD: (
        "Cloud platforms offer scalability and managed services. AWS, Azure, and GCP all provide "
        "excellent services. Consider your team's expertise, cost requirements, and specific service "
        "needs. Which cloud platform are you considering?"
    ),
}

DEFAULT_FALLBACK_TEXT = (
    "I'm here to help with your software architecture decisions. I can provide guidance on "
    "microservices, databases, APIs, security, cloud platforms, and more. What specific "
    "architecture challenge are you facing?"
)

BASE_SYSTEM_PROMPT = """You are a friendly and knowledgeable software architecture consultant. You help developers and teams make informed decisions about software architecture, design patterns, and technology choices.

You have expertise in:
- Microservices and monolithic architectures
- Serverless, event-driven, layered and hexagonal architectures
- Cloud platforms (AWS, Azure, GCP)
- Database design and selection
- API design (REST, GraphQL, gRPC)
- Security best practices
- Scalability patterns and performance optimization
- DevOps and CI/CD

Respond in a conversational, helpful tone. Provide practical advice with clear explanations, real-world examples, and actionable recommendations. Keep your responses concise but informative, and ask follow-up questions when you need to understand the user's specific needs."""

INDUSTRY_GUIDANCE: Dict[Industry, str] = {
    Industry.HEALTHCARE: "Emphasize HIPAA compliance, data privacy, and reliability.",
    Industry.FINANCE: "Focus on security, compliance (PCI-DSS), and audit trails.",
    Industry.ECOMMERCE: "Prioritize scalability, performance, and user experience.",
    Industry.STARTUP: "Consider rapid development, cost-effectiveness, and future scalability.",
}

REASONING_FRAMEWORKS: Dict[Intent, List[str]] = {
    Intent.COMPARISON: [
        "Define criteria for comparison",
        "Evaluate each option against criteria",
        "Provide pros and cons",
        "Recommend based on context",
    ],
    Intent.RECOMMENDATION: [
        "Analyze requirements",
        "Consider constraints",
        "Evaluate alternatives",
        "Provide justification",
    ],
    Intent.TROUBLESHOOTING: [
        "Identify root cause",
        "Analyze symptoms",
        "Provide solutions",
        "Suggest prevention",
    ],
}

DEFAULT_REASONING_FRAMEWORK = [
    "Understand the question",
    "Provide comprehensive answer",
    "Include examples",
    "Suggest next steps",
]


def detect_topics(text: str) -> Tuple[Topic, ...]:
    """Return the topics mentioned in `text`, in a fixed order."""
    return tuple(topic for topic, pattern in TOPIC_PATTERNS if pattern.search(text))


def analyze_message(message: str) -> MessageAnalysis:
    """
    Classify a chat message into topics, intent, complexity, industry and technical level.

    Args:
        message: Raw user message

    Returns:
        MessageAnalysis: Tags for the message; defaults when nothing matches
    """
    intent = next(
        (intent for intent, pattern in INTENT_PATTERNS if pattern.search(message)),
        Intent.GENERAL,
    )
    industry = next(
        (industry for industry, pattern in INDUSTRY_PATTERNS if pattern.search(message)),
        Industry.GENERAL,
    )

    if _LOW_COMPLEXITY.search(message):
        complexity = "low"
    elif _HIGH_COMPLEXITY.search(message):
        complexity = "high"
    else:
        complexity = "medium"

    if _BEGINNER.search(message):
        technical_level = "beginner"
    elif _EXPERT.search(message):
        technical_level = "expert"
    else:
        technical_level = "intermediate"

    return MessageAnalysis(
        topics=detect_topics(message),
        intent=intent,
        complexity=complexity,
        industry=industry,
        technical_level=technical_level,
    )


def _collect(groups: Iterable[Sequence[str]], limit: int) -> List[str]:
    collected: List[str] = []
    for group in groups:
        for item in group:
            if item not in collected:
                collected.append(item)
    return collected[:limit]


def follow_up_questions(analysis: MessageAnalysis) -> List[str]:
    """Canned follow-up questions for the detected topics (at most three)."""
    return _collect(
        (FOLLOW_UP_QUESTIONS[topic] for topic in analysis.topics if topic in FOLLOW_UP_QUESTIONS),
        MAX_FOLLOW_UPS,
    )


def suggestions(message: str, reply_text: str = "") -> List[str]:
    """
    Suggest next prompts based on topics in the user message and the reply.

    Falls back to general suggestions when no topic matches.
    """
    topics = detect_topics(f"{message}\n{reply_text}")
    collected = _collect(
        (SUGGESTIONS[topic] for topic in topics if topic in SUGGESTIONS),
        MAX_SUGGESTIONS,
    )
    return collected or list(DEFAULT_SUGGESTIONS)


def build_system_prompt(
    analysis: MessageAnalysis,
    context: Optional[ConversationContext] = None,
) -> str:
    """
    Build the system prompt for one chat turn.

    Args:
        analysis: Classification of the current user message
        context: Conversation so far, if any

    Returns:
        str: Base consultant prompt followed by message-specific guidance
    """
    guidance: List[str] = []

    if analysis.topics:
        guidance.append(f"Focus on: {', '.join(topic.value for topic in analysis.topics)}.")

    if analysis.industry in INDUSTRY_GUIDANCE:
        guidance.append(f"Consider {analysis.industry.value} industry requirements and compliance.")
        guidance.append(INDUSTRY_GUIDANCE[analysis.industry])

    if analysis.complexity == "low":
        guidance.append("Provide simple, beginner-friendly explanations.")
    elif analysis.complexity == "high":
        guidance.append("Include advanced concepts and enterprise considerations.")

    if context is not None and context.messages:
        guidance.append("Build upon previous conversation context.")

    steps = REASONING_FRAMEWORKS.get(analysis.intent, DEFAULT_REASONING_FRAMEWORK)
    framework = "\n".join(f"{number}. {step}" for number, step in enumerate(steps, start=1))

    sections = [BASE_SYSTEM_PROMPT]
    if guidance:
        sections.append(" ".join(guidance))
    sections.append(f"Use this reasoning framework:\n{framework}")
    return "\n\n".join(sections)


def fallback_reply(message: str) -> ChatReply:
    """
    Rule-based reply used when the LLM is unavailable.

    The reply is keyed on the first detected topic that has canned guidance.
    """
    analysis = analyze_message(message)
    topic = next((topic for topic in analysis.topics if topic in FALLBACK_TEXT), None)

    if topic is None:
        return ChatReply(
            text=DEFAULT_FALLBACK_TEXT,
            suggestions=list(DEFAULT_SUGGESTIONS),
            follow_up_questions=list(DEFAULT_FOLLOW_UPS),
            analysis=analysis,
            fallback=True,
        )

    return ChatReply(
        text=FALLBACK_TEXT[topic],
        suggestions=list(SUGGESTIONS[topic]),
        follow_up_questions=list(FOLLOW_UP_QUESTIONS[topic]),
        analysis=analysis,
        fallback=True,
    )

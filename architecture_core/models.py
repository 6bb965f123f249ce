"""
Single source of truth (SSoT) for all data models in the Architecture Advisor.

This module defines the core Pydantic models used across the API layer, domain logic,
and tests. These models serve as the canonical schema definitions and should never
be redeclared elsewhere in the codebase.

Python attributes are snake_case; the JSON shape keeps the camelCase field names
used by the web client (teamSize, timeToMarket, weightedScore, ...). Models accept
either spelling on input.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Qualitative levels
Level = Literal["low", "medium", "high"]
TeamSizeLevel = Literal["small", "medium", "large"]
TimeToMarketLevel = Literal["fast", "medium", "slow"]
TimelineLevel = Literal["short", "medium", "long"]

PatternCategory = Literal[
    "monolithic", "microservices", "serverless", "event-driven", "layered", "hexagonal"
]
CriterionCategory = Literal["technical", "business", "operational"]


class CamelModel(BaseModel):
    """Base model serialising to camelCase while accepting snake_case input."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- Catalog models ---

class Characteristics(CamelModel):
    """Qualitative characteristics of an architecture pattern."""
    complexity: Level
    scalability: Level
    maintainability: Level
    performance: Level
    cost: Level
    team_size: TeamSizeLevel
    time_to_market: TimeToMarketLevel
    # Optional in stored records; scoring fails without it.
    security: Optional[Level] = None


class PatternExample(CamelModel):
    """A real-world adopter of a pattern."""
    company: str
    description: str = ""
    link: Optional[str] = None


class ArchitecturePattern(CamelModel):
    """A catalog entry describing one software architecture pattern."""
    id: str = Field(..., description="Stable catalog identifier")
    name: str
    category: PatternCategory
    description: str
    pros: List[str] = Field(default_factory=list)
    cons: List[str] = Field(default_factory=list)
    use_cases: List[str] = Field(default_factory=list)
    characteristics: Characteristics
    technology_stack: List[str] = Field(default_factory=list)
    deployment: List[str] = Field(default_factory=list)
    monitoring: List[str] = Field(default_factory=list)
    security_practices: List[str] = Field(
        default_factory=list,
        alias="security",
        description="Security features and considerations",
    )
    examples: List[PatternExample] = Field(default_factory=list)
    best_practices: List[str] = Field(default_factory=list)
    anti_patterns: List[str] = Field(default_factory=list)


class PatternFilter(CamelModel):
    """Optional restrictions applied when listing the catalog."""
    category: Optional[PatternCategory] = None
    complexity: Optional[Level] = None
    scalability: Optional[Level] = None


class ComparisonCriterion(CamelModel):
    """A named, weighted dimension used for scoring and ranking."""
    id: str
    name: str
    description: str
    weight: float = Field(..., gt=0.0, le=1.0)
    category: CriterionCategory


# --- Comparison models ---

class ProjectContext(CamelModel):
    """
    Caller-supplied project constraints.

    Only used to generate reasoning text; never alters the ranking score.
    Absent fields simply never trigger a context rule.
    """
    team_size: Optional[TeamSizeLevel] = None
    budget: Optional[Level] = None
    timeline: Optional[TimelineLevel] = None
    expected_scale: Optional[Level] = None
    complexity: Optional[Level] = None


class ScoredPattern(ArchitecturePattern):
    """An architecture pattern decorated with its ranking scores."""
    weighted_score: float
    scores: Dict[str, int]


class Alternative(CamelModel):
    """A runner-up pattern and why it might (not) fit."""
    pattern: ScoredPattern
    reasoning: List[str]


class Recommendation(CamelModel):
    """The best-ranked pattern, its justification and up to two alternatives."""
    best_pattern: ScoredPattern
    reasoning: List[str]
    alternatives: List[Alternative] = Field(default_factory=list)


class ComparisonResult(CamelModel):
    """Complete outcome of one comparison request."""
    patterns: List[ScoredPattern]
    recommendation: Recommendation
    project_context: ProjectContext


class ComparisonRequest(CamelModel):
    """HTTP body for a comparison request."""
    pattern_ids: List[str]
    project_context: ProjectContext = Field(default_factory=ProjectContext)


# --- Chat models ---

class Topic(str, Enum):
    MICROSERVICES = "microservices"
    MONOLITHIC = "monolithic"
    SERVERLESS = "serverless"
    DATABASE = "database"
    API = "api"
    SECURITY = "security"
    CLOUD = "cloud"
    SCALABILITY = "scalability"


class Intent(str, Enum):
    QUESTION = "question"
    COMPARISON = "comparison"
    RECOMMENDATION = "recommendation"
    TROUBLESHOOTING = "troubleshooting"
    GENERAL = "general"


class Industry(str, Enum):
    HEALTHCARE = "healthcare"
    FINANCE = "finance"
    ECOMMERCE = "ecommerce"
    STARTUP = "startup"
    GENERAL = "general"


TechnicalLevel = Literal["beginner", "intermediate", "expert"]


class MessageAnalysis(CamelModel):
    """Tags derived from a single chat message."""
    model_config = ConfigDict(frozen=True)

    topics: Tuple[Topic, ...] = ()
    intent: Intent = Intent.GENERAL
    complexity: Level = "medium"
    industry: Industry = Industry.GENERAL
    technical_level: TechnicalLevel = "intermediate"


class ChatMessage(CamelModel):
    """One turn of a conversation."""
    model_config = ConfigDict(frozen=True)

    sender: Literal["user", "assistant"]
    text: str


class ConversationContext(CamelModel):
    """
    Immutable conversation history threaded through each chat call.

    Updating the context always returns a new instance.
    """
    model_config = ConfigDict(frozen=True)

    messages: Tuple[ChatMessage, ...] = ()

    def with_message(
        self,
        sender: Literal["user", "assistant"],
        text: str,
        limit: Optional[int] = None,
    ) -> "ConversationContext":
        messages = self.messages + (ChatMessage(sender=sender, text=text),)
        if limit is not None and limit > 0:
            messages = messages[-limit:]
        return ConversationContext(messages=messages)


class ChatRequest(CamelModel):
    """HTTP body for a chat message."""
    message: str = Field(..., min_length=1)
    context: List[ChatMessage] = Field(default_factory=list)


class ChatReply(CamelModel):
    """Assistant reply with suggestions and the analysis that shaped it."""
    text: str
    suggestions: List[str] = Field(default_factory=list)
    follow_up_questions: List[str] = Field(default_factory=list)
    analysis: MessageAnalysis = Field(default_factory=MessageAnalysis)
    fallback: bool = False
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

"""
FastAPI application for the Architecture Advisor.

This module provides HTTP endpoints for browsing the architecture pattern catalog,
comparing patterns against a project context, listing the comparison criteria and
chatting with the architecture assistant.
"""

from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import Depends, FastAPI, HTTPException, Request

from architecture_core import config, models
from architecture_core.catalog import PatternCatalog, build_catalog
from architecture_core.comparison import compare, get_pattern, list_patterns
from architecture_core.criteria import list_criteria
from architecture_core.errors import DataIntegrityError, NotFoundError, ValidationError
from architecture_core.llm import generate_chat_reply
from architecture_core.logger import exception, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the pattern catalog on startup and release it on shutdown."""
    logger.info("Running startup tasks")
    app.state.catalog = await build_catalog()
    yield
    logger.info("Shutting down application")
    await app.state.catalog.close()


app = FastAPI(
    title="Architecture Advisor API",
    description="API for comparing software architecture patterns and chatting about architecture decisions",
    version="1.0.0",
    lifespan=lifespan,
)


def get_catalog(request: Request) -> PatternCatalog:
    """Catalog dependency; overridden in tests."""
    return request.app.state.catalog


@app.get("/")
async def root():
    return {"message": "Architecture Advisor API", "status": "Running", "version": app.version}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/api/comparison/patterns", response_model=List[models.ArchitecturePattern])
async def get_architecture_patterns(
    category: Optional[models.PatternCategory] = None,
    complexity: Optional[models.Level] = None,
    scalability: Optional[models.Level] = None,
    catalog: PatternCatalog = Depends(get_catalog),
) -> List[models.ArchitecturePattern]:
    """List architecture patterns, optionally filtered."""
    pattern_filter = models.PatternFilter(
        category=category, complexity=complexity, scalability=scalability
    )
    try:
        return await list_patterns(catalog, pattern_filter)
    except DataIntegrityError as e:
        exception("Stored pattern failed validation", exc=e)
        raise HTTPException(status_code=500, detail="Error fetching architecture patterns")


@app.get("/api/comparison/patterns/{pattern_id}", response_model=models.ArchitecturePattern)
async def get_architecture_pattern(
    pattern_id: str,
    catalog: PatternCatalog = Depends(get_catalog),
) -> models.ArchitecturePattern:
    """Fetch a single architecture pattern."""
    try:
        return await get_pattern(catalog, pattern_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Architecture pattern not found")
    except DataIntegrityError as e:
        exception("Stored pattern failed validation", exc=e, pattern_id=pattern_id)
        raise HTTPException(status_code=500, detail="Error fetching architecture pattern")


@app.post("/api/comparison/compare", response_model=models.ComparisonResult)
async def compare_patterns(
    request: models.ComparisonRequest,
    catalog: PatternCatalog = Depends(get_catalog),
) -> models.ComparisonResult:
    """
    Rank the selected patterns and recommend one for the given project context.

    Args:
        request: Pattern ids to compare and the project context

    Returns:
        ComparisonResult: Ranked patterns, recommendation and the echoed context
    """
    try:
        return await compare(catalog, request.pattern_ids, request.project_context)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(
            status_code=404,
            detail={"message": "Some patterns not found", "missingIds": e.missing_ids},
        )
    except DataIntegrityError as e:
        exception("Pattern comparison failed on invalid catalog data", exc=e)
        raise HTTPException(status_code=500, detail="Error comparing patterns")


@app.get("/api/comparison/criteria", response_model=List[models.ComparisonCriterion])
async def get_comparison_criteria() -> List[models.ComparisonCriterion]:
    """The fixed comparison criteria and their weights."""
    return list_criteria()


@app.post("/api/chat/message", response_model=models.ChatReply)
async def send_chat_message(request: models.ChatRequest) -> models.ChatReply:
    """
    Answer a chat message.

    The client sends the conversation so far with every message; only the most
    recent CHAT_HISTORY_LIMIT turns are forwarded to the model.
    """
    context = models.ConversationContext(
        messages=tuple(request.context[-config.CHAT_HISTORY_LIMIT:])
    )
    return await generate_chat_reply(request.message, context)

"""FastAPI surface for the conversational trip planner."""
from __future__ import annotations

# Load environment variables from .env file
from dotenv import load_dotenv

# Load .env file before any other imports that might need environment variables
load_dotenv()


from typing import AsyncIterator, Dict
from fastapi import FastAPI, HTTPException
from fastapi.responses import StreamingResponse
import logging
import sentry_sdk
from fastapi.middleware.cors import CORSMiddleware

from src.api.chat_service import ChatService, ChatTurn
from src.api.dependencies import get_chat_service, get_settings, lifespan
from src.api.response_builder import format_sse, format_sse_done
from src.api.schemas import (
    ChatCompletionResponse,
    ChatRequest,
    ExampleQueriesResponse,
    QueryAnalysisRequest,
    QueryAnalysisResponse,
    SearchRequest,
)
from src.core.query_detection import (
    EXAMPLE_QUERIES,
    analyze_query,
    create_section_loading_states,
    is_follow_up_query,
)
from src.services.travel_search import SearchCriteria, TravelSearchResult, parse_travel_request, search_travel

logger = logging.getLogger(__name__)

settings = get_settings()

if settings.sentry_dsn:  # pragma: no cover - runtime configuration
    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        enable_logs=True,
        send_default_pii=False,
        traces_sample_rate=1.0,
    )

app = FastAPI(title="Trip Planner Chat API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _resolve_service() -> ChatService:
    try:
        return get_chat_service()
    except RuntimeError as exc:
        logger.error(f"Chat service unavailable: {str(exc)}")
        raise HTTPException(status_code=500, detail="OpenAI API key not configured") from exc


def _prepare_turn(service: ChatService, payload: ChatRequest) -> ChatTurn:
    try:
        return service.prepare(payload)
    except ValueError as exc:
        logger.error(f"Value error during chat: {str(exc)}")
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.post("/chat")
async def chat(payload: ChatRequest) -> StreamingResponse:
    """Stream the assistant reply as server-sent events.

    The first frame carries the routing decision so the browser can show
    section loading states straight away:

        data: {"analysis": {...}, "isFollowUp": true, "loadingStates": [...]}

    followed by one frame per text chunk:

        data: {"content": "..."}

    and a closing ``data: [DONE]`` frame. Once reassembled the text is either
    prose or a single JSON object typed ``trip_plan`` or ``follow_up``.

    Raises:
        HTTPException: 400 for an empty message, 500 when the model is not configured
    """
    if not payload.message or not payload.message.strip():
        raise HTTPException(status_code=400, detail="Valid message content is required")

    service = _resolve_service()
    turn = _prepare_turn(service, payload)
    logger.info(f"Chat request received (follow_up={turn.is_follow_up})")

    async def event_stream() -> AsyncIterator[str]:
        yield format_sse(
            {
                "analysis": turn.analysis.model_dump(by_alias=True),
                "isFollowUp": turn.is_follow_up,
                "loadingStates": [state.model_dump(by_alias=True) for state in turn.loading_states],
            }
        )
        try:
            async for content in service.stream_reply(turn, payload):
                yield format_sse({"content": content})
        except Exception as exc:
            logger.error(f"Streaming error: {str(exc)}", exc_info=True)
            yield format_sse({"error": f"API Error: {str(exc)}"})
        yield format_sse_done()

    return StreamingResponse(
        event_stream(),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
    )


@app.post("/chat/complete", response_model=ChatCompletionResponse)
async def chat_complete(payload: ChatRequest) -> ChatCompletionResponse:
    """Run a chat turn without streaming and return the parsed reply."""
    if not payload.message or not payload.message.strip():
        raise HTTPException(status_code=400, detail="Valid message content is required")

    service = _resolve_service()
    try:
        response = await service.complete(payload)
    except ValueError as exc:
        logger.error(f"Value error during chat: {str(exc)}")
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except Exception as exc:
        logger.error(f"Unexpected error during chat: {str(exc)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"API Error: {str(exc)}") from exc

    logger.info(f"Chat completed with a {response.kind} reply")
    return response


@app.post("/query/analyze", response_model=QueryAnalysisResponse)
async def analyze(payload: QueryAnalysisRequest) -> QueryAnalysisResponse:
    """Preview how a message would be routed against the displayed plan."""
    follow_up = is_follow_up_query(payload.message, payload.has_trip_plan)
    analysis = analyze_query(payload.message)
    loading_states = (
        create_section_loading_states(analysis.target_section, analysis.loading_message)
        if follow_up
        else []
    )
    return QueryAnalysisResponse(is_follow_up=follow_up, analysis=analysis, loading_states=loading_states)


@app.get("/query/examples", response_model=ExampleQueriesResponse)
async def query_examples() -> ExampleQueriesResponse:
    """Sample follow-up messages per intent category."""
    return ExampleQueriesResponse(examples=EXAMPLE_QUERIES)


@app.post("/search/travel", response_model=TravelSearchResult)
async def travel_search(payload: SearchRequest) -> TravelSearchResult:
    """Search the mock flight, hotel and activity inventory."""
    if payload.criteria is not None:
        criteria = payload.criteria
    elif payload.message:
        criteria = parse_travel_request(payload.message)
    else:
        criteria = SearchCriteria()
    logger.info(f"Travel search request for {criteria.destination or 'any destination'}")
    return await search_travel(criteria)


@app.get("/health")
async def health_check() -> Dict[str, str]:
    """Simple health endpoint used for readiness probes."""

    return {"status": "healthy", "service": "trip-planner-chat"}

import logging

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from trailblazer.config import settings
from trailblazer.config.trail_options import get_search_options
from trailblazer.exceptions import ConfigurationError
from trailblazer.models.request import SuggestionRequest
from trailblazer.models.response import SuggestionResponse
from trailblazer.services.suggestion_service import SuggestionService

logger = logging.getLogger(__name__)

app = FastAPI(
    title="TrailBlazer API",
    description="Maps-grounded trail suggestions",
    version=settings.api_version,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

suggestion_service = SuggestionService()


def get_suggestion_service() -> SuggestionService:
    return suggestion_service


# main api
@app.post("/api/v1/trails/suggest", response_model=SuggestionResponse)
async def suggest_trails(
    request: SuggestionRequest,
    service: SuggestionService = Depends(get_suggestion_service),
):
    """Suggest trails near the given coordinates"""
    if request.coordinates is None:
        raise HTTPException(
            status_code=400,
            detail="We need your location to suggest nearby trails.",
        )

    try:
        return await service.suggest(request.preferences, request.coordinates)
    except ConfigurationError as e:
        raise HTTPException(
            status_code=503, detail=f"Trail suggestions are not configured: {str(e)}"
        )
    except Exception:
        logger.exception("Trail suggestion failed")
        raise HTTPException(
            status_code=502,
            detail="Failed to fetch trail suggestions. Please try again.",
        )


@app.get("/api/v1/trails/options")
async def trail_options():
    """Activity types, difficulty levels, feature options and form defaults"""
    return get_search_options()


@app.get("/health")
async def health_check():
    """Health check"""
    return {"status": "healthy", "version": settings.api_version}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)

"""Gemini adapter that asks for maps-grounded trail suggestions."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from google import genai
from google.genai import types
from pydantic import ValidationError

from trailblazer.config import settings
from trailblazer.exceptions import MissingApiKeyError
from trailblazer.models.grounding import GroundingChunk
from trailblazer.models.request import Coordinates

logger = logging.getLogger(__name__)

_DYNAMIC_RETRIEVAL_MODEL_PREFIXES = ("gemini-1.5",)


@dataclass(frozen=True)
class ModelAnswer:
    """Raw text plus the citations attached to the first candidate."""

    text: str
    grounding_chunks: List[GroundingChunk] = field(default_factory=list)


class GeminiTrailClient:
    """Thin wrapper around the google-genai async models API."""

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        dynamic_threshold: Optional[float] = None,
        client: Any = None,
    ) -> None:
        self._api_key = api_key if api_key is not None else settings.gemini_api_key
        self._model = model or settings.gemini_model
        self._dynamic_threshold = (
            dynamic_threshold
            if dynamic_threshold is not None
            else settings.gemini_dynamic_threshold
        )
        self._client = client

    def _get_client(self) -> Any:
        if not self._api_key:
            raise MissingApiKeyError()
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    def build_tools(self) -> List[types.Tool]:
        tools = [types.Tool(google_maps=types.GoogleMaps())]
        # Dynamic retrieval only exists on 1.5 models; 2.x rejects the tool
        if self._model.startswith(_DYNAMIC_RETRIEVAL_MODEL_PREFIXES):
            tools.append(
                types.Tool(
                    google_search_retrieval=types.GoogleSearchRetrieval(
                        dynamic_retrieval_config=types.DynamicRetrievalConfig(
                            mode=types.DynamicRetrievalConfigMode.MODE_DYNAMIC,
                            dynamic_threshold=self._dynamic_threshold,
                        )
                    )
                )
            )
        return tools

    def build_config(self, coordinates: Coordinates) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            tools=self.build_tools(),
            tool_config=types.ToolConfig(
                retrieval_config=types.RetrievalConfig(
                    lat_lng=types.LatLng(
                        latitude=coordinates.latitude,
                        longitude=coordinates.longitude,
                    )
                )
            ),
        )

    async def generate(self, prompt: str, coordinates: Coordinates) -> ModelAnswer:
        # Raises MissingApiKeyError before anything touches the network.
        client = self._get_client()
        config = self.build_config(coordinates)

        logger.info("Requesting trail suggestions from %s", self._model)
        try:
            response = await client.aio.models.generate_content(
                model=self._model,
                contents=prompt,
                config=config,
            )
        except Exception:
            logger.exception("Gemini API error")
            raise

        return ModelAnswer(
            text=self.extract_text(response),
            grounding_chunks=self.extract_grounding_chunks(response),
        )

    @staticmethod
    def extract_text(response: Any) -> str:
        return getattr(response, "text", None) or ""

    @staticmethod
    def extract_grounding_chunks(response: Any) -> List[GroundingChunk]:
        candidates = getattr(response, "candidates", None) or []
        if not candidates:
            return []
        metadata = getattr(candidates[0], "grounding_metadata", None)
        raw_chunks = getattr(metadata, "grounding_chunks", None) or []

        chunks: List[GroundingChunk] = []
        for index, raw in enumerate(raw_chunks):
            try:
                chunks.append(GroundingChunk.from_raw(raw))
            except ValidationError:
                logger.warning("Ignoring malformed grounding chunk %d", index, exc_info=True)
        return chunks

"""Chapter generator - calls the remote generation endpoint"""
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, List, Optional

import httpx

from .config import Settings, settings as default_settings
from .exceptions import GenerationFailure
from .models import ChapterContent, ChapterNumber, GenerateRequest, GenerateResponse
from .prompts import build_prompt

PARAGRAPH_SEPARATOR = "\n\n"


def split_paragraphs(text: str) -> List[str]:
    """Split generated text on blank-line separators. Empty pieces are kept."""
    return text.split(PARAGRAPH_SEPARATOR)


class ChapterGenerator:
    """
    Generates report chapters through the generation endpoint.

    One POST per call, no retry. Failures are logged on the injected logger
    and raised as GenerationFailure.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[httpx.AsyncClient] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.settings = settings or default_settings
        self.client = client
        self.logger = logger or logging.getLogger(__name__)

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        # Injected clients belong to the caller and stay open
        if self.client is not None:
            yield self.client
            return
        timeout = httpx.Timeout(self.settings.GENERATE_TIMEOUT)
        async with httpx.AsyncClient(timeout=timeout) as client:
            yield client

    async def generate(self, title: str, chapter: Any) -> ChapterContent:
        """
        Generate one chapter.

        Args:
            title: Project title, inserted verbatim into the prompt
            chapter: Chapter number (1, 2 or 3)

        Returns:
            ChapterContent labeled "Chapter {n}"

        Raises:
            InvalidChapterNumber: before any request is made
            GenerationFailure: transport error, non-2xx status or malformed body
        """
        number = ChapterNumber.parse(chapter)
        payload = GenerateRequest(prompt=build_prompt(title, number), chapter=int(number))

        self.logger.info(f"Requesting {number.label} for '{title}'")
        try:
            async with self._client() as client:
                response = await client.post(
                    self.settings.generate_url,
                    json=payload.model_dump(),
                    headers={"Content-Type": "application/json"},
                )
                if not response.is_success:
                    raise GenerationFailure(
                        number,
                        f"endpoint returned HTTP {response.status_code}",
                        status_code=response.status_code,
                    )
                data = GenerateResponse.model_validate(response.json())
        except GenerationFailure as e:
            self.logger.error(f"Error generating chapter {int(number)}: {e.detail}")
            raise
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            # ValueError covers JSON decode and pydantic validation errors
            detail = str(e) or type(e).__name__
            self.logger.error(f"Error generating chapter {int(number)}: {detail}")
            raise GenerationFailure(number, detail) from e

        paragraphs = split_paragraphs(data.content)
        self.logger.info(f"Received {number.label}: {len(paragraphs)} paragraphs")
        return ChapterContent(title=number.label, content=paragraphs)


async def generate_chapter_content(
    title: str,
    chapter: Any,
    settings: Optional[Settings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> ChapterContent:
    """Generate one chapter with a default ChapterGenerator."""
    generator = ChapterGenerator(settings=settings, client=client)
    return await generator.generate(title, chapter)

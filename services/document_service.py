import asyncio
import httpx
import logging
import time
from typing import List, Optional
from pydantic import ValidationError

from config import Config
from exceptions import (
    RemoteQueryError,
    RemoteResponseError,
    RemoteStatusError,
    RemoteTimeoutError,
    RemoteTransportError,
)
from models import DispatchReport, QueryRequest, QueryResponse, QueryResult
from services.fallback_responder import FallbackResponder
from utils.answer_scoring import NO_ANSWER, calculate_confidence, generate_reasoning

logger = logging.getLogger(__name__)

UPLOADED_SOURCE = "Uploaded Document"
SAMPLE_SOURCE = "Sample Policy Document"

class DocumentService:
    """
    Sends question batches to the HackRx query API and shapes the answers for the interface.

    Every batch is one POST to /hackrx/run. When that call fails, times out or
    returns something unusable, the batch is answered by the FallbackResponder
    instead, so callers always get one result per question and never an exception.
    """

    def __init__(self, config=None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or Config()
        self.transport = transport
        self.fallback = FallbackResponder()

    @property
    def run_url(self) -> str:
        return self.config.API_BASE_URL.rstrip("/") + self.config.RUN_PATH

    @property
    def timeout(self) -> float:
        return self.config.TIMEOUT_MS / 1000.0

    def build_headers(self) -> dict:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {self.config.AUTH_TOKEN}",
        }

    def build_request(self, questions: List[str], document_url: Optional[str] = None) -> QueryRequest:
        # Use uploaded document URL or fall back to sample document
        return QueryRequest(
            documents=document_url or self.config.DEFAULT_DOCUMENT_URL,
            questions=list(questions),
        )

    async def process_queries(self, questions: List[str], document_url: Optional[str] = None) -> List[QueryResult]:
        """Answer every question, index-aligned with the input"""
        report = await self.dispatch(questions, document_url)
        return report.results

    async def dispatch(self, questions: List[str], document_url: Optional[str] = None) -> DispatchReport:
        """Like process_queries, but also reports whether the fallback was used"""
        start_time = time.monotonic()

        if not questions:
            logger.warning("Received empty question batch, skipping API call")
            return DispatchReport(results=[])

        logger.info(f"Dispatching {len(questions)} questions")
        logger.info(f"Document URL: {document_url or 'sample policy document'}")

        try:
            answers = await self._call_remote(self.build_request(questions, document_url))
            results = self._to_results(questions, answers, uploaded=bool(document_url))

            elapsed_ms = int((time.monotonic() - start_time) * 1000)
            logger.info(f"Received {len(answers)} answers in {elapsed_ms} ms")
            return DispatchReport(results=results, elapsed_ms=elapsed_ms)

        except RemoteQueryError as e:
            logger.error(f"Error processing queries: {str(e)}")

            if isinstance(e, RemoteTimeoutError):
                logger.warning("Request timed out, using demo responses")
            elif isinstance(e, RemoteTransportError):
                logger.warning("API not available, using demo responses")
            else:
                logger.warning("API returned an unusable response, using demo responses")

            return self._fallback_report(questions, e.category, start_time)

        except Exception as e:
            logger.exception(f"Unexpected error processing queries: {str(e)}")
            return self._fallback_report(questions, "internal", start_time)

    def _fallback_report(self, questions: List[str], failure: str, start_time: float) -> DispatchReport:
        results = self.fallback.respond(questions)
        elapsed_ms = int((time.monotonic() - start_time) * 1000)
        return DispatchReport(
            results=results,
            degraded=True,
            failure=failure,
            elapsed_ms=elapsed_ms,
        )

    async def _call_remote(self, request: QueryRequest) -> List[Optional[str]]:
        """POST the batch and return the raw answer list"""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await asyncio.wait_for(
                    client.post(
                        self.run_url,
                        headers=self.build_headers(),
                        json=request.model_dump(),
                    ),
                    timeout=self.timeout,
                )
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise RemoteTimeoutError(f"No response within {self.config.TIMEOUT_MS} ms") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise RemoteTransportError(f"Failed to reach {self.run_url}: {str(e)}") from e

        if not response.is_success:
            raise RemoteStatusError(response.status_code, response.reason_phrase)

        try:
            data = QueryResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise RemoteResponseError(f"Invalid response body: {str(e)}") from e

        if len(data.answers) < len(request.questions):
            logger.warning(f"Mismatch in questions ({len(request.questions)}) and answers ({len(data.answers)})")

        return data.answers

    def _to_results(self, questions: List[str], answers: List[Optional[str]], uploaded: bool) -> List[QueryResult]:
        source = UPLOADED_SOURCE if uploaded else SAMPLE_SOURCE
        results = []

        for index, question in enumerate(questions):
            answer = answers[index] if index < len(answers) else None
            answer = answer or NO_ANSWER

            results.append(QueryResult(
                question=question,
                answer=answer,
                confidence=calculate_confidence(answer),
                sources=[source],
                reasoning=generate_reasoning(question, answer),
            ))

        return results

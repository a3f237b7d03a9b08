"""Distress-message classification with a safe, bounded result.

The pipeline is ``raw text -> Classifier -> ResponseValidator``.  The
classifier only talks to the text generator; the validator turns whatever
came back into a :class:`ClassificationResult` and never raises.  Any
failure along the way yields :data:`FALLBACK_RESULT`.
"""

from __future__ import annotations

import logging
import math
from concurrent.futures import Future, ThreadPoolExecutor, wait
from numbers import Real
from typing import Any, Dict, List, Optional, Sequence

from ..config import Settings, load_settings
from ..errors import InputError, UpstreamFormatError
from ..models import (
    MAX_SUMMARY_LENGTH,
    MAX_URGENCY,
    MIN_URGENCY,
    Category,
    ClassificationResult,
)
from ..utils.llm_parsing import parse_json_object
from ..utils.text_cleaning import is_blank
from .generation import OpenAIGenerator, TextGenerator

logger = logging.getLogger(__name__)

FALLBACK_RESULT: ClassificationResult = ClassificationResult(
    category=Category.OTHER,
    urgency=5,
    summary="Uncategorized Incident",
)

REQUIRED_FIELDS: tuple[str, ...] = ("category", "urgency", "summary")
ELLIPSIS: str = "..."

PROMPT_TEMPLATE: str = """Analyze this disaster distress message: '{text}'.

Return ONLY raw JSON. No markdown backticks. No explanation. Just the JSON object.

Required format:
{{
  "category": "MEDICAL" or "FOOD" or "RESCUE" or "OTHER",
  "urgency": integer from 1 to 10 (10 is critical/life-threatening),
  "summary": "string with max 5 words"
}}

Return ONLY the JSON object above. No other text."""


def build_prompt(text: str) -> str:
    """Embed *text* verbatim into the classification prompt."""
    return PROMPT_TEMPLATE.format(text=text)


# ---------------------------------------------------------------------------
# Classifier
# ---------------------------------------------------------------------------

class Classifier:
    """Send a message to the text generator and return its unparsed answer."""

    def __init__(
        self,
        generator: TextGenerator | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.generator = generator or OpenAIGenerator(self.settings)

    @property
    def credentials_configured(self) -> bool:
        return self.settings.has_credentials

    def classify(self, text: str) -> str:
        """Return the raw generator output for *text*.

        Transport and credential errors are raised; callers go through
        :func:`analyze_request`, which converts them to the fallback.
        """
        if is_blank(text):
            raise InputError("Cannot classify an empty message")
        if not self.credentials_configured:
            raise InputError("No API credential configured for the text generator")
        raw = self.generator.generate(build_prompt(text))
        logger.debug("Raw classifier response: %s", raw)
        return raw


# ---------------------------------------------------------------------------
# Response validation / normalization
# ---------------------------------------------------------------------------

def _normalize_category(value: Any) -> Category:
    if isinstance(value, str):
        try:
            return Category(value)
        except ValueError:
            pass
    logger.warning("Invalid category from text generator: %r", value)
    return Category.OTHER


def _normalize_urgency(value: Any) -> int:
    # bool is an int subclass; true/false is not an urgency
    if isinstance(value, bool):
        raise UpstreamFormatError(f"Urgency is not numeric: {value!r}")
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError as exc:
            raise UpstreamFormatError(f"Urgency is not numeric: {value!r}") from exc
    if isinstance(value, int):
        # arbitrarily large ints cannot go through float
        return max(MIN_URGENCY, min(MAX_URGENCY, value))
    if not isinstance(value, Real):
        raise UpstreamFormatError(f"Urgency is not numeric: {value!r}")
    if math.isnan(value):
        raise UpstreamFormatError(f"Urgency is NaN: {value!r}")
    if math.isinf(value):
        return MAX_URGENCY if value > 0 else MIN_URGENCY
    return max(MIN_URGENCY, min(MAX_URGENCY, math.floor(value)))


def _normalize_summary(value: Any) -> str:
    if not isinstance(value, str):
        raise UpstreamFormatError(f"Summary is not a string: {value!r}")
    if len(value) > MAX_SUMMARY_LENGTH:
        return value[: MAX_SUMMARY_LENGTH - len(ELLIPSIS)] + ELLIPSIS
    return value


class ResponseValidator:
    """Turn raw generator text into a bounded :class:`ClassificationResult`."""

    def normalize(
        self,
        raw_text: str,
        input_text: str,
        credentials_configured: bool = True,
    ) -> ClassificationResult:
        """Clean, parse and normalize *raw_text*; never raises.

        Empty *input_text* or ``credentials_configured=False`` yields the
        fallback without looking at *raw_text*.

        A field counts as missing only when the key is absent or ``null``;
        falsy values such as ``0`` or ``""`` are present and normalized
        (``urgency: 0`` becomes 1).
        """
        if is_blank(input_text):
            logger.warning("Empty text provided for classification")
            return FALLBACK_RESULT
        if not credentials_configured:
            logger.error("OPENAI_API_KEY is not set – skipping classification")
            return FALLBACK_RESULT

        try:
            parsed = parse_json_object(raw_text)
            return self._normalize_fields(parsed)
        except ValueError as exc:
            logger.error("Could not parse classifier response: %s", exc)
            return FALLBACK_RESULT
        except UpstreamFormatError as exc:
            logger.warning("Invalid response structure from text generator: %s", exc)
            return FALLBACK_RESULT
        except Exception:  # noqa: BLE001
            logger.exception("Unexpected error while normalizing classifier response")
            return FALLBACK_RESULT

    @staticmethod
    def _normalize_fields(parsed: Dict[str, Any]) -> ClassificationResult:
        missing = [name for name in REQUIRED_FIELDS if parsed.get(name) is None]
        if missing:
            raise UpstreamFormatError(f"Missing fields: {', '.join(missing)}")

        return ClassificationResult(
            category=_normalize_category(parsed["category"]),
            urgency=_normalize_urgency(parsed["urgency"]),
            summary=_normalize_summary(parsed["summary"]),
        )


def analyze_request(
    text: str,
    classifier: Classifier,
    validator: ResponseValidator | None = None,
) -> ClassificationResult:
    """Classify one distress message; always returns a usable result."""
    validator = validator or ResponseValidator()

    if is_blank(text):
        logger.warning("Empty text provided to analyze_request")
        return FALLBACK_RESULT
    if not classifier.credentials_configured:
        logger.error("OPENAI_API_KEY is not set – skipping classification")
        return FALLBACK_RESULT

    try:
        raw = classifier.classify(text)
    except Exception as exc:  # noqa: BLE001
        logger.error("Error analyzing request with text generator: %s", exc)
        return FALLBACK_RESULT

    return validator.normalize(raw, text, classifier.credentials_configured)


# ---------------------------------------------------------------------------
# Batch classification
# ---------------------------------------------------------------------------

class BatchClassifier:
    """Classify many messages concurrently, preserving input order."""

    def __init__(
        self,
        classifier: Classifier,
        validator: ResponseValidator | None = None,
        max_workers: Optional[int] = None,
    ) -> None:
        self.classifier = classifier
        self.validator = validator or ResponseValidator()
        self.max_workers = max_workers or classifier.settings.classifier_max_workers

    def classify_all(
        self,
        texts: Sequence[str],
        timeout: Optional[float] = None,
    ) -> List[ClassificationResult]:
        """Return one result per input, at the same index as its input.

        When *timeout* (seconds, whole batch) expires, unfinished elements
        are cancelled where possible and receive the fallback result.
        """
        if not texts:
            return []

        results: List[ClassificationResult] = [FALLBACK_RESULT] * len(texts)
        executor = ThreadPoolExecutor(
            max_workers=max(1, min(self.max_workers, len(texts))),
            thread_name_prefix="classifier",
        )
        try:
            futures: Dict[Future[ClassificationResult], int] = {
                executor.submit(analyze_request, text, self.classifier, self.validator): idx
                for idx, text in enumerate(texts)
            }
            done, not_done = wait(futures, timeout=timeout)

            for future in done:
                idx = futures[future]
                try:
                    results[idx] = future.result()
                except Exception as exc:  # noqa: BLE001
                    logger.error("Classification of item %d failed: %s", idx, exc)

            for future in not_done:
                future.cancel()
                logger.warning(
                    "Classification of item %d timed out – using fallback", futures[future]
                )
        finally:
            executor.shutdown(wait=timeout is None, cancel_futures=True)

        logger.info(
            "Classified %d messages (%d fallbacks)",
            len(texts),
            sum(1 for r in results if r is FALLBACK_RESULT),
        )
        return results


__all__ = [
    "FALLBACK_RESULT",
    "build_prompt",
    "Classifier",
    "ResponseValidator",
    "analyze_request",
    "BatchClassifier",
]

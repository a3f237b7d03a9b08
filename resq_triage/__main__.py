"""Smoke test: classify one distress message and print the result.

Usage::

    python -m resq_triage "We are trapped on the roof, water is rising"
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional

from .logging_config import logging as _  # noqa: F401  # ensure config applied early
from .config import load_settings
from .services.classification import Classifier, analyze_request

logger = logging.getLogger(__name__)

SAMPLE_MESSAGE: str = (
    "My grandmother is having chest pains and we are trapped on the second floor!"
)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="resq_triage",
        description="Classify a disaster distress message.",
    )
    parser.add_argument("text", nargs="?", default=SAMPLE_MESSAGE, help="message to classify")
    args = parser.parse_args(argv)

    settings = load_settings()
    logger.info("Classifying with model %s", settings.openai_model)
    logger.info("Input: %r", args.text)

    result = analyze_request(args.text, Classifier(settings=settings))
    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

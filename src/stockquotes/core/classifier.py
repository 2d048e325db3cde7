"""Decide which of the provider's response shapes a reply matches.

Twelve Data sometimes answers a failed lookup with a body that simply lacks
the success fields. When that happens the same request is issued exactly
once more and the second body is read as the provider's error schema. This
one-shot re-fetch is unrelated to the date fallback in ``fallback.py``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date
from functools import partial

from stockquotes.data.base import FetchResult, UpstreamClient
from stockquotes.data.schemas import ErrorPayload
from stockquotes.domain.models import (
    EndpointKind,
    Outcome,
    ProviderError,
    ProviderErrorMatch,
    Success,
    Unrecognized,
)

GENERIC_FAILURE_MESSAGE = "Unable to Process Request."

logger = logging.getLogger("stockquotes.core.classifier")


def classify(
    kind: EndpointKind,
    result: FetchResult,
    refetch: Callable[[], FetchResult],
) -> Outcome:
    """Classify ``result``; may call ``refetch`` once to obtain an authoritative error."""
    if not result.ok:
        return Unrecognized(message=result.describe())

    parsed = result.parse()
    if parsed.has_success_fields():
        return Success(value=parsed)

    logger.debug("%s body lacked success fields, re-fetching to read the error", kind.value)
    second = refetch()
    if not second.ok:
        return Unrecognized(message=second.describe())

    error = ErrorPayload.from_body(second.body)
    if error.is_provider_error():
        return ProviderErrorMatch(
            error=ProviderError(
                code=error.code or 0,
                message=error.message or "",
                status=error.status or "",
            )
        )

    return Unrecognized(
        message=GENERIC_FAILURE_MESSAGE,
        detail=(
            f"JSON returned from Twelve Data was not {kind.value} data as expected, "
            f"nor was it an error. Status: {error.status} Message: {error.message}"
        ),
    )


def fetch_and_classify(
    client: UpstreamClient,
    kind: EndpointKind,
    symbol: str,
    on_date: date | None = None,
) -> Outcome:
    """Fetch once and classify, re-fetching the identical request if needed."""
    request = partial(client.fetch, kind, symbol, on_date)
    return classify(kind, request(), request)

"""
Workplace ranking service.

Retrieves the workplaces and shifts collections concurrently, counts shifts
per workplace and returns the busiest workplaces.

Pipeline:
1. fetch both collections in parallel (join barrier, fail fast)
2. count shifts by ``workplace_id``
3. join counts onto workplaces in source order (missing count -> 0)
4. stable sort by count descending, truncate to ``limit``

Shifts whose ``workplace_id`` matches no workplace are counted but never
joined, so they do not affect the result.
"""

from collections import Counter
from concurrent.futures import FIRST_EXCEPTION, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Protocol, Tuple

from pydantic import ValidationError

from shift_hub.config.settings import get_settings
from shift_hub.io.connectors.shifts_api import ShiftsApiError
from shift_hub.utils.logging import get_logger

from .models import RankedWorkplace, Shift, Workplace

logger = get_logger(__name__)

DEFAULT_LIMIT = 3

# Failures that mean "the data could not be retrieved" rather than a bug
RETRIEVAL_ERRORS = (ShiftsApiError, ValidationError)


class CollectionFetcher(Protocol):
    """Anything that can return the records of a collection endpoint."""

    def fetch_collection(self, endpoint: str) -> List[Dict[str, Any]]:
        """
        Return the unwrapped records served at ``endpoint``.

        Raises:
            ShiftsApiError: If the collection cannot be retrieved or decoded.
        """
        ...


@dataclass(frozen=True)
class TopWorkplacesResult:
    """
    Outcome of a leaderboard computation.

    Attributes:
        workplaces: Ranked entries, empty when retrieval failed.
        error: Failure description, None on success.
    """

    workplaces: List[RankedWorkplace] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def count_shifts(shifts: Iterable[Shift]) -> Dict[str, int]:
    """
    Count shifts per workplace id. Ids are compared exactly.

    Shifts without a workplace id can never be joined and are left out.
    """
    return dict(
        Counter(
            shift.workplace_id for shift in shifts if shift.workplace_id is not None
        )
    )


def rank_workplaces(
    workplaces: Iterable[Workplace],
    shift_counts: Dict[str, int],
    limit: int = DEFAULT_LIMIT,
) -> List[RankedWorkplace]:
    """
    Join shift counts onto workplaces and return the top ``limit`` entries.

    Workplaces with equal counts keep their order from ``workplaces``.
    """
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")

    joined = [
        RankedWorkplace(name=workplace.name, shifts=shift_counts.get(workplace.id, 0))
        for workplace in workplaces
    ]
    # sorted() is stable, and reverse=True preserves the order of equal keys
    ranked = sorted(joined, key=lambda entry: entry.shifts, reverse=True)
    return ranked[:limit]


class TopWorkplacesService:
    """
    Computes the workplace leaderboard from a collection fetcher.

    The fetcher is injected so tests can substitute an in-memory double;
    production code passes a ``ShiftsApiClient``.
    """

    def __init__(
        self,
        fetcher: CollectionFetcher,
        *,
        workplaces_endpoint: Optional[str] = None,
        shifts_endpoint: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> None:
        if None in (workplaces_endpoint, shifts_endpoint, limit):
            settings = get_settings()
            if workplaces_endpoint is None:
                workplaces_endpoint = settings.workplaces_endpoint
            if shifts_endpoint is None:
                shifts_endpoint = settings.shifts_endpoint
            if limit is None:
                limit = settings.top_workplaces_limit

        if not workplaces_endpoint.strip() or not shifts_endpoint.strip():
            raise ValueError("Endpoints cannot be empty")
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        self.fetcher = fetcher
        self.workplaces_endpoint = workplaces_endpoint
        self.shifts_endpoint = shifts_endpoint
        self.limit = limit

    def _fetch_workplaces(self) -> List[Workplace]:
        records = self.fetcher.fetch_collection(self.workplaces_endpoint)
        return [Workplace.model_validate(record) for record in records]

    def _fetch_shifts(self) -> List[Shift]:
        records = self.fetcher.fetch_collection(self.shifts_endpoint)
        return [Shift.model_validate(record) for record in records]

    def fetch_collections(self) -> Tuple[List[Workplace], List[Shift]]:
        """
        Retrieve workplaces and shifts concurrently.

        Both requests run on a dedicated two-worker pool. The first failure
        is raised immediately; the pool is shut down without waiting for the
        other request.

        Raises:
            ShiftsApiError: If either collection cannot be retrieved.
            ValidationError: If a record does not match its model.
        """
        executor = ThreadPoolExecutor(
            max_workers=2, thread_name_prefix="shift-hub-fetch"
        )
        try:
            futures: Dict[Future, str] = {
                executor.submit(self._fetch_workplaces): self.workplaces_endpoint,
                executor.submit(self._fetch_shifts): self.shifts_endpoint,
            }
            done, _ = wait(futures, return_when=FIRST_EXCEPTION)

            for future, endpoint in futures.items():
                if future in done and future.exception() is not None:
                    exc = future.exception()
                    logger.warning(
                        "top_workplaces.collection_failed",
                        endpoint=endpoint,
                        error=str(exc),
                        error_type=type(exc).__name__,
                    )
                    raise exc

            workplaces_future, shifts_future = futures
            return workplaces_future.result(), shifts_future.result()
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    def get_top_workplaces_result(self) -> TopWorkplacesResult:
        """
        Compute the leaderboard, reporting failures instead of raising.

        Returns:
            TopWorkplacesResult with the ranked entries, or with an empty
            list and ``error`` set when retrieval failed.
        """
        try:
            workplaces, shifts = self.fetch_collections()
        except RETRIEVAL_ERRORS as e:
            logger.error(
                "top_workplaces.fetch_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return TopWorkplacesResult(error=f"{type(e).__name__}: {e}")
        except Exception as e:
            logger.exception(
                "top_workplaces.unexpected_error",
                error_type=type(e).__name__,
            )
            return TopWorkplacesResult(error=f"{type(e).__name__}: {e}")

        shift_counts = count_shifts(shifts)
        ranked = rank_workplaces(workplaces, shift_counts, self.limit)

        logger.info(
            "top_workplaces.ranked",
            workplaces_count=len(workplaces),
            shifts_count=len(shifts),
            result_count=len(ranked),
        )
        return TopWorkplacesResult(workplaces=ranked)

    def get_top_workplaces(self) -> List[RankedWorkplace]:
        """
        Return the top workplaces by shift count.

        Never raises on retrieval failure: an empty list is returned and the
        failure is logged. Use ``get_top_workplaces_result`` to tell an
        empty source apart from a failed fetch.
        """
        return self.get_top_workplaces_result().workplaces

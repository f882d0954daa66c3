"""Bounded-concurrency sequencing of extractor calls.

Extraction parses and type-checks source, so packages are fed to the
extractor through a work queue drained by a fixed number of workers. With
the default single worker every package is extracted, and its result handed
to the completion callback, before the next one starts.

Example:
    >>> import asyncio
    >>> from pathlib import Path
    >>> from docsconfig.extractor.memory import MemoryExtractor
    >>> from docsconfig.packages import PackageDescriptor
    >>> from docsconfig.sequencer import Sequencer
    >>> extractor = MemoryExtractor({"a": [{"name": "a"}], "b": []})
    >>> packages = [PackageDescriptor(n, Path(n, "package.json")) for n in "ab"]
    >>> results = asyncio.run(Sequencer(extractor).run(packages))
    >>> [(r.package.name, len(r.symbols)) for r in results]
    [('a', 1), ('b', 0)]
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from docsconfig.core.exceptions import ExtractionError

if TYPE_CHECKING:
    from docsconfig.models.metadata import SymbolMetadata
    from docsconfig.packages import PackageDescriptor
    from docsconfig.protocols.extractor import MetadataExtractor

logger = logging.getLogger(__name__)


@dataclass
class PackageResult:
    """Outcome of extracting one package.

    Attributes:
        package: The package that was extracted.
        symbols: Extracted symbols (empty when the extractor had no result).
        empty: True when the extractor produced no result at all.
        started_at: When extraction started.
        completed_at: When the completion callback returned.
    """

    package: PackageDescriptor
    symbols: list[SymbolMetadata] = field(default_factory=list)
    empty: bool = False
    started_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    completed_at: datetime | None = None

    @property
    def duration_ms(self) -> float:
        """Milliseconds between start and completion (0 while running)."""
        if self.completed_at is None:
            return 0.0
        return (self.completed_at - self.started_at).total_seconds() * 1000


# Sync or async; an awaitable return value is awaited.
ResultCallback = Callable[[PackageResult], Any]


class Sequencer:
    """Runs the extractor over packages with bounded concurrency.

    Args:
        extractor: Metadata extractor to call.
        concurrency: Maximum extractor calls in flight (default 1).

    Raises:
        ValueError: If concurrency is below 1.
    """

    def __init__(self, extractor: MetadataExtractor, concurrency: int = 1) -> None:
        if concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {concurrency}")
        self.extractor = extractor
        self.concurrency = concurrency

    async def run(
        self,
        packages: Sequence[PackageDescriptor],
        on_result: ResultCallback | None = None,
    ) -> list[PackageResult]:
        """Extract every package, acknowledging each completion.

        The first failure stops the run: workers take no further packages,
        and the error propagates.

        Args:
            packages: Packages in processing order.
            on_result: Called with each result before the worker takes the
                next package. May be sync or async.

        Returns:
            Results in the same order as ``packages``.

        Raises:
            ExtractionError: If extraction of any package fails.
        """
        queue: asyncio.Queue[tuple[int, PackageDescriptor]] = asyncio.Queue()
        for item in enumerate(packages):
            queue.put_nowait(item)

        results: list[PackageResult | None] = [None] * len(packages)
        failed = asyncio.Event()

        async def worker() -> None:
            while not failed.is_set():
                try:
                    index, package = queue.get_nowait()
                except asyncio.QueueEmpty:
                    return
                try:
                    result = await self._extract(package)
                    if on_result is not None:
                        outcome = on_result(result)
                        if inspect.isawaitable(outcome):
                            await outcome
                except BaseException:
                    failed.set()
                    raise
                finally:
                    queue.task_done()
                result.completed_at = datetime.now(UTC)
                results[index] = result

        workers = [asyncio.create_task(worker()) for _ in range(min(self.concurrency, len(packages)))]
        try:
            await asyncio.gather(*workers)
        except BaseException:
            for task in workers:
                task.cancel()
            await asyncio.gather(*workers, return_exceptions=True)
            raise

        return [result for result in results if result is not None]

    async def _extract(self, package: PackageDescriptor) -> PackageResult:
        logger.info(f"Parsing Docs: {package.name}")
        result = PackageResult(package=package)
        try:
            symbols = await self.extractor.extract(package)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"Extraction failed for {package.name}: {exc}", package=package.name) from exc

        if symbols is None:
            logger.warning(f"No documentation produced for {package.name} ({package.descriptor_path})")
            result.empty = True
        else:
            result.symbols = list(symbols)
        return result

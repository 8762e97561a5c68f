"""The join aligner task."""

from __future__ import annotations

import threading
from logging import getLogger
from typing import Any, Sequence

import pydantic

from ..core.enums import TaskStatus
from ..core.exceptions import ConfigurationError, PatternExtractionError, ProcessStatusError, RepeatedIdError
from ..core.models import FeatureList
from .assembly import AlignmentResult, assemble_result
from .extraction import PatternExtractor, create_extractor, extract_patterns
from .matching import match_sample
from .parameters import JoinAlignerParameters
from .rows import MasterRowStore

logger = getLogger(__name__)


class AlignmentTask:
    """Align isotope patterns from multiple samples into a single table.

    Samples are processed one at a time in the order provided. The isotope patterns of each sample
    are matched against the master rows built from all previously processed samples. Unmatched
    patterns create new master rows. After all samples are processed, master rows are expanded
    into an :py:class:`~isoalign.alignment.assembly.AlignmentResult`.

    The task status, progress and result are meant to be polled while :py:meth:`run` executes in a
    worker thread. Cancellation is cooperative and it is checked between sample rounds.

    :param data: the feature lists of the samples to align, in processing order.
    :param parameters: the alignment parameters, either as a parameter model or as a dictionary.
    :param extractor: the isotope pattern extractor. Either an extractor instance or the name of a
        registered extractor. If ``None``, the default extractor is used.
    :raises ConfigurationError: if invalid parameters are provided.
    :raises RepeatedIdError: if multiple feature lists share the same sample id.

    """

    def __init__(
        self,
        data: Sequence[FeatureList],
        parameters: JoinAlignerParameters | dict[str, Any] | None = None,
        extractor: PatternExtractor | str | None = None,
    ):
        self.parameters = _validate_parameters(parameters)

        sample_ids = [x.sample.id for x in data]
        if len(set(sample_ids)) < len(sample_ids):
            raise RepeatedIdError("Feature lists must have unique sample ids.")

        self._data = list(data)
        self._extractor = create_extractor(extractor)
        self._status = TaskStatus.WAITING
        self._progress = 0.0
        self._result: AlignmentResult | None = None
        self._error: Exception | None = None
        self._cancel_event = threading.Event()

    @property
    def description(self) -> str:
        """A short description of the task."""
        return f"Join aligner, {len(self._data)} feature lists."

    @property
    def error_message(self) -> str | None:
        """The cause of the task failure. ``None`` if the task did not fail."""
        return None if self._error is None else str(self._error)

    def get_status(self) -> TaskStatus:
        """Retrieve the current task status."""
        return self._status

    def get_progress(self) -> float:
        """Retrieve the fraction of processed samples."""
        return self._progress

    def get_error(self) -> Exception | None:
        """Retrieve the exception that caused the task failure."""
        return self._error

    def get_result(self) -> AlignmentResult | None:
        """Retrieve the alignment result. Only available after the task finished."""
        return self._result

    def cancel(self) -> None:
        """Request the task cancellation.

        A waiting task is canceled immediately. A running task is canceled before starting the
        next sample round. Finished, failed or canceled tasks are not modified.

        """
        if self._status is TaskStatus.WAITING:
            self._status = TaskStatus.CANCELED
            logger.info(f"{self.description} Canceled before starting.")
        self._cancel_event.set()

    def run(self) -> None:
        """Execute the alignment.

        :raises ProcessStatusError: if the task is not in the waiting status.

        """
        if self._status is TaskStatus.CANCELED:
            return

        if self._status is not TaskStatus.WAITING:
            raise ProcessStatusError(f"Cannot run a task with status `{self._status.value}`.")

        self._status = TaskStatus.PROCESSING
        logger.info(f"Starting {self.description}")

        store = MasterRowStore()
        n_samples = len(self._data)
        for k, data in enumerate(self._data):
            if self._check_canceled():
                return

            try:
                patterns = extract_patterns(self._extractor, data)
            except PatternExtractionError as e:
                self._error = e
                self._status = TaskStatus.ERROR
                logger.error(f"{e}: {e.__cause__}")
                return

            match_sample(store, data.sample.id, patterns, self.parameters)
            self._progress = (k + 1) / n_samples
            logger.info(f"Aligned `{data.sample.id}` ({k + 1}/{n_samples}). Master rows: {len(store)}.")

        if self._check_canceled():
            return

        self._result = assemble_result(store, [x.sample.id for x in self._data], self.parameters)
        self._progress = 1.0
        self._status = TaskStatus.FINISHED
        logger.info(f"Finished join aligner. Created {self._result.get_n_rows()} aligned rows.")

    def _check_canceled(self) -> bool:
        if self._cancel_event.is_set():
            self._status = TaskStatus.CANCELED
            logger.info(f"{self.description} Canceled after processing {self._progress:.0%} of samples.")
            return True
        return False


def align(
    data: Sequence[FeatureList],
    parameters: JoinAlignerParameters | dict[str, Any] | None = None,
    extractor: PatternExtractor | str | None = None,
) -> AlignmentResult:
    """Align isotope patterns from multiple samples.

    Creates and runs an :py:class:`AlignmentTask` in the current thread.

    :param data: the feature lists of the samples to align, in processing order.
    :param parameters: the alignment parameters.
    :param extractor: the isotope pattern extractor.
    :raises ConfigurationError: if invalid parameters are provided.
    :raises PatternExtractionError: if isotope patterns cannot be extracted from a sample.
    :raises ProcessStatusError: if the task ends without producing a result.

    """
    task = AlignmentTask(data, parameters, extractor)
    task.run()
    error = task.get_error()
    if error is not None:
        raise error
    result = task.get_result()
    if result is None:
        msg = f"{task.description} Ended with status `{task.get_status().value}` without a result."
        raise ProcessStatusError(msg)
    return result


def _validate_parameters(parameters: JoinAlignerParameters | dict[str, Any] | None) -> JoinAlignerParameters:
    if parameters is None:
        return JoinAlignerParameters()

    if isinstance(parameters, JoinAlignerParameters):
        parameters = parameters.model_dump()

    try:
        return JoinAlignerParameters.model_validate(parameters)
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid join aligner parameters: {e}") from e

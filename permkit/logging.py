import warnings
from collections import deque
from pathlib import Path
from typing import Final, Optional, Sequence

from permkit.models.log_models import ActivityLog, Severity

import orjson

__all__ = ('Logger',)

class Logger:
    '''Batches ActivityLog records and appends them to a JSON-lines file.
    With no log file configured, flushed records are dropped.'''
    __slots__ = ('_log_queue', '_log_filepath', '_batch_size', '_min_severity')

    def __init__(self,
                 log_filepath: Optional[Path],
                 batch_size: int = 16,
                 min_severity: int = Severity.INFO):
        self._log_filepath: Final[Optional[Path]] = log_filepath
        self._log_queue: Final[deque[ActivityLog]] = deque()
        self.batch_size = batch_size
        self.min_severity = min_severity

    @property
    def log_filepath(self) -> Optional[Path]:
        return self._log_filepath

    @property
    def batch_size(self) -> int:
        return self._batch_size
    @batch_size.setter
    def batch_size(self, value: int) -> None:
        if not isinstance(value, int) or (value <= 0):
            raise ValueError("Batch size must be a positive integer")
        self._batch_size = value

    @property
    def min_severity(self) -> int:
        return self._min_severity
    @min_severity.setter
    def min_severity(self, value: int) -> None:
        if not isinstance(value, int) or not (Severity.INFO <= value <= Severity.CRITICAL_FAILURE):
            raise ValueError(f"Minimum severity must be between {int(Severity.INFO)} and {int(Severity.CRITICAL_FAILURE)}")
        self._min_severity = value

    @property
    def pending(self) -> int:
        return len(self._log_queue)

    def enqueue_log(self, log: ActivityLog) -> None:
        if log.severity < self._min_severity:
            return

        self._log_queue.append(log)
        if len(self._log_queue) >= self._batch_size:
            self.flush_logs()

    def _flush_batch(self, batch: Sequence[ActivityLog]) -> None:
        if not self._log_filepath:
            return

        try:
            with open(self._log_filepath, 'ab') as log_file:
                log_file.write(b''.join(orjson.dumps(log_entry.model_dump(mode='json')) + b'\n'
                                        for log_entry in batch))
        except OSError as e:
            # Sink failures never reach the caller, the batch is dropped
            warnings.warn(f'Dropped {len(batch)} activity logs, unable to write to {self._log_filepath}: {e.strerror}',
                          category=RuntimeWarning, stacklevel=2)

    def flush_logs(self) -> None:
        batch: list[ActivityLog] = []
        while self._log_queue:
            batch.append(self._log_queue.popleft())

        if batch:
            self._flush_batch(batch)

    def close(self) -> None:
        self.flush_logs()

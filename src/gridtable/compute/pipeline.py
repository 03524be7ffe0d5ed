"""Producer/consumer pipeline used to materialize join results.

Join nodes generate their output one row at a time.
The pipeline runs the generator (the producer) in a dedicated
thread and hands each row to the consumer, the thread that
invoked the pipeline, which appends it to the result table::

    producer thread --(row)--> handoff --(row)--> consumer --> result table

The handoff holds at most one row, so the producer can
compute the next match while the consumer stores the previous
one, but it is never more than one row ahead.
When the producer is exhausted it sends an end of stream
marker and the consumer returns the completed table.

The result table is only ever touched by the consumer,
and the handoff queue is the only shared object, thus
no locking is needed.

If the producer fails, the exception travels through
the handoff and is raised again in the consumer.
If the consumer fails, it tells the producer to stop
so that the thread doesn't stay blocked waiting for
a consumer that is gone.

>>> from gridtable import DataTable
>>> result = run_pipeline(iter([["a", "1"], ["b", "2"]]), DataTable(2))
>>> result.to_rows()
[['a', '1'], ['b', '2']]
"""

import logging
import queue
import threading
from typing import Iterator

from ..table import DataTable

logger = logging.getLogger(__name__)

END_OF_STREAM = object()
"""Marker sent by the producer once all the rows were sent."""


class ProducerFailure:
    """Carries an exception raised by the producer to the consumer."""

    def __init__(self, error: BaseException) -> None:
        self.error = error


def run_pipeline(producer: Iterator[list[str]], sink: DataTable) -> DataTable:
    """Append all rows emitted by producer to sink using a producer thread.

    :param producer: The iterator generating the rows.
    :param sink: The table where rows have to be appended.
    :returns: The sink itself, once the producer is exhausted.
    """
    handoff: queue.Queue = queue.Queue(maxsize=1)
    stopped = threading.Event()

    def produce() -> None:
        try:
            for row in producer:
                handoff.put(row)
                if stopped.is_set():
                    logger.debug("Consumer stopped, abandoning producer")
                    return
        except BaseException as e:
            # Forwarded whatever its type, the consumer only stops on a terminal item.
            handoff.put(ProducerFailure(e))
        else:
            handoff.put(END_OF_STREAM)

    thread = threading.Thread(target=produce, name="gridtable-producer", daemon=True)
    thread.start()
    try:
        while True:
            item = handoff.get()
            if item is END_OF_STREAM:
                break
            if isinstance(item, ProducerFailure):
                raise item.error
            sink.append_row(item)
    finally:
        # Once stopped is set the producer puts at most one more item,
        # emptying the handoff guarantees there is room for it.
        stopped.set()
        try:
            handoff.get_nowait()
        except queue.Empty:
            pass
        thread.join()
    return sink


def drain(producer: Iterator[list[str]], sink: DataTable) -> DataTable:
    """Append all rows emitted by producer to sink in the current thread.

    This is the sequential equivalent of :func:`run_pipeline`,
    the resulting table is exactly the same.
    """
    for row in producer:
        sink.append_row(row)
    return sink

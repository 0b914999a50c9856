"""Running the advisor off the critical path.

The advisor is handed immutable snapshots and runs on a worker thread. The
caller waits at most ``timeout`` seconds; a timeout, an exception or an
empty reply turns into a message the shopkeeper can read. Nothing the
advisor does can reach the stores.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

from tendero.domain.models import StoreSnapshot
from tendero.interfaces.advisor import Advisor

logger = logging.getLogger(__name__)

NO_ANSWER_MESSAGE = "Sorry, I could not come up with advice right now."
FAILURE_MESSAGE = (
    "Something went wrong while asking the assistant. Please try again later."
)
TIMEOUT_MESSAGE = "The assistant is taking too long to answer. Please try again later."


def ask_advisor(
    advisor: Advisor,
    query: str,
    snapshot: StoreSnapshot,
    *,
    timeout: float | None = None,
) -> str:
    """Ask ``advisor`` about the store and return its answer or a fallback.

    Never raises for advisor failures; they are logged and replaced by one of
    the fallback messages.
    """
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="tendero-advisor")
    future = executor.submit(
        advisor.advise, query, snapshot.products, snapshot.customers, snapshot.sales
    )
    try:
        answer = future.result(timeout=timeout)
    except TimeoutError:
        logger.warning("Advisor did not answer within %s s", timeout)
        return TIMEOUT_MESSAGE
    except Exception:  # pylint: disable=broad-except
        logger.exception("Advisor %s failed", type(advisor).__name__)
        return FAILURE_MESSAGE
    finally:
        # A stuck advisor is left to finish on its own thread.
        executor.shutdown(wait=False, cancel_futures=True)

    if not isinstance(answer, str) or not answer.strip():
        logger.warning("Advisor %s returned no usable answer", type(advisor).__name__)
        return NO_ANSWER_MESSAGE
    return answer.strip()

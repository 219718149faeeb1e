import logging
from typing import Callable, TypeVar

from pymongo.client_session import ClientSession

from mondo.options.concerns import coerce_read_concern, coerce_read_preference, coerce_write_concern

logger = logging.getLogger(__name__)

T = TypeVar("T")


def with_transaction(session: ClientSession, body: Callable[[], T], **opts) -> T:
    """Runs `body` in a transaction on `session`.

    The driver's transaction machinery runs the body, retrying the whole body when it raises a transient transaction
    error and retrying the commit when its outcome is unknown. `body` must pass the same session to every operation it
    runs, Mondo doesn't check this:

        ```python
        with client.start_session() as session:
            with_transaction(
                session,
                lambda: (
                    insert_one(db, "coll", {"name": "hello"}, session=session),
                    insert_one(db, "coll", {"name": "world"}, session=session),
                ),
            )
        ```

    Args:
        session: The session to run the transaction on
        body: A callable taking no arguments that runs the transaction's operations
        **opts: The options bag. Recognized keys:
            - `read_concern`, `read_preference`: See `coerce_read_concern` and `coerce_read_preference`
            - `write_concern`, `w`, `w_timeout_ms`, `journal`: See `coerce_write_concern`
            - `max_commit_time_ms`: How long a commit may run, in milliseconds

    Returns:
        Whatever `body` returns
    """
    read_concern = coerce_read_concern(opts.get("read_concern"))
    read_preference = coerce_read_preference(opts.get("read_preference"))
    write_concern = coerce_write_concern(opts)
    logger.debug("Running transaction body %r", body)
    return session.with_transaction(
        lambda _: body(),
        read_concern=read_concern,
        write_concern=write_concern,
        read_preference=read_preference,
        max_commit_time_ms=opts.get("max_commit_time_ms"),
    )

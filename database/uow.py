import contextlib
import logging

from sqlalchemy.orm import sessionmaker

from database.store import Store

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def store_uow(session_factory: sessionmaker):
    """Per-unit-of-work transaction scope.

    Yields a Store bound to a fresh Session from session_factory (see
    AppContext.session_factory). Commits on success, rolls back on
    exception, always closes. One conversational turn runs in exactly
    one unit of work.

    Usage:
        with store_uow(context.session_factory) as store:
            user = store.get_user_by_phone(phone_number)
            # perform operations...
        # commit happens automatically on successful exit
    """
    session = session_factory()
    try:
        store = Store(session)
        yield store
        session.commit()
    except Exception:
        logger.debug("Rolling back unit of work")
        session.rollback()
        raise
    finally:
        session.close()

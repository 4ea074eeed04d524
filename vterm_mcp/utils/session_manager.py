import logging
from threading import Lock

from vterm_mcp.models.session import TerminalLine, TerminalSession
from vterm_mcp.utils.constants import WELCOME_LINES
from vterm_mcp.vfs import create_initial_file_system

logger = logging.getLogger(__name__)


def new_session(session_id: str = "default") -> TerminalSession:
    """A session with a pristine filesystem and the welcome banner on screen."""
    return TerminalSession(
        session_id=session_id,
        fs=create_initial_file_system(),
        transcript=[TerminalLine(kind="output", content=line) for line in WELCOME_LINES],
    )


class SessionManager:
    """Manages terminal sessions for all clients."""

    def __init__(self) -> None:
        # Simple dict as an in-process session storage.
        # Sessions live only as long as the server process.
        self._storage: dict[str, TerminalSession] = {}
        self._lock = Lock()

    def get_session(self, session_id: str = "default") -> TerminalSession:
        """Returns or creates the session with the given id."""
        session = self._storage.get(session_id)
        if session is None:
            with self._lock:
                session = self._storage.get(session_id)
                if session is None:
                    logger.info("Creating terminal session '%s'", session_id)
                    session = new_session(session_id)
                    self._storage[session_id] = session
        return session

    def reset_session(self, session_id: str = "default") -> TerminalSession:
        """Replaces the session with a pristine one, as when an exercise restarts."""
        with self._lock:
            logger.info("Resetting terminal session '%s'", session_id)
            session = new_session(session_id)
            self._storage[session_id] = session
        return session

    def drop_session(self, session_id: str) -> bool:
        with self._lock:
            return self._storage.pop(session_id, None) is not None

    def session_ids(self) -> list[str]:
        return sorted(self._storage)

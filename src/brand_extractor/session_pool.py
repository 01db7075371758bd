import threading
from typing import List, Optional

import requests


class ThreadLocalSession:
    """Hands each thread its own ``requests.Session``.

    Sessions are not documented as thread-safe, so pool workers never share
    one. A session passed in explicitly is used by every thread.
    """

    def __init__(self, session: Optional[requests.Session] = None):
        self._shared = session
        self._local = threading.local()
        self._lock = threading.Lock()
        self._created: List[requests.Session] = []

    def get(self) -> requests.Session:
        if self._shared is not None:
            return self._shared
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            self._local.session = session
            with self._lock:
                self._created.append(session)
        return session

    def close(self):
        with self._lock:
            sessions, self._created = self._created, []
        for session in sessions:
            session.close()
        if self._shared is not None:
            self._shared.close()

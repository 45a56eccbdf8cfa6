"""
Session persistence for the submitted profile and its generated plan.

A session holds two string slots, written together after a successful
generation and cleared together on a "new plan" reset.
"""
import json
import os
import threading
from abc import ABC, abstractmethod

from app.core.config import settings
from app.core.logger import logger, log_error


PLAN_SLOT = "fitnessPlan"
PROFILE_SLOT = "userProfile"
SLOTS = (PLAN_SLOT, PROFILE_SLOT)


class SessionStore(ABC):
    """get/set/clear over the named slots of one session."""

    def __init__(self, session_id: str):
        self.session_id = session_id

    @abstractmethod
    def get(self, slot: str) -> str | None:
        ...

    @abstractmethod
    def set(self, slot: str, value: str) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    # --- Convenience over the two slots ---

    def save(self, plan: dict, profile: dict) -> None:
        self.set(PLAN_SLOT, json.dumps(plan))
        self.set(PROFILE_SLOT, json.dumps(profile))

    def load(self) -> tuple[dict, dict] | None:
        """Stored (plan, profile), or None unless both slots are present."""
        raw_plan = self.get(PLAN_SLOT)
        raw_profile = self.get(PROFILE_SLOT)
        if not raw_plan or not raw_profile:
            return None
        try:
            return json.loads(raw_plan), json.loads(raw_profile)
        except json.JSONDecodeError as e:
            log_error(f"Session restore ({self.session_id})", e)
            return None


def _check_slot(slot: str) -> None:
    if slot not in SLOTS:
        raise KeyError(f"Unknown session slot: {slot}")


class InMemorySessionStore(SessionStore):
    """Process-local store. Lost on restart."""

    _data: dict[str, dict[str, str]] = {}

    def get(self, slot: str) -> str | None:
        _check_slot(slot)
        return self._data.get(self.session_id, {}).get(slot)

    def set(self, slot: str, value: str) -> None:
        _check_slot(slot)
        self._data.setdefault(self.session_id, {})[slot] = value

    def clear(self) -> None:
        self._data.pop(self.session_id, None)

    @classmethod
    def reset_all(cls) -> None:
        cls._data.clear()


class JsonFileSessionStore(SessionStore):
    """All sessions in one JSON file: {session_id: {slot: value}}."""

    _lock = threading.Lock()

    def __init__(self, session_id: str, filepath: str | None = None):
        super().__init__(session_id)
        self.filepath = filepath or settings.SESSION_FILE

    def _load(self) -> dict:
        if not os.path.exists(self.filepath):
            return {}
        with open(self.filepath, "r", encoding="utf-8") as f:
            try:
                return json.load(f)
            except json.JSONDecodeError as e:
                log_error(f"Session file {self.filepath}", e)
                return {}

    def _write(self, data: dict) -> None:
        directory = os.path.dirname(self.filepath)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.filepath}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, self.filepath)

    def get(self, slot: str) -> str | None:
        _check_slot(slot)
        with self._lock:
            return self._load().get(self.session_id, {}).get(slot)

    def set(self, slot: str, value: str) -> None:
        _check_slot(slot)
        with self._lock:
            data = self._load()
            data.setdefault(self.session_id, {})[slot] = value
            self._write(data)

    def clear(self) -> None:
        with self._lock:
            data = self._load()
            if data.pop(self.session_id, None) is not None:
                self._write(data)
        logger.info(f"Session cleared: {self.session_id}")


def open_session_store(session_id: str) -> SessionStore:
    """Store for a session, using the configured backend."""
    if settings.SESSION_BACKEND == "memory":
        return InMemorySessionStore(session_id)
    return JsonFileSessionStore(session_id)

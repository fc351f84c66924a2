"""JSON-file store for weight profiles, targets and the user profile.

Each collection keeps at most one active record. Activation runs as one
locked read-modify-write that ends in a single atomic file replace, so no
reader ever sees zero or two active records.
"""

from __future__ import annotations

from collections.abc import Callable
import json
import logging
from pathlib import Path
import threading
from typing import TypeVar

from pydantic import BaseModel, Field

from perfmirror.defaults import create_default_target, create_default_weight_profiles
from perfmirror.models import PerformanceTarget, RoleWeightProfile, UserProfile
from perfmirror.settings import get_store_path


logger = logging.getLogger(__name__)

_Record = TypeVar("_Record", RoleWeightProfile, PerformanceTarget, UserProfile)


class StoreData(BaseModel):
    """Everything persisted in the store file."""

    version: str = "1.0"
    weight_profiles: list[RoleWeightProfile] = Field(default_factory=list)
    targets: list[PerformanceTarget] = Field(default_factory=list)
    user_profiles: list[UserProfile] = Field(default_factory=list)

    def validate_store(self) -> None:
        """Check id uniqueness and the single-active rule per collection."""
        for name in ("weight_profiles", "targets", "user_profiles"):
            items = getattr(self, name)
            ids = [r.id for r in items]
            if len(ids) != len(set(ids)):
                raise ValueError(f"Duplicate ids found in {name}")
            if sum(1 for r in items if r.is_active) > 1:
                raise ValueError(f"More than one active record in {name}")


def create_default_store() -> StoreData:
    return StoreData(
        weight_profiles=create_default_weight_profiles(),
        targets=[create_default_target()],
    )


class EvaluationStore:
    """Thread-safe repository for the single-active configuration records."""

    def __init__(self, config_path: str | None = None) -> None:
        self.config_path = Path(config_path or get_store_path())
        self.backup_path = Path(f"{self.config_path}.backup")
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Load / save
    # ------------------------------------------------------------------
    def load(self) -> StoreData:
        """Load the store, writing the defaults first when no file exists."""
        with self._lock:
            return self._load_without_lock()

    def save(self, data: StoreData) -> None:
        with self._lock:
            self._save_without_lock(data)

    # ------------------------------------------------------------------
    # Weight profiles
    # ------------------------------------------------------------------
    def add_weight_profile(self, profile: RoleWeightProfile) -> StoreData:
        """Add *profile*; if it is active every other profile is deactivated."""
        return self._mutate(lambda data: data.model_copy(update={
            "weight_profiles": _append(data.weight_profiles, profile),
        }))

    def set_active_weight_profile(self, profile_id: str) -> RoleWeightProfile:
        data = self._mutate(lambda data: data.model_copy(update={
            "weight_profiles": _activate(data.weight_profiles, profile_id),
        }))
        logger.info("Activated weight profile %s", profile_id)
        return _active(data.weight_profiles)  # type: ignore[return-value]

    def active_weight_profile(self) -> RoleWeightProfile | None:
        return _active(self.load().weight_profiles)

    # ------------------------------------------------------------------
    # Targets
    # ------------------------------------------------------------------
    def add_target(self, target: PerformanceTarget) -> StoreData:
        return self._mutate(lambda data: data.model_copy(update={
            "targets": _append(data.targets, target),
        }))

    def set_active_target(self, target_id: str) -> PerformanceTarget:
        data = self._mutate(lambda data: data.model_copy(update={
            "targets": _activate(data.targets, target_id),
        }))
        logger.info("Activated target %s", target_id)
        return _active(data.targets)  # type: ignore[return-value]

    def active_target(self) -> PerformanceTarget | None:
        return _active(self.load().targets)

    # ------------------------------------------------------------------
    # User profile
    # ------------------------------------------------------------------
    def set_user_profile(self, role: str, level: int) -> UserProfile:
        """Replace the active user profile with (*role*, *level*)."""
        profile = UserProfile(role=role, level=level)
        self._mutate(lambda data: data.model_copy(update={"user_profiles": [profile]}))
        logger.info("User profile set to %s L%d", role, level)
        return profile

    def active_user_profile(self) -> UserProfile | None:
        return _active(self.load().user_profiles)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _mutate(self, change: Callable[[StoreData], StoreData]) -> StoreData:
        """Apply *change* to the current data and persist it under one lock."""
        with self._lock:
            updated = change(self._load_without_lock())
            self._save_without_lock(updated)
            return updated

    def _load_without_lock(self) -> StoreData:
        if not self.config_path.exists():
            data = create_default_store()
            self._write(data)
            return data
        try:
            with open(self.config_path) as f:
                raw = json.load(f)
            data = StoreData(**raw)
            data.validate_store()
            return data
        except Exception as e:
            raise ValueError(f"Failed to load store: {e}") from e

    def _save_without_lock(self, data: StoreData) -> None:
        data.validate_store()
        self._create_backup()
        self._write(data)

    def _write(self, data: StoreData) -> None:
        temp_path = self.config_path.with_suffix(".tmp")
        try:
            with open(temp_path, "w") as f:
                json.dump(data.model_dump(), f, indent=2, ensure_ascii=False)
            temp_path.replace(self.config_path)
        except Exception as e:
            if temp_path.exists():
                temp_path.unlink()
            raise ValueError(f"Failed to save store: {e}") from e

    def _create_backup(self) -> None:
        if self.config_path.exists():
            try:
                self.backup_path.write_text(self.config_path.read_text())
            except OSError:
                logger.warning("Failed to create backup", exc_info=True)


# ---------------------------------------------------------------------------
# Collection helpers
# ---------------------------------------------------------------------------
def _active(items: list[_Record]) -> _Record | None:
    return next((r for r in items if r.is_active), None)


def _activate(items: list[_Record], record_id: str) -> list[_Record]:
    if not any(r.id == record_id for r in items):
        raise ValueError(f"Record with id '{record_id}' not found")
    return [r.model_copy(update={"is_active": r.id == record_id}) for r in items]


def _append(items: list[_Record], record: _Record) -> list[_Record]:
    if any(r.id == record.id for r in items):
        raise ValueError(f"Record with id '{record.id}' already exists")
    if record.is_active:
        items = [r.model_copy(update={"is_active": False}) for r in items]
    return [*items, record]

# services/info-producer-service/app/core/registry.py
from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterable, Iterator, List, Optional

from app.core.errors import MissingJobIdentity, MissingTargetUri, TypeNotSupported
from app.models import InfoType, JobInfo

logger = logging.getLogger("app.registry")


class _ReadWriteLock:
    """
    Many readers or one writer. Writers are preferred once waiting so a
    catalog swap is not starved by a stream of lookups.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class JobRegistry:
    """
    Known types and the jobs registered against them.

    The raw collections never leave this object; every accessor returns a copy.
    """

    def __init__(self) -> None:
        self._lock = _ReadWriteLock()
        self._types: Dict[str, InfoType] = {}
        self._jobs: Dict[str, Dict[str, JobInfo]] = {}

    # ─────────────────────────────────────────────────────────────
    # Catalog
    # ─────────────────────────────────────────────────────────────
    def apply_catalog(self, types: Iterable[InfoType]) -> None:
        """
        Atomically replace the known types. Jobs of types that are still
        present survive; jobs of types that disappeared are purged.
        """
        new_types: Dict[str, InfoType] = {}
        for t in types:
            new_types[t.type_id] = t

        with self._lock.write():
            removed = [tid for tid in self._jobs if tid not in new_types]
            self._jobs = {tid: self._jobs.get(tid, {}) for tid in new_types}
            self._types = new_types

        if removed:
            logger.info("Catalog applied; purged jobs for removed types %s", removed)
        logger.debug("Catalog applied; supported types=%s", list(new_types))

    def supported_type_ids(self) -> List[str]:
        with self._lock.read():
            return list(self._types)

    def get_type(self, type_id: str) -> Optional[InfoType]:
        with self._lock.read():
            return self._types.get(type_id)

    def is_supported(self, type_id: str) -> bool:
        with self._lock.read():
            return type_id in self._types

    # ─────────────────────────────────────────────────────────────
    # Jobs
    # ─────────────────────────────────────────────────────────────
    def add_job(self, job: JobInfo) -> None:
        """
        Validate and store a job. Checks, first failure wins:
        supported type, then job identity, then target URI.
        An existing job with the same id under the same type is replaced.
        """
        with self._lock.write():
            jobs = self._jobs.get(job.info_type_identity)
            if jobs is None:
                raise TypeNotSupported(job.info_type_identity, job=job)
            if not job.info_job_identity:
                raise MissingJobIdentity(job)
            if not job.target_uri:
                raise MissingTargetUri(job)
            jobs[job.info_job_identity] = job.model_copy(deep=True)

        logger.debug("Added job %s for type %s", job.info_job_identity, job.info_type_identity)

    def get_job(self, type_id: str, job_id: str) -> Optional[JobInfo]:
        with self._lock.read():
            job = self._jobs.get(type_id, {}).get(job_id)
            return job.model_copy(deep=True) if job else None

    def jobs_for_type(self, type_id: str) -> Dict[str, JobInfo]:
        with self._lock.read():
            jobs = self._jobs.get(type_id)
            if jobs is None:
                raise TypeNotSupported(type_id)
            return {jid: j.model_copy(deep=True) for jid, j in jobs.items()}

    def remove_job(self, job_id: str, type_id: Optional[str] = None) -> bool:
        """Remove a job from `type_id`, or from whichever type holds it when not given."""
        with self._lock.write():
            candidates = [type_id] if type_id is not None else list(self._jobs)
            for tid in candidates:
                jobs = self._jobs.get(tid)
                if jobs is not None and jobs.pop(job_id, None) is not None:
                    logger.debug("Removed job %s from type %s", job_id, tid)
                    return True
        return False

    def job_count(self) -> int:
        with self._lock.read():
            return sum(len(j) for j in self._jobs.values())

    def clear_all(self) -> None:
        """Empty every type's job collection; known types are kept."""
        with self._lock.write():
            for jobs in self._jobs.values():
                jobs.clear()


_registry = JobRegistry()


def get_registry() -> JobRegistry:
    return _registry

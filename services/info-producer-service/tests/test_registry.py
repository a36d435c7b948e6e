"""Tests for job admission and the registry's catalog handling."""

import threading

import pytest

from app.core.errors import MissingJobIdentity, MissingTargetUri, TypeNotSupported
from app.core.registry import JobRegistry, get_registry
from app.models import InfoType, JobInfo


def _job(**overrides) -> JobInfo:
    fields = {
        "owner": "owner",
        "last_updated": "now",
        "info_job_identity": "job1",
        "target_uri": "target",
        "info_job_data": "{}",
        "info_type_identity": "type1",
    }
    fields.update(overrides)
    return JobInfo(**fields)


class TestAddJob:
    def test_supported_type_is_stored(self, registry_with_type1):
        job = _job()

        registry_with_type1.add_job(job)

        assert registry_with_type1.job_count() == 1
        assert registry_with_type1.get_job("type1", "job1") == job

    def test_unknown_type_is_rejected(self, registry):
        with pytest.raises(TypeNotSupported) as exc:
            registry.add_job(JobInfo(info_type_identity="type1"))

        assert str(exc.value) == "type not supported: type1"
        assert exc.value.type_id == "type1"
        assert registry.job_count() == 0

    def test_unknown_type_checked_before_required_fields(self, registry_with_type1):
        with pytest.raises(TypeNotSupported):
            registry_with_type1.add_job(_job(info_type_identity="other", info_job_identity=""))

    def test_missing_job_identity(self, registry_with_type1):
        partial = JobInfo(info_type_identity="type1")

        with pytest.raises(MissingJobIdentity) as exc:
            registry_with_type1.add_job(partial)

        message = str(exc.value)
        assert message.startswith("missing required job identity: ")
        assert "'info_type_identity': 'type1'" in message
        assert exc.value.job == partial
        assert registry_with_type1.job_count() == 0

    def test_missing_target_uri(self, registry_with_type1):
        with pytest.raises(MissingTargetUri) as exc:
            registry_with_type1.add_job(JobInfo(info_type_identity="type1", info_job_identity="job1"))

        message = str(exc.value)
        assert message.startswith("missing required target URI: ")
        assert "'info_job_identity': 'job1'" in message
        assert registry_with_type1.job_count() == 0

    def test_same_id_overwrites(self, registry_with_type1):
        registry_with_type1.add_job(_job(target_uri="first"))
        registry_with_type1.add_job(_job(target_uri="second", info_job_data={"k": 1}))

        jobs = registry_with_type1.jobs_for_type("type1")
        assert list(jobs) == ["job1"]
        assert jobs["job1"].target_uri == "second"
        assert jobs["job1"].info_job_data == {"k": 1}

    def test_stored_record_is_isolated_from_caller(self, registry_with_type1):
        job = _job(info_job_data={"k": 1})
        registry_with_type1.add_job(job)

        job.info_job_data["k"] = 2
        fetched = registry_with_type1.get_job("type1", "job1")
        fetched.target_uri = "changed"

        stored = registry_with_type1.get_job("type1", "job1")
        assert stored.info_job_data == {"k": 1}
        assert stored.target_uri == "target"


class TestRemoveAndClear:
    def test_remove_by_id_across_types(self, registry):
        registry.apply_catalog([InfoType("type1", b"{}"), InfoType("type2", b"{}")])
        registry.add_job(_job(info_type_identity="type2", info_job_identity="job2"))

        assert registry.remove_job("job2") is True
        assert registry.get_job("type2", "job2") is None
        assert registry.remove_job("job2") is False

    def test_remove_scoped_to_type(self, registry):
        registry.apply_catalog([InfoType("type1", b"{}"), InfoType("type2", b"{}")])
        registry.add_job(_job())

        assert registry.remove_job("job1", type_id="type2") is False
        assert registry.remove_job("job1", type_id="type1") is True

    def test_clear_all_keeps_types(self, registry_with_type1):
        registry_with_type1.add_job(_job())

        registry_with_type1.clear_all()

        assert registry_with_type1.job_count() == 0
        assert registry_with_type1.supported_type_ids() == ["type1"]

    def test_jobs_for_unknown_type(self, registry):
        with pytest.raises(TypeNotSupported):
            registry.jobs_for_type("nope")


class TestCatalog:
    def test_supported_type_ids_match_applied_catalog(self, registry):
        registry.apply_catalog([InfoType("b", b"{}"), InfoType("a", b"{}"), InfoType("c", b"{}")])

        assert sorted(registry.supported_type_ids()) == ["a", "b", "c"]
        assert registry.is_supported("a")
        assert not registry.is_supported("d")
        assert registry.get_type("b") == InfoType("b", b"{}")

    def test_duplicate_ids_last_wins(self, registry):
        registry.apply_catalog([InfoType("a", b"first"), InfoType("a", b"second")])

        assert registry.supported_type_ids() == ["a"]
        assert registry.get_type("a").schema == b"second"

    def test_module_registry_is_shared(self):
        assert get_registry() is get_registry()


class TestConcurrency:
    def test_parallel_admissions_are_all_stored(self, registry_with_type1):
        def worker(n: int) -> None:
            for i in range(50):
                registry_with_type1.add_job(_job(info_job_identity=f"job-{n}-{i}"))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert registry_with_type1.job_count() == 8 * 50

    def test_admission_waits_for_catalog_swap(self, registry_with_type1):
        admitted = threading.Event()
        outcome = []

        def admit() -> None:
            try:
                registry_with_type1.add_job(_job())
                outcome.append("added")
            except TypeNotSupported:
                outcome.append("rejected")
            admitted.set()

        # hold the writer side as apply_catalog does while it swaps
        with registry_with_type1._lock.write():
            worker = threading.Thread(target=admit)
            worker.start()
            assert not admitted.wait(0.3)
            registry_with_type1._jobs = {"type2": {}}
            registry_with_type1._types = {"type2": InfoType("type2", b"{}")}

        worker.join(timeout=5)
        assert outcome == ["rejected"]
        assert registry_with_type1.job_count() == 0

    def test_catalog_swap_waits_for_readers(self, registry_with_type1):
        swapped = threading.Event()

        def swap() -> None:
            registry_with_type1.apply_catalog([InfoType("type2", b"{}")])
            swapped.set()

        with registry_with_type1._lock.read():
            worker = threading.Thread(target=swap)
            worker.start()
            assert not swapped.wait(0.3)
            assert registry_with_type1._types.keys() == {"type1"}

        worker.join(timeout=5)
        assert swapped.is_set()
        assert registry_with_type1.supported_type_ids() == ["type2"]

    def test_waiting_writer_blocks_new_readers(self, registry_with_type1):
        read_done = threading.Event()
        swapped = threading.Event()

        def swap() -> None:
            registry_with_type1.apply_catalog([InfoType("type2", b"{}")])
            swapped.set()

        def read() -> None:
            registry_with_type1.supported_type_ids()
            read_done.set()

        with registry_with_type1._lock.read():
            writer = threading.Thread(target=swap)
            writer.start()
            # wait until the writer is queued
            for _ in range(100):
                if registry_with_type1._lock._writers_waiting:
                    break
                swapped.wait(0.01)
            reader = threading.Thread(target=read)
            reader.start()
            assert not read_done.wait(0.3)

        writer.join(timeout=5)
        reader.join(timeout=5)
        assert swapped.is_set() and read_done.is_set()

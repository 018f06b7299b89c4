from dataclasses import replace

import pytest

from pid_digitizer.extraction.models import Component, ComponentStatus, Coordinates
from pid_digitizer.session.history import HistoryStore
from pid_digitizer.session.models import UploadRecord


def _component(
    component_id: str,
    status: ComponentStatus = ComponentStatus.OPERATIONAL,
) -> Component:
    return Component(
        id=component_id,
        type="Gate Valve",
        label="",
        description="",
        coordinates=Coordinates(x=10.0, y=20.0),
        initial_status=status,
        current_status=status,
        uae_standard_note="No specific note.",
    )


def _record(
    record_id: str,
    file_name: str = "diagram.pdf",
    version: int = 1,
    component_ids: tuple[str, ...] = ("HV-101", "PT-7"),
) -> UploadRecord:
    return UploadRecord(
        id=record_id,
        file_name=file_name,
        version=version,
        timestamp="2025-01-10T08:00:00+00:00",
        components=[_component(cid) for cid in component_ids],
        image_preview="data:image/png;base64,AAAA",
        summary=f"Analyzed {len(component_ids)} components according to UAE standards.",
    )


class TestAppendAndSelect:
    def test_newest_first(self) -> None:
        history = HistoryStore()
        history.append(_record("r1"))
        history.append(_record("r2"))
        history.append(_record("r3"))
        assert [r.id for r in history.records()] == ["r3", "r2", "r1"]

    def test_no_dedup(self) -> None:
        history = HistoryStore()
        record = _record("r1")
        history.append(record)
        history.append(record)
        assert len(history) == 2

    def test_select_by_id(self) -> None:
        history = HistoryStore()
        history.append(_record("r1"))
        history.append(_record("r2"))
        selected = history.select("r1")
        assert selected is not None
        assert selected.id == "r1"

    def test_select_missing_returns_none(self) -> None:
        assert HistoryStore().select("nope") is None

    def test_find_by_file_name_and_version(self) -> None:
        history = HistoryStore()
        history.append(_record("r1", version=1))
        history.append(_record("r2", version=2))
        history.append(_record("r3", file_name="other.png", version=1))
        found = history.find("diagram.pdf", 2)
        assert found is not None
        assert found.id == "r2"
        assert history.find("diagram.pdf", 3) is None

    def test_clear(self) -> None:
        history = HistoryStore()
        history.append(_record("r1"))
        history.clear()
        assert history.records() == []


class TestVersioning:
    def test_next_version_counts_same_name_only(self) -> None:
        history = HistoryStore()
        assert history.next_version("diagram.pdf") == 1
        history.append(_record("r1", version=1))
        history.append(_record("r2", file_name="other.png"))
        history.append(_record("r3", version=2))
        assert history.count_by_file_name("diagram.pdf") == 2
        assert history.next_version("diagram.pdf") == 3
        assert history.next_version("other.png") == 2


class TestUpdateComponentStatus:
    def test_updates_only_current_status(self) -> None:
        history = HistoryStore()
        record = _record("r1")
        history.append(record)
        before = replace(record.components[0])

        assert history.update_component_status("r1", "HV-101", ComponentStatus.CRITICAL_REPAIR)

        after = record.components[0]
        assert after.current_status is ComponentStatus.CRITICAL_REPAIR
        assert after.initial_status is before.initial_status
        assert replace(after, current_status=before.current_status) == before

    def test_record_identity_and_fields_survive(self) -> None:
        history = HistoryStore()
        record = _record("r1")
        history.append(record)
        history.update_component_status("r1", "HV-101", "MAINTENANCE_REQUIRED")
        selected = history.select("r1")
        assert selected is record
        assert selected.file_name == "diagram.pdf"
        assert selected.version == 1
        assert selected.image_preview == "data:image/png;base64,AAAA"

    def test_other_components_untouched(self) -> None:
        history = HistoryStore()
        record = _record("r1")
        history.append(record)
        history.update_component_status("r1", "HV-101", ComponentStatus.CRITICAL_REPAIR)
        assert record.components[1].current_status is ComponentStatus.OPERATIONAL

    def test_other_records_untouched(self) -> None:
        history = HistoryStore()
        first = _record("r1")
        second = _record("r2", version=2)
        history.append(first)
        history.append(second)
        history.update_component_status("r2", "HV-101", ComponentStatus.CRITICAL_REPAIR)
        assert first.components[0].current_status is ComponentStatus.OPERATIONAL

    def test_updates_every_component_sharing_the_tag(self) -> None:
        history = HistoryStore()
        record = _record("r1", component_ids=("HV-101", "HV-101", "PT-7"))
        history.append(record)
        history.update_component_status("r1", "HV-101", ComponentStatus.MAINTENANCE_REQUIRED)
        assert [c.current_status for c in record.components] == [
            ComponentStatus.MAINTENANCE_REQUIRED,
            ComponentStatus.MAINTENANCE_REQUIRED,
            ComponentStatus.OPERATIONAL,
        ]

    def test_missing_record_is_noop(self) -> None:
        history = HistoryStore()
        record = _record("r1")
        history.append(record)
        assert not history.update_component_status("gone", "HV-101", ComponentStatus.UNKNOWN)
        assert record.components[0].current_status is ComponentStatus.OPERATIONAL

    def test_missing_component_is_noop(self) -> None:
        history = HistoryStore()
        record = _record("r1")
        history.append(record)
        assert not history.update_component_status("r1", "XV-999", ComponentStatus.UNKNOWN)
        assert all(c.current_status is ComponentStatus.OPERATIONAL for c in record.components)

    def test_rejects_unknown_status(self) -> None:
        history = HistoryStore()
        history.append(_record("r1"))
        with pytest.raises(ValueError):
            history.update_component_status("r1", "HV-101", "BROKEN")

import pytest

from tasklog.repository import EntryRepository, TaskRepository


@pytest.fixture()
def ctx(app):
    with app.app_context():
        yield


@pytest.mark.usefixtures("ctx")
class TestTaskRepository:

    def test_create_list_delete(self):
        repo = TaskRepository()
        first = repo.create("Garden")
        repo.create("Garden")
        assert [t["name"] for t in repo.list()] == ["Garden", "Garden"]

        repo.delete(str(first))
        assert first not in [t["id"] for t in repo.list()]
        assert len(repo.list()) == 1

    def test_empty_name_is_stored(self):
        repo = TaskRepository()
        repo.create("")
        assert repo.list()[0]["name"] == ""

    def test_delete_missing(self):
        TaskRepository().delete("404")


@pytest.mark.usefixtures("ctx")
class TestEntryRepository:

    def test_entries_for_task(self):
        task_id = TaskRepository().create("Chores")
        entries = EntryRepository()
        entries.create(str(task_id), "dishes")
        entries.create(str(task_id), "laundry")

        rows = entries.for_task(str(task_id))
        assert [r["description"] for r in rows] == ["dishes", "laundry"]
        assert all(r["task_id"] == task_id for r in rows)
        assert all(r["created_at"] for r in rows)

    def test_task_name(self):
        task_id = TaskRepository().create("Chores")
        assert EntryRepository().task_name(str(task_id)) == "Chores"
        assert EntryRepository().task_name("999") is None

    def test_no_entries(self):
        task_id = TaskRepository().create("Chores")
        assert EntryRepository().for_task(str(task_id)) == []

    def test_delete(self):
        task_id = TaskRepository().create("Chores")
        entries = EntryRepository()
        entry_id = entries.create(str(task_id), "dishes")
        entries.delete(str(entry_id))
        entries.delete(str(entry_id))
        assert entries.for_task(str(task_id)) == []


@pytest.mark.usefixtures("ctx")
class TestHugeIds:
    HUGE = "99999999999999999999999"

    def test_task_delete_is_noop(self):
        repo = TaskRepository()
        repo.create("Chores")
        repo.delete(self.HUGE)
        assert len(repo.list()) == 1

    def test_entry_reads_and_delete(self):
        entries = EntryRepository()
        assert entries.task_name(self.HUGE) is None
        assert entries.for_task(self.HUGE) == []
        entries.delete(self.HUGE)

    def test_largest_sqlite_id_still_queried(self):
        assert EntryRepository().task_name(str(2 ** 63 - 1)) is None

import pytest

from student_records.schemas.notification_schemas import NotificationVariant
from student_records.schemas.student_schemas import StudentPayload
from student_records.services.list_controller import StudentListController
from student_records.services.stores.memory import InMemoryStudentStore
from student_records.utils.errors import ConnectivityError, NotFoundError

pytestmark = pytest.mark.unit


class UnreachableStore(InMemoryStudentStore):
    """Memory store that can be switched offline."""

    backend = "unreachable"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.online = True

    async def list(self):
        if not self.online:
            raise ConnectivityError()
        return await super().list()

    async def delete(self, student_id):
        if not self.online:
            raise ConnectivityError()
        return await super().delete(student_id)


@pytest.fixture
def seeded_store(make_numbered_data):
    def _seed(count):
        return UnreachableStore(
            initial=[
                StudentPayload.model_validate(make_numbered_data(n))
                for n in range(1, count + 1)
            ]
        )

    return _seed


class TestBrowsing:
    """Refreshing, searching and paging."""

    @pytest.mark.asyncio
    async def test_refresh_shows_first_page(self, seeded_store):
        controller = StudentListController(seeded_store(15))

        view = await controller.refresh()

        assert len(view.items) == 10
        assert view.total == 15
        assert controller.page == 1
        assert controller.is_loading is False

    @pytest.mark.asyncio
    async def test_go_to_page_clamps(self, seeded_store):
        controller = StudentListController(seeded_store(15))
        await controller.refresh()

        view = controller.go_to_page(7)

        assert view.page == 2
        assert controller.page == 2
        assert len(view.items) == 5

    @pytest.mark.asyncio
    async def test_search_resets_to_first_page(self, seeded_store):
        controller = StudentListController(seeded_store(25))
        await controller.refresh()
        controller.go_to_page(3)

        view = controller.search("tester")

        assert controller.page == 1
        assert view.page == 1
        assert view.total == 25

    @pytest.mark.asyncio
    async def test_empty_messages(self, seeded_store):
        controller = StudentListController(seeded_store(0))
        await controller.refresh()

        assert controller.view.is_empty
        assert controller.empty_message == "No students added yet"

        controller.search("nobody")
        assert controller.empty_message == "No students found matching your search"

    @pytest.mark.asyncio
    async def test_fetch_failure_sets_error_notification(self, seeded_store):
        store = seeded_store(3)
        store.online = False
        controller = StudentListController(store)

        view = await controller.refresh()

        assert isinstance(controller.error, ConnectivityError)
        assert controller.notification.title == "Error"
        assert controller.notification.description == "Could not fetch student records"
        assert view.is_empty
        assert controller.is_loading is False


class TestDeleting:
    """Two-step delete with confirmation."""

    @pytest.mark.asyncio
    async def test_request_delete_names_the_student(self, seeded_store):
        controller = StudentListController(seeded_store(2))
        await controller.refresh()

        prompt = controller.request_delete(1)

        assert prompt == (
            "Are you sure you want to delete Student01 Tester01? "
            "This action cannot be undone."
        )
        assert controller.pending_delete.id == 1

    @pytest.mark.asyncio
    async def test_cancel_keeps_the_record(self, seeded_store):
        store = seeded_store(2)
        controller = StudentListController(store)
        await controller.refresh()

        controller.request_delete(1)
        controller.cancel_delete()

        assert controller.pending_delete is None
        assert len(await store.list()) == 2

    @pytest.mark.asyncio
    async def test_confirm_deletes_and_notifies(self, seeded_store):
        store = seeded_store(2)
        controller = StudentListController(store)
        await controller.refresh()

        controller.request_delete(2)
        deleted = await controller.confirm_delete()

        assert deleted is True
        assert [s.id for s in await store.list()] == [1]
        assert [s.id for s in controller.view.items] == [1]
        assert controller.pending_delete_id is None
        assert controller.notification.title == "Deleted!"
        assert controller.notification.variant == NotificationVariant.DESTRUCTIVE

    @pytest.mark.asyncio
    async def test_deleting_last_row_of_page_steps_back(self, seeded_store):
        controller = StudentListController(seeded_store(11))
        await controller.refresh()
        controller.go_to_page(2)

        controller.request_delete(11)
        await controller.confirm_delete()

        assert controller.page == 1
        assert len(controller.view.items) == 10
        assert controller.view.total_pages == 1

    @pytest.mark.asyncio
    async def test_page_with_rows_left_is_kept(self, seeded_store):
        controller = StudentListController(seeded_store(12))
        await controller.refresh()
        controller.go_to_page(2)

        controller.request_delete(1)
        await controller.confirm_delete()

        assert controller.page == 2
        assert [s.id for s in controller.view.items] == [12]

    @pytest.mark.asyncio
    async def test_confirm_without_request_rejected(self, seeded_store):
        controller = StudentListController(seeded_store(1))

        with pytest.raises(ValueError):
            await controller.confirm_delete()

    @pytest.mark.asyncio
    async def test_failed_delete_reports_and_keeps_list(self, seeded_store):
        store = seeded_store(2)
        controller = StudentListController(store)
        await controller.refresh()
        store.online = False

        controller.request_delete(1)
        deleted = await controller.confirm_delete()

        assert deleted is False
        assert isinstance(controller.error, ConnectivityError)
        assert controller.notification.description == "Could not delete student"
        assert len(controller.view.items) == 2

    @pytest.mark.asyncio
    async def test_missing_record_reports_not_found(self, seeded_store):
        controller = StudentListController(seeded_store(1))
        await controller.refresh()

        controller.request_delete(99)
        deleted = await controller.confirm_delete()

        assert deleted is False
        assert isinstance(controller.error, NotFoundError)

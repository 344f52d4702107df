from src.attendance_bot.attendance_bot.core.exceptions import InternalError
from src.attendance_bot.attendance_bot.messaging.dispatcher import StaticProfileProvider
from src.attendance_bot.attendance_bot.messaging.model import Profile


class BrokenProfiles:
    def get_profile(self, user_id):
        raise InternalError("user.get failed")


def test_sync_upserts_profile_name(employee_service, employees_repo):
    employee = employee_service.sync_on_contact("42", StaticProfileProvider(Profile(full_name=" Анна Смирнова ", email="a@x.ru")))

    assert employee.full_name == "Анна Смирнова"
    assert employees_repo.by_id["42"].email == "a@x.ru"


def test_sync_runs_on_every_contact(employee_service, employees_repo):
    employee_service.sync_on_contact("42")
    employee_service.sync_on_contact("42")

    assert employees_repo.upserts == 2


def test_missing_profile_falls_back_to_default_name(employee_service, employees_repo):
    employee = employee_service.sync_on_contact("42", StaticProfileProvider(None))

    assert employee.full_name == "Сотрудник 42"
    assert employees_repo.by_id["42"].full_name == "Сотрудник 42"


def test_blank_profile_name_falls_back_to_default(employee_service):
    employee = employee_service.sync_on_contact("42", StaticProfileProvider(Profile(full_name="   ")))

    assert employee.full_name == "Сотрудник 42"


def test_profile_lookup_failure_does_not_abort(employee_service, employees_repo):
    employee = employee_service.sync_on_contact("42", BrokenProfiles())

    assert employee.full_name == "Сотрудник 42"
    assert "42" in employees_repo.by_id


def test_store_failure_returns_in_memory_employee(employee_service, employees_repo):
    employees_repo.fail = True

    employee = employee_service.sync_on_contact("42", StaticProfileProvider(Profile(full_name="Анна")))

    assert employee.full_name == "Анна"
    assert employees_repo.by_id == {}

"""Tests for CustomerDetailRepository, focused on phone normalisation."""

import psycopg2
import pytest

from db.errors import IntegrityViolationError
from db.unit_of_work import UnitOfWork
from models.customer_detail import CustomerDetail
from repositories.customer_detail_repo import CustomerDetailRepository, normalize_phone


@pytest.fixture
def repo():
    return CustomerDetailRepository()


class TestNormalizePhone:
    @pytest.mark.parametrize("phone", [None, "", "   ", "\t\n"])
    def test_blank_becomes_none(self, phone):
        assert normalize_phone(phone) is None

    def test_value_is_trimmed(self):
        assert normalize_phone("  600 123 123 ") == "600 123 123"


class TestInsert:
    def test_whitespace_phone_is_sent_as_null(self, repo, fake_pool):
        repo.insert(CustomerDetail(id=1, address="Calle 1", phone="   ", notes="vip"))

        sql, params = fake_pool.executed[0]
        assert sql.startswith("INSERT INTO customer_details (id, address, phone, notes)")
        assert params == (1, "Calle 1", None, "vip")

    def test_transactional_insert_normalises_the_same_way(self, repo, fake_pool):
        with UnitOfWork() as uow:
            repo.insert(CustomerDetail(id=1, address="Calle 1", phone="", notes=None), uow)
            assert uow.connection.commits == 0

        assert fake_pool.executed[0][1] == (1, "Calle 1", None, None)

    def test_phone_is_trimmed(self, repo, fake_pool):
        repo.insert(CustomerDetail(id=2, phone=" 600111222 "))

        assert fake_pool.executed[0][1][2] == "600111222"

    def test_missing_customer_raises_integrity_violation(self, repo, fake_pool):
        fake_pool.respond(psycopg2.IntegrityError("violates foreign key constraint"))

        with pytest.raises(IntegrityViolationError):
            repo.insert(CustomerDetail(id=99, address="Nowhere"))


class TestRead:
    def test_find_by_id_reports_absent_phone_as_none(self, repo, fake_pool):
        fake_pool.respond({"rows": [(1, "Calle 1", None, "vip")]})

        detail = repo.find_by_id(1)

        assert detail == CustomerDetail(id=1, address="Calle 1", phone=None, notes="vip")

    def test_find_by_id_not_found(self, repo, fake_pool):
        assert repo.find_by_id(5) is None

    def test_find_all_is_ordered_by_id(self, repo, fake_pool):
        fake_pool.respond({"rows": [(1, "a", None, None), (2, "b", "1", None)]})

        assert [d.id for d in repo.find_all()] == [1, 2]
        assert fake_pool.executed[0][0].endswith("ORDER BY id;")


class TestUpdateDelete:
    def test_update_missing_id_returns_zero(self, repo, fake_pool):
        fake_pool.respond({"rowcount": 0})

        assert repo.update(CustomerDetail(id=404, address="x")) == 0

    def test_update_normalises_phone_and_puts_id_last(self, repo, fake_pool):
        fake_pool.respond({"rowcount": 1})

        assert repo.update(CustomerDetail(id=1, address="Calle 2", phone=" ", notes="n")) == 1
        assert fake_pool.executed[0][1] == ("Calle 2", None, "n", 1)

    def test_delete_by_id(self, repo, fake_pool):
        fake_pool.respond({"rowcount": 1}, {"rowcount": 0})

        assert repo.delete_by_id(1) == 1
        assert repo.delete_by_id(1) == 0
        assert fake_pool.executed[0] == ("DELETE FROM customer_details WHERE id = %s;", (1,))

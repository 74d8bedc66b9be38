"""Tests for the connection provider, connection_scope and UnitOfWork."""

import psycopg2
from psycopg2 import pool
import pytest

import db.connection
from db.connection import connection_scope, get_connection
from db.errors import IntegrityViolationError, StoreError, StoreUnavailableError, translate
from db.unit_of_work import UnitOfWork


class TestGetConnection:
    def test_uninitialized_pool_raises_store_unavailable(self, monkeypatch):
        monkeypatch.setattr(db.connection, "_pool", None)

        with pytest.raises(StoreUnavailableError):
            get_connection()

    def test_pool_exhaustion_is_translated(self, fake_pool, monkeypatch):
        def exhausted():
            raise pool.PoolError("connection pool exhausted")

        monkeypatch.setattr(fake_pool, "getconn", exhausted)

        with pytest.raises(StoreUnavailableError, match="exhausted"):
            get_connection()


class TestTranslate:
    def test_integrity_error(self):
        err = translate(psycopg2.IntegrityError("duplicate key"))
        assert isinstance(err, IntegrityViolationError)
        assert str(err) == "duplicate key"

    def test_operational_error(self):
        assert isinstance(translate(psycopg2.OperationalError("gone")), StoreUnavailableError)

    def test_other_errors_are_plain_store_errors(self):
        err = translate(psycopg2.ProgrammingError("syntax error"))
        assert type(err) is StoreError


class TestConnectionScope:
    def test_commits_and_releases_on_success(self, fake_pool):
        with connection_scope() as conn:
            pass

        assert conn.commits == 1
        assert conn.rollbacks == 0
        assert fake_pool.released == [conn]

    def test_rolls_back_and_translates_driver_errors(self, fake_pool):
        fake_pool.respond(psycopg2.IntegrityError("duplicate key"))

        with pytest.raises(IntegrityViolationError) as exc_info:
            with connection_scope() as conn, conn.cursor() as cur:
                cur.execute("INSERT INTO customers (id, name, email) VALUES (%s, %s, %s)", (1, "a", "b"))

        assert isinstance(exc_info.value.__cause__, psycopg2.IntegrityError)
        assert conn.commits == 0
        assert conn.rollbacks == 1
        assert fake_pool.released == [conn]

    def test_rolls_back_on_non_driver_errors_without_wrapping(self, fake_pool):
        with pytest.raises(KeyError):
            with connection_scope() as conn:
                raise KeyError("boom")

        assert conn.rollbacks == 1
        assert fake_pool.released == [conn]

    def test_borrowed_connection_is_never_committed_or_released(self, fake_pool):
        with UnitOfWork() as uow:
            with connection_scope(uow) as conn:
                assert conn is uow.connection
            assert conn.commits == 0
            assert fake_pool.released == []

    def test_borrowed_connection_errors_are_translated_but_not_rolled_back(self, fake_pool):
        fake_pool.respond(psycopg2.OperationalError("server closed the connection"))
        uow = UnitOfWork().__enter__()

        with pytest.raises(StoreUnavailableError):
            with connection_scope(uow) as conn, conn.cursor() as cur:
                cur.execute("SELECT 1")

        assert conn.rollbacks == 0
        assert fake_pool.released == []

    def test_unit_of_work_never_entered_is_rejected(self, fake_pool):
        with pytest.raises(RuntimeError, match="not active"):
            with connection_scope(UnitOfWork()):
                pass

        assert fake_pool.connections == []

    def test_unit_of_work_already_exited_is_rejected(self, fake_pool):
        with UnitOfWork() as uow:
            pass

        with pytest.raises(RuntimeError, match="not active"):
            with connection_scope(uow):
                pass


class TestUnitOfWork:
    def test_commits_once_on_success(self, fake_pool):
        with UnitOfWork() as uow:
            conn = uow.connection

        assert conn.commits == 1
        assert conn.rollbacks == 0
        assert fake_pool.released == [conn]
        assert uow.connection is None

    def test_rolls_back_and_reraises_on_error(self, fake_pool):
        with pytest.raises(ValueError):
            with UnitOfWork() as uow:
                conn = uow.connection
                raise ValueError("detail rejected")

        assert conn.commits == 0
        assert conn.rollbacks == 1
        assert fake_pool.released == [conn]

    def test_commit_failure_raises_store_error(self, fake_pool):
        with pytest.raises(StoreError):
            with UnitOfWork() as uow:
                uow.connection.commit_error = psycopg2.OperationalError("lost connection")
                conn = uow.connection

        assert conn.rollbacks == 1
        assert fake_pool.released == [conn]

    def test_cannot_be_entered_twice(self, fake_pool):
        uow = UnitOfWork()
        with uow:
            with pytest.raises(RuntimeError):
                uow.__enter__()

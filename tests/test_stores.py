"""Tests for the user and project stores."""

import pytest

from project_tracker.database import engine_options
from project_tracker.exceptions import DuplicateEmailError
from project_tracker.models.project import Project
from project_tracker.models.user import User
from project_tracker.services import users
from project_tracker.services.passwords import get_password_hash, verify_password
from project_tracker.services.projects import ProjectService
from project_tracker.services.users import create_user, get_user_by_email, get_user_by_id


@pytest.fixture
def owner(db):
    return create_user(db, "Owner", "owner@example.com", "hash")


@pytest.fixture
def stranger(db):
    return create_user(db, "Stranger", "stranger@example.com", "hash")


@pytest.fixture
def service(db):
    return ProjectService(db)


def project_data(**overrides):
    data = {
        "title": "Tracker",
        "description": "Keeps track",
        "github_link": "https://github.com/example/tracker",
        "tech_stack": ["Python"],
    }
    data.update(overrides)
    return data


class TestPasswords:
    def test_hash_is_salted(self):
        first = get_password_hash("secret1")
        second = get_password_hash("secret1")
        assert first != second
        assert verify_password("secret1", first)
        assert verify_password("secret1", second)

    def test_wrong_password(self):
        assert not verify_password("wrong", get_password_hash("secret1"))

    def test_no_hash_never_verifies(self):
        assert not verify_password("secret1", None)


class TestUserStore:
    def test_create_and_find(self, db):
        user = create_user(db, "Ada", "Ada@Example.com", "hash")
        assert user.id is not None
        assert user.email == "ada@example.com"
        assert get_user_by_email(db, "ADA@example.com").id == user.id
        assert get_user_by_id(db, user.id).name == "Ada"

    def test_missing_user(self, db):
        assert get_user_by_email(db, "nobody@example.com") is None
        assert get_user_by_id(db, 123456) is None

    def test_duplicate_email_case_insensitive(self, db, owner):
        with pytest.raises(DuplicateEmailError):
            create_user(db, "Copy", "OWNER@example.com", "hash")
        assert db.query(User).count() == 1

    def test_concurrent_duplicate_is_rolled_back(self, db, owner, monkeypatch):
        # Simulate another request inserting the same email after our lookup
        monkeypatch.setattr(users, "get_user_by_email", lambda db, email: None)

        with pytest.raises(DuplicateEmailError):
            create_user(db, "Racer", "owner@example.com", "hash")

        assert db.query(User).count() == 1
        assert db.query(User).one().name == "Owner"


class TestProjectStore:
    def test_create_sets_owner(self, service, owner):
        project = service.create(owner.id, project_data())
        assert project.user_id == owner.id
        assert project.tech_stack == ["Python"]
        assert project.created_at is not None

    def test_create_defaults_github_link(self, service, owner):
        data = project_data()
        del data["github_link"]
        assert service.create(owner.id, data).github_link == ""

    def test_list_newest_first(self, service, owner, stranger):
        older = service.create(owner.id, project_data(title="Older"))
        newer = service.create(owner.id, project_data(title="Newer"))
        service.create(stranger.id, project_data(title="Not mine"))

        assert [p.id for p in service.list_by_owner(owner.id)] == [newer.id, older.id]

    def test_get_by_owner(self, service, owner, stranger):
        project = service.create(owner.id, project_data())
        assert service.get_by_owner(project.id, owner.id) is project
        assert service.get_by_owner(project.id, stranger.id) is None
        assert service.get_by_owner(project.id + 1000, owner.id) is None

    def test_update_only_supplied_fields(self, service, owner):
        project = service.create(owner.id, project_data())
        created_updated_at = project.updated_at

        updated = service.update_by_owner(project.id, owner.id, {"title": "Renamed"})
        assert updated.title == "Renamed"
        assert updated.description == "Keeps track"
        assert updated.github_link == "https://github.com/example/tracker"
        assert updated.tech_stack == ["Python"]
        assert updated.updated_at > created_updated_at

    def test_update_ignores_owner_change(self, service, owner, stranger):
        project = service.create(owner.id, project_data())
        updated = service.update_by_owner(project.id, owner.id, {"user_id": stranger.id})
        assert updated.user_id == owner.id

    def test_update_by_non_owner(self, service, owner, stranger):
        project = service.create(owner.id, project_data())
        assert service.update_by_owner(project.id, stranger.id, {"title": "Hijacked"}) is None
        assert service.get_by_owner(project.id, owner.id).title == "Tracker"

    def test_delete_by_owner(self, service, owner, stranger):
        project_id = service.create(owner.id, project_data()).id
        assert service.delete_by_owner(project_id, stranger.id) is False
        assert service.delete_by_owner(project_id, owner.id) is True
        assert service.delete_by_owner(project_id, owner.id) is False
        assert service.list_by_owner(owner.id) == []

    def test_owner_listing_index_is_declared(self):
        indexes = {index.name: [c.name for c in index.columns] for index in Project.__table__.indexes}
        assert indexes["ix_projects_user_id_created_at"] == ["user_id", "created_at"]


class TestEngineOptions:
    def test_sqlite_allows_cross_thread_use(self):
        assert engine_options("sqlite:///./test.db") == {"connect_args": {"check_same_thread": False}}

    def test_server_database_gets_pool(self):
        options = engine_options("postgresql://user:pass@db:5432/project_tracker")
        assert options["pool_pre_ping"] is True
        assert "connect_args" not in options

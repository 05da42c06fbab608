# tests/repositories/test_sqlalchemy_repositories.py
import pytest

from object_roles.database import models
from object_roles.repositories.sqlalchemy import (
    SqlalchemyRoleRepository, SqlalchemyUserRoleRepository, SqlalchemyAuthorizableRepository, SqlalchemyUserRepository
)
from object_roles.services.exceptions import RoleAlreadyExistsError
from tests.fakes import Post, Article


@pytest.fixture
def role_repo(db_session) -> SqlalchemyRoleRepository:
    return SqlalchemyRoleRepository(db_session)

@pytest.fixture
def user_role_repo(db_session) -> SqlalchemyUserRoleRepository:
    return SqlalchemyUserRoleRepository(db_session)

@pytest.fixture
def authorizable_repo(db_session) -> SqlalchemyAuthorizableRepository:
    return SqlalchemyAuthorizableRepository(db_session)

@pytest.fixture
def roles(role_repo):
    """같은 이름 'editor'를 세 가지 범위로 하나씩 생성합니다."""
    return {
        "global": role_repo.create(models.Role(name="editor")),
        "class": role_repo.create(models.Role(name="editor", authorizable_type="Post")),
        "instance": role_repo.create(models.Role(name="editor", authorizable_type="Post", authorizable_id=42)),
    }

# ===================================================================
#  역할 리포지토리 테스트
# ===================================================================
class TestRoleRepository:
    def test_find_by_scope_distinguishes_null_columns(self, role_repo, roles):
        """같은 이름이라도 NULL 조합에 따라 서로 다른 역할로 조회되는지 테스트합니다."""
        assert role_repo.find_by_scope("editor", None, None).id == roles["global"].id
        assert role_repo.find_by_scope("editor", "Post", None).id == roles["class"].id
        assert role_repo.find_by_scope("editor", "Post", 42).id == roles["instance"].id
        assert role_repo.find_by_scope("editor", "Post", 43) is None
        assert role_repo.find_by_scope("viewer", None, None) is None

    def test_duplicate_instance_role_is_rejected(self, role_repo, roles, db_session):
        with pytest.raises(RoleAlreadyExistsError):
            role_repo.create(models.Role(name="editor", authorizable_type="Post", authorizable_id=42))
        # 검증: 롤백 후에도 세션을 계속 사용할 수 있어야 함
        assert db_session.query(models.Role).count() == 3

    def test_exists_by_name_ignores_scope(self, role_repo, roles):
        assert role_repo.exists_by_name("editor") is True
        assert role_repo.exists_by_name("viewer") is False

    def test_delete_removes_join_rows(self, role_repo, user_role_repo, roles, make_user, db_session):
        user = make_user("alice")
        user_role_repo.add(user, roles["global"])

        assert role_repo.delete(roles["global"]) is True
        assert db_session.query(models.UserRole).count() == 0
        assert role_repo.delete(None) is False

    def test_count_users(self, role_repo, user_role_repo, roles, make_user):
        alice, bob = make_user("alice"), make_user("bob")
        user_role_repo.add(alice, roles["class"])
        user_role_repo.add(bob, roles["class"])

        assert role_repo.count_users(roles["class"]) == 2
        assert role_repo.count_users(roles["global"]) == 0

# ===================================================================
#  사용자-역할 연결 리포지토리 테스트
# ===================================================================
class TestUserRoleRepository:
    def test_add_is_idempotent(self, user_role_repo, roles, make_user, db_session):
        user = make_user("alice")
        user_role_repo.add(user, roles["global"])
        user_role_repo.add(user, roles["global"])

        assert db_session.query(models.UserRole).count() == 1
        assert user_role_repo.exists(user, roles["global"]) is True

    def test_remove_and_remove_all(self, user_role_repo, roles, make_user):
        user = make_user("alice")
        for role in roles.values():
            user_role_repo.add(user, role)

        assert user_role_repo.remove(user, roles["global"]) is True
        assert user_role_repo.remove(user, roles["global"]) is False
        assert user_role_repo.remove_all(user) == 2
        assert user_role_repo.list_roles(user) == []

    def test_list_roles_is_per_user(self, user_role_repo, roles, make_user):
        alice, bob = make_user("alice"), make_user("bob")
        user_role_repo.add(alice, roles["instance"])
        user_role_repo.add(alice, roles["global"])
        user_role_repo.add(bob, roles["class"])

        assert [r.id for r in user_role_repo.list_roles(alice)] == sorted([roles["global"].id, roles["instance"].id])
        assert [r.id for r in user_role_repo.list_roles(bob)] == [roles["class"].id]

    def test_list_users_for_authorizable_is_distinct(self, user_role_repo, role_repo, roles, make_user):
        """한 사용자가 같은 객체에 여러 역할을 가져도 한 번만 조회되는지 테스트합니다."""
        alice, bob, carol = make_user("alice"), make_user("bob"), make_user("carol")
        owner = role_repo.create(models.Role(name="owner", authorizable_type="Post", authorizable_id=42))
        user_role_repo.add(alice, roles["instance"])
        user_role_repo.add(alice, owner)
        user_role_repo.add(bob, owner)
        user_role_repo.add(carol, roles["class"])

        users = user_role_repo.list_users_for_authorizable("Post", 42)

        assert [u.username for u in users] == ["alice", "bob"]

    def test_list_authorizable_ids_skips_class_scoped_roles(self, user_role_repo, role_repo, roles, make_user):
        user = make_user("alice")
        other = role_repo.create(models.Role(name="owner", authorizable_type="Post", authorizable_id=7))
        user_role_repo.add(user, roles["class"])
        user_role_repo.add(user, roles["instance"])
        user_role_repo.add(user, other)

        assert sorted(user_role_repo.list_authorizable_ids(user, "Post")) == [7, 42]
        assert user_role_repo.list_authorizable_ids(user, "Comment") == []

    def test_deleting_user_deletes_join_rows(self, user_role_repo, roles, make_user, db_session):
        user = make_user("alice")
        user_role_repo.add(user, roles["global"])

        SqlalchemyUserRepository(db_session).delete(user)

        assert db_session.query(models.UserRole).count() == 0
        # 검증: 연결만 삭제되고 역할 자체는 남아 있어야 함
        assert db_session.query(models.Role).count() == 3

# ===================================================================
#  도메인 객체 리포지토리 테스트
# ===================================================================
class TestAuthorizableRepository:
    def test_find_by_ids_skips_missing(self, authorizable_repo, make_post):
        make_post(1, "first")
        make_post(2, "second", model_class=Article)

        found = authorizable_repo.find_by_ids(Post, [2, 1, 99])

        assert [p.id for p in found] == [1, 2]
        assert isinstance(found[1], Article)
        assert authorizable_repo.find_by_ids(Post, []) == []

    def test_delete_cascades_scoped_roles(self, authorizable_repo, role_repo, user_role_repo, roles, make_user, make_post, db_session):
        """객체를 삭제하면 그 객체에 한정된 역할과 연결만 삭제되는지 테스트합니다."""
        post = make_post(42)
        alice = make_user("alice")
        user_role_repo.add(alice, roles["instance"])
        user_role_repo.add(alice, roles["class"])

        assert authorizable_repo.delete(post) is True

        assert role_repo.find_by_scope("editor", "Post", 42) is None
        assert role_repo.find_by_scope("editor", "Post", None) is not None
        assert [r.id for r in user_role_repo.list_roles(alice)] == [roles["class"].id]

# ===================================================================
#  사용자 리포지토리 테스트
# ===================================================================
class TestUserRepository:
    def test_create_and_find(self, db_session):
        user_repo = SqlalchemyUserRepository(db_session)

        created = user_repo.create(models.User(username="alice"))

        assert user_repo.find_by_id(created.id).username == "alice"
        assert user_repo.find_by_username("alice").id == created.id
        assert user_repo.find_by_username("nobody") is None
        assert user_repo.delete(None) is False

# tests/services/test_authorizable_service.py
import pytest
from unittest.mock import MagicMock

from object_roles.services.authorizable_service import AuthorizableService
from object_roles.services.role_service import RoleService
from object_roles.services.exceptions import InvalidArgumentError
from object_roles.repositories.interfaces import IUserRoleRepository, IAuthorizableRepository
from object_roles.database import models
from tests.fakes import Post, Article

# ===================================================================
#  Fixture 설정
# ===================================================================

@pytest.fixture
def mock_role_service() -> MagicMock:
    """RoleService에 대한 모의 객체를 생성합니다."""
    return MagicMock(spec=RoleService)

@pytest.fixture
def mock_user_role_repo() -> MagicMock:
    return MagicMock(spec=IUserRoleRepository)

@pytest.fixture
def mock_authorizable_repo() -> MagicMock:
    return MagicMock(spec=IAuthorizableRepository)

@pytest.fixture
def authorizable_service(mock_role_service, mock_user_role_repo, mock_authorizable_repo) -> AuthorizableService:
    return AuthorizableService(mock_role_service, mock_user_role_repo, mock_authorizable_repo)

@pytest.fixture
def user() -> models.User:
    return models.User(id=1, username="alice")

@pytest.fixture
def post() -> Post:
    return Post(id=42, title="hello")

# ===================================================================
#  사용자 측 API로의 위임 테스트
# ===================================================================
class TestDelegation:
    def test_accepts_role_asks_the_user_side(self, authorizable_service, mock_role_service, user, post):
        mock_role_service.has_role.return_value = True

        assert authorizable_service.accepts_role(post, "editor", user) is True
        mock_role_service.has_role.assert_called_once_with(user, "editor", post)

    def test_grant_and_revoke_use_the_object_as_target(self, authorizable_service, mock_role_service, user, post):
        authorizable_service.grant_role(post, "editor", user)
        authorizable_service.revoke_role(post, "editor", user)

        mock_role_service.add_role.assert_called_once_with(user, "editor", post)
        mock_role_service.remove_role.assert_called_once_with(user, "editor", post)

    def test_accepts_roles_by_and_accepted_roles_by(self, authorizable_service, mock_role_service, user, post):
        role = models.Role(id=3, name="editor", authorizable_type="Post", authorizable_id=42)
        mock_role_service.has_roles_for.return_value = True
        mock_role_service.roles_for.return_value = [role]

        assert authorizable_service.accepts_role_by(post, user) is True
        assert authorizable_service.accepted_roles_by(post, user) == [role]
        mock_role_service.has_roles_for.assert_called_once_with(user, post)
        mock_role_service.roles_for.assert_called_once_with(user, post)

    @pytest.mark.parametrize("target, expected_class", [(Article, Article), (Article(id=5), Article)])
    def test_authorizables_by_forwards_the_class(self, authorizable_service, mock_role_service, user, target, expected_class):
        authorizable_service.authorizables_by(target, user)

        mock_role_service.authorizables_for.assert_called_once_with(user, expected_class)

# ===================================================================
#  역방향 조회 및 삭제 테스트
# ===================================================================
class TestUsersAndDestroy:
    def test_users_for_queries_by_base_type_and_id(self, authorizable_service, mock_user_role_repo):
        """객체의 최상위 타입과 ID로 보유 사용자를 조회하는지 테스트합니다."""
        # === Arrange ===
        holders = [models.User(id=1, username="alice"), models.User(id=2, username="bob")]
        mock_user_role_repo.list_users_for_authorizable.return_value = holders

        # === Act ===
        result = authorizable_service.users_for(Article(id=7))

        # === Assert ===
        assert result == holders
        mock_user_role_repo.list_users_for_authorizable.assert_called_once_with("Post", 7)

    def test_users_for_rejects_a_class(self, authorizable_service, mock_user_role_repo):
        with pytest.raises(InvalidArgumentError):
            authorizable_service.users_for(Post)
        mock_user_role_repo.list_users_for_authorizable.assert_not_called()

    def test_destroy_deletes_through_repository(self, authorizable_service, mock_authorizable_repo, post):
        mock_authorizable_repo.delete.return_value = True

        assert authorizable_service.destroy(post) is True
        mock_authorizable_repo.delete.assert_called_once_with(post)

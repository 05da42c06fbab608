import logging

from sqlalchemy import event, inspect
from sqlalchemy.orm import Session, selectinload

from .role import Role

logger = logging.getLogger(__name__)


def base_type_name(model_class) -> str:
    """
    역할의 authorizable_type으로 저장될 타입 이름을 반환합니다.
    매핑된 클래스는 상속 계층의 최상위(base) 매퍼 클래스 이름을 사용하므로,
    하위 클래스 객체들도 하나의 authorizable_type 네임스페이스를 공유합니다.
    """
    mapper = inspect(model_class, raiseerr=False)
    if mapper is None:
        return model_class.__name__
    return mapper.base_mapper.class_.__name__


class AuthorizableMixin:
    """
    객체 범위 역할의 대상이 될 수 있는 도메인 모델에 섞어 쓰는 믹스인입니다.
    이 믹스인을 가진 객체가 세션에서 삭제되면, 해당 객체에 한정된 역할과
    그 역할의 연관 행이 같은 flush 안에서 함께 삭제됩니다.
    """

    @classmethod
    def authorizable_type(cls) -> str:
        return base_type_name(cls)


def remove_accepted_roles(session: Session, authorizable: AuthorizableMixin) -> int:
    """
    객체에 한정된 모든 역할을 삭제합니다. (객체 삭제 시의 무조건적 연쇄 삭제)
    다른 사용자가 아직 보유하고 있어도 역할은 삭제되며, 각 역할의 연관 행을 먼저 지운 뒤 역할 자체를 지웁니다.
    flush 도중에 호출되므로 commit하지 않습니다.

    Returns:
        삭제된 역할의 개수.
    """
    roles = (
        session.query(Role)
        .options(selectinload(Role.user_associations))
        .filter(
            Role.authorizable_type == authorizable.authorizable_type(),
            Role.authorizable_id == authorizable.id,
        )
        .all()
    )
    for role in roles:
        for association in list(role.user_associations):
            session.delete(association)
        session.delete(role)

    if roles:
        logger.info(
            "Removed %d role(s) scoped to %s#%s",
            len(roles), authorizable.authorizable_type(), authorizable.id,
        )
    return len(roles)


@event.listens_for(Session, "before_flush")
def _remove_roles_of_deleted_authorizables(session, flush_context, instances):
    for obj in list(session.deleted):
        if isinstance(obj, AuthorizableMixin):
            remove_accepted_roles(session, obj)

# object_roles/services/scope.py
import enum
from dataclasses import dataclass
from typing import Any, Optional

from object_roles.database import models
from object_roles.services.exceptions import InvalidArgumentError


class ScopeKind(enum.Enum):
    NONE = "none"
    CLASS = "class"
    INSTANCE = "instance"


@dataclass(frozen=True)
class Scope:
    """
    역할 이름이 어떤 (authorizable_type, authorizable_id) 조합으로 해석될지 결정하는 범위 기술자입니다.

    - NONE: 범위 없음 (전역 역할)
    - CLASS: 타입 전체에 대한 역할. 클래스 이름을 그대로 사용합니다.
    - INSTANCE: 특정 객체에 대한 역할. 객체 클래스의 최상위(base) 타입 이름과 객체 ID를 사용합니다.
    """
    kind: ScopeKind
    authorizable_type: Optional[str] = None
    authorizable_id: Optional[Any] = None

    @classmethod
    def none(cls) -> "Scope":
        return cls(ScopeKind.NONE)

    @classmethod
    def for_class(cls, model_class) -> "Scope":
        type_name = model_class if isinstance(model_class, str) else model_class.__name__
        return cls(ScopeKind.CLASS, type_name)

    @classmethod
    def for_instance(cls, obj) -> "Scope":
        if isinstance(obj, type):
            raise InvalidArgumentError(f"Invalid argument: '{obj}'. You must provide an object here, not a class.")
        obj_id = getattr(obj, "id", None)
        if obj_id is None:
            raise InvalidArgumentError(
                f"Invalid argument: '{obj!r}'. Authorizable objects must be persisted before roles can refer to them."
            )
        return cls(ScopeKind.INSTANCE, models.base_type_name(type(obj)), obj_id)

    @classmethod
    def of(cls, target) -> "Scope":
        """None, 클래스, 객체 또는 이미 만들어진 Scope를 범위 기술자로 변환합니다."""
        if target is None:
            return cls.none()
        if isinstance(target, Scope):
            return target
        if isinstance(target, type):
            return cls.for_class(target)
        return cls.for_instance(target)

    def matches(self, role: models.Role) -> bool:
        """역할이 이 범위에 속하는지 확인합니다."""
        if self.kind is ScopeKind.NONE:
            return role.authorizable_type is None and role.authorizable_id is None
        if self.kind is ScopeKind.CLASS:
            return role.authorizable_type == self.authorizable_type and role.authorizable_id is None
        return role.authorizable_type == self.authorizable_type and role.authorizable_id == self.authorizable_id

    def __str__(self):
        if self.kind is ScopeKind.NONE:
            return "global"
        if self.kind is ScopeKind.CLASS:
            return self.authorizable_type
        return f"{self.authorizable_type}#{self.authorizable_id}"

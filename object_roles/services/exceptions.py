# object_roles/services/exceptions.py

# --- Validation Exceptions ---
class InvalidArgumentError(Exception):
    """역할 조회 대상으로 잘못된 인자(클래스가 아닌 값, 저장되지 않은 객체 등)가 주어졌을 때"""
    pass

# --- Creation Exceptions ---
class RoleAlreadyExistsError(Exception):
    """동일한 (이름, 타입, ID) 식별 키의 역할이 이미 존재하여 생성이 거부되었을 때"""
    pass

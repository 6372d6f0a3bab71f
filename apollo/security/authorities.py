from typing import Iterable, List

ROLE_PREFIX = "ROLE_"


def role_name_to_capability(role_name: str) -> str:
    """역할 이름을 보안 계층이 사용하는 권한 토큰('ROLE_<NAME>')으로 변환합니다."""
    return ROLE_PREFIX + role_name.upper()


def roles_to_capabilities(roles: Iterable) -> List[str]:
    """
    사용자-역할 연관 목록으로부터 권한 토큰 목록을 만듭니다.

    Args:
        roles: `.role.name`을 가진 연관 객체(UserRoles)의 반복 가능 객체.

    Returns:
        입력 순서를 유지한 'ROLE_<NAME>' 문자열 리스트. 중복은 제거하지 않습니다.
        (예: [UserRoles(role=Role(name='admin'))] -> ['ROLE_ADMIN'])
    """
    return [role_name_to_capability(assoc.role.name) for assoc in roles]


def has_authority(roles: Iterable, capability: str) -> bool:
    return capability in roles_to_capabilities(roles)

# tests/security/test_authorities.py
from apollo.database import models
from apollo.security.authorities import roles_to_capabilities, role_name_to_capability, has_authority

def _assoc(name):
    return models.UserRoles(role=models.Role(name=name))

class TestRolesToCapabilities:
    def test_empty_roles_yield_empty_list(self):
        """역할이 없으면 빈 리스트를 반환하는지 테스트합니다."""
        assert roles_to_capabilities([]) == []

    def test_admin_role_becomes_role_admin(self):
        assert roles_to_capabilities([_assoc("admin")]) == ["ROLE_ADMIN"]

    def test_order_and_duplicates_are_preserved(self):
        """입력 순서가 유지되고, 중복 역할도 제거되지 않는지 테스트합니다."""
        roles = [_assoc("user"), _assoc("Data"), _assoc("user")]
        assert roles_to_capabilities(roles) == ["ROLE_USER", "ROLE_DATA", "ROLE_USER"]

    def test_is_recomputed_on_every_call(self):
        roles = [_assoc("user")]
        first = roles_to_capabilities(roles)
        roles.append(_assoc("admin"))
        assert first == ["ROLE_USER"]
        assert roles_to_capabilities(roles) == ["ROLE_USER", "ROLE_ADMIN"]

    def test_role_name_to_capability(self):
        assert role_name_to_capability("mixedCase") == "ROLE_MIXEDCASE"

    def test_has_authority(self):
        roles = [_assoc("user")]
        assert has_authority(roles, "ROLE_USER") is True
        assert has_authority(roles, "ROLE_ADMIN") is False

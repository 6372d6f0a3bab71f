# apollo/services/exceptions.py

# --- General Exceptions ---
class UserNotFoundError(Exception):
    """사용자를 찾을 수 없을 때"""
    pass

class RoleNotFoundError(Exception):
    """역할을 찾을 수 없을 때"""
    pass

class TopicNotFoundError(Exception):
    """주제를 찾을 수 없을 때"""
    pass

# --- Creation/Validation Exceptions ---
class UserCreationError(Exception):
    """사용자 생성/수정 실패 시 (username 또는 email 중복)"""
    pass

class TopicMembershipError(Exception):
    """주제 소유자를 멤버로 추가하거나, 이미 멤버인 사용자를 다시 추가할 때"""
    pass

# --- Auth Exceptions ---
class AuthorizationError(Exception):
    """사용자에게 필요한 권한(ROLE_*)이 없을 때"""
    pass

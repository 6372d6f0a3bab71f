from sqlalchemy import Column, Integer, String
from ..database import Base
from .auditable import Auditable

class Role(Base, Auditable):
    """
    사용자에게 부여할 수 있는 권한의 집합을 정의합니다.
    (예: 'admin', 'user', 'data').
    역할 이름은 보안 계층에서 'ROLE_<NAME>' 형태의 권한 토큰으로 변환됩니다.
    """
    __tablename__ = "roles"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)

    def __repr__(self):
        return f"Role(name={self.name!r})"

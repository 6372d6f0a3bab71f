from typing import List, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from apollo.database import models
from apollo.repositories.interfaces import IUserRepository

class SqlalchemyUserRepository(IUserRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, user_model: models.User) -> models.User:
        self.db.add(user_model)
        self._commit()
        self.db.refresh(user_model)
        return user_model

    def find_by_id(self, user_id: int) -> Optional[models.User]:
        return self.db.query(models.User).filter(models.User.id == user_id).first()

    def find_by_username(self, username: str) -> Optional[models.User]:
        return self.db.query(models.User).filter(models.User.username == username.lower()).first()

    def find_by_email(self, email: str) -> Optional[models.User]:
        return self.db.query(models.User).filter(models.User.primary_email == email.lower()).first()

    def list_all(self) -> List[models.User]:
        return self.db.query(models.User).order_by(models.User.username.asc()).all()

    def update(self, user: models.User) -> models.User:
        self._commit()
        self.db.refresh(user)
        return user

    def delete(self, user: models.User) -> bool:
        if not user:
            return False

        username = user.username

        for association in list(user.roles):
            self.db.delete(association)
        for membership in list(user.member_topics):
            self.db.delete(membership)
        for topic in list(user.owned_topics):
            # 소유한 주제에 참여 중인 다른 사용자의 멤버십도 함께 제거
            for membership in list(topic.users):
                self.db.delete(membership)
            self.db.delete(topic)

        self.db.delete(user)
        self.db.commit()
        print(f"DB Info: User '{username}' and its roles, memberships and owned topics deleted.")
        return True

    def _commit(self):
        try:
            self.db.commit()
        except IntegrityError:
            # username/email 고유 제약 위반 시 세션을 복구한 뒤 호출자에게 그대로 전달
            self.db.rollback()
            raise

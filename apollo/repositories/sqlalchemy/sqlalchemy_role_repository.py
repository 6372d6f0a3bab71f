from typing import List, Optional
from sqlalchemy.orm import Session
from apollo.database import models
from apollo.repositories.interfaces import IRoleRepository

class SqlalchemyRoleRepository(IRoleRepository):
    def __init__(self, db_session: Session):
        self.db = db_session

    def create(self, role_model: models.Role) -> models.Role:
        self.db.add(role_model)
        self.db.commit()
        self.db.refresh(role_model)
        return role_model

    def find_by_id(self, role_id: int) -> Optional[models.Role]:
        return self.db.query(models.Role).filter(models.Role.id == role_id).first()

    def find_by_name(self, name: str) -> Optional[models.Role]:
        return self.db.query(models.Role).filter(models.Role.name == name).first()

    def list_all(self) -> List[models.Role]:
        return self.db.query(models.Role).order_by(models.Role.name.asc()).all()

    def add_role_to_user(self, user: models.User, role: models.Role) -> models.UserRoles:
        association = user.add_role(role)
        self.db.commit()
        return association

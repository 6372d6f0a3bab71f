# tests/repositories/test_sqlalchemy_user_repository.py
import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from apollo.database import models
from apollo.repositories.sqlalchemy.sqlalchemy_user_repository import SqlalchemyUserRepository
from apollo.repositories.sqlalchemy.sqlalchemy_role_repository import SqlalchemyRoleRepository
from apollo.repositories.sqlalchemy.sqlalchemy_topic_repository import SqlalchemyTopicRepository

@pytest.fixture
def user_repo(db_session) -> SqlalchemyUserRepository:
    return SqlalchemyUserRepository(db_session)

@pytest.fixture
def role_repo(db_session) -> SqlalchemyRoleRepository:
    return SqlalchemyRoleRepository(db_session)

@pytest.fixture
def topic_repo(db_session) -> SqlalchemyTopicRepository:
    return SqlalchemyTopicRepository(db_session)

# ===================================================================
#  생성 및 조회(Create & Find) 테스트
# ===================================================================
class TestCreateAndFind:
    def test_create_assigns_id_and_stores_lowercase(self, user_repo, db_session):
        """저장 시 id가 할당되고, DB에도 소문자로 저장되는지 테스트합니다."""
        user = user_repo.create(models.User("MixedCase", "Mixed@Case.COM"))

        assert user.id is not None
        row = db_session.execute(text("SELECT username, primaryemail FROM users")).one()
        assert tuple(row) == ("mixedcase", "mixed@case.com")

    def test_username_differing_only_in_case_is_rejected(self, user_repo):
        """대소문자만 다른 username은 정규화 후 고유 제약 위반이 되는지 테스트합니다."""
        user_repo.create(models.User("Alice", "alice@apollo.io"))

        with pytest.raises(IntegrityError):
            user_repo.create(models.User("ALICE", "other@apollo.io"))

        # 세션이 롤백되어 계속 사용할 수 있어야 함
        assert [u.username for u in user_repo.list_all()] == ["alice"]

    def test_email_differing_only_in_case_is_rejected(self, user_repo):
        user_repo.create(models.User("bob", "bob@apollo.io"))

        with pytest.raises(IntegrityError):
            user_repo.create(models.User("robert", "BOB@Apollo.io"))

    def test_find_is_case_insensitive(self, user_repo):
        created = user_repo.create(models.User("carol", "carol@apollo.io"))

        assert user_repo.find_by_id(created.id) is created
        assert user_repo.find_by_username("CAROL") is created
        assert user_repo.find_by_email("Carol@APOLLO.io") is created
        assert user_repo.find_by_username("nobody") is None

    def test_list_all_is_ordered_by_username(self, user_repo):
        user_repo.create(models.User("zed", "zed@apollo.io"))
        user_repo.create(models.User("amy", "amy@apollo.io"))

        assert [u.username for u in user_repo.list_all()] == ["amy", "zed"]

    def test_update_persists_normalized_fields(self, user_repo, db_session):
        user = user_repo.create(models.User("dave", "dave@apollo.io"))

        user.username = "David"
        user_repo.update(user)

        assert db_session.execute(text("SELECT username FROM users")).scalar_one() == "david"

# ===================================================================
#  역할(Role) 연관 테스트
# ===================================================================
class TestRoles:
    def test_same_role_twice_is_persisted_twice_in_order(self, user_repo, role_repo, db_session):
        """같은 역할을 두 번 부여하면 두 개의 연관 레코드가 저장되는지 테스트합니다."""
        user = user_repo.create(models.User("erin", "erin@apollo.io"))
        admin = role_repo.create(models.Role(name="admin"))
        member = role_repo.create(models.Role(name="user"))

        role_repo.add_role_to_user(user, admin)
        role_repo.add_role_to_user(user, member)
        role_repo.add_role_to_user(user, admin)
        db_session.expire_all()

        reloaded = user_repo.find_by_id(user.id)
        assert len(reloaded.roles) == 3
        assert reloaded.get_authority() == ["ROLE_ADMIN", "ROLE_USER", "ROLE_ADMIN"]

# ===================================================================
#  삭제(Delete) 연쇄 테스트
# ===================================================================
class TestDeleteCascade:
    def test_delete_removes_associations_and_owned_topics(self, user_repo, role_repo, topic_repo, db_session):
        """사용자 삭제 시 역할 연관, 멤버십, 소유 주제가 함께 삭제되는지 테스트합니다."""
        # === Arrange ===
        doomed = user_repo.create(models.User("doomed", "doomed@apollo.io"))
        survivor = user_repo.create(models.User("survivor", "survivor@apollo.io"))
        admin = role_repo.create(models.Role(name="admin"))
        role_repo.add_role_to_user(doomed, admin)
        role_repo.add_role_to_user(survivor, admin)

        owned = topic_repo.create(models.Topic(name="Doomed Topic", owner=doomed))
        kept = topic_repo.create(models.Topic(name="Survivor Topic", owner=survivor))
        topic_repo.add_member(owned, survivor)   # 다른 사용자의 멤버십도 함께 삭제되어야 함
        topic_repo.add_member(kept, doomed)
        survivor_id, kept_id = survivor.id, kept.id

        # === Act ===
        assert user_repo.delete(doomed) is True

        # === Assert ===
        db_session.expire_all()
        assert [u.username for u in user_repo.list_all()] == ["survivor"]
        assert [t.id for t in topic_repo.list_all()] == [kept_id]
        assert db_session.query(models.TopicUsers).count() == 0
        assert [a.user_id for a in db_session.query(models.UserRoles).all()] == [survivor_id]
        assert role_repo.find_by_name("admin") is not None

    def test_delete_none_returns_false(self, user_repo):
        assert user_repo.delete(None) is False

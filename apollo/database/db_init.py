from .database import engine, SessionLocal, Base
from .models import *

def initialize_db(bind=None, session_factory=None):
    """
    DB와 테이블을 생성하고, 비어 있으면 기본 데이터를 삽입합니다.
    SQLAlchemy 모델을 사용하여 모든 작업을 수행합니다.
    """
    bind = bind or engine
    session_factory = session_factory or SessionLocal
    print("DB 초기화 중 (SQLAlchemy 사용)...")

    # 모든 테이블을 생성합니다. (이미 존재하면 생성하지 않음)
    Base.metadata.create_all(bind=bind)
    print("테이블 생성 완료.")

    db = session_factory()
    try:
        if db.query(User).first():
            print("기본 데이터가 이미 존재합니다. 초기화를 건너뜁니다.")
            return

        print("기본 데이터 삽입 중...")

        # Roles
        admin_role = Role(name='admin')
        user_role = Role(name='user')
        data_role = Role(name='data')
        db.add_all([admin_role, user_role, data_role])

        # Users (username/email은 저장 시 소문자로 정규화됩니다)
        admin_user = User('Admin', 'Admin@Apollo.io')
        admin_user.add_role(admin_role)
        admin_user.add_role(user_role)
        admin_user.add_role(data_role)

        member_user = User('Cinnamon', 'cinnamon@apollo.io')
        member_user.add_role(user_role)
        db.add_all([admin_user, member_user])

        # Topic: admin이 소유하고, cinnamon이 멤버로 참여
        topic = Topic(name='Onboarding', owner=admin_user)
        db.add(topic)
        db.add(TopicUsers(topic=topic, user=member_user))

        db.commit()
        print("DB 초기화 및 기본 데이터 삽입 완료.")

    except Exception as e:
        print(f"오류 발생: {e}")
        db.rollback()
        raise
    finally:
        db.close()

if __name__ == '__main__':
    initialize_db()

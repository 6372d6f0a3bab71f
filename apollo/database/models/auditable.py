from sqlalchemy import Column, DateTime, func


class Auditable:
    """
    생성/수정 시각을 자동으로 기록하는 믹스인입니다.
    값은 데이터베이스가 채우며, 애플리케이션 코드에서 직접 설정하지 않습니다.
    """
    created_date = Column(DateTime, server_default=func.now())
    last_modified_date = Column(DateTime, server_default=func.now(), onupdate=func.now())

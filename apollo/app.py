# apollo/app.py
from wsgiref.simple_server import make_server
import json
import sys
import re

# SQLAlchemy 및 의존성 임포트
from apollo.database.database import SessionLocal
from apollo.repositories.sqlalchemy.sqlalchemy_user_repository import SqlalchemyUserRepository
from apollo.repositories.sqlalchemy.sqlalchemy_role_repository import SqlalchemyRoleRepository
from apollo.repositories.sqlalchemy.sqlalchemy_topic_repository import SqlalchemyTopicRepository
from apollo.security.authorities import role_name_to_capability
from apollo.services.user_service import UserService
from apollo.services.topic_service import TopicService
from apollo.services.exceptions import *

ADMIN_AUTHORITY = role_name_to_capability('admin')

# --------------------------------------------------------------------------
## 요청 처리 유틸리티 함수
# --------------------------------------------------------------------------

def get_request_data(environ):
    try:
        content_length = int(environ.get("CONTENT_LENGTH") or 0)
        data = json.loads(environ["wsgi.input"].read(content_length)) if content_length > 0 else {}
    except (ValueError, json.JSONDecodeError):
        raise ValueError("Invalid or missing JSON body.")
    if not isinstance(data, dict):
        raise ValueError("JSON body must be an object.")
    return data

def get_caller_id(environ) -> int:
    caller_id = environ.get('HTTP_X_USER_ID')
    if not caller_id or not caller_id.isdigit():
        raise AuthorizationError("Missing or invalid 'X-User-Id' header.")
    return int(caller_id)

def require_authority(environ, capability):
    """요청자(X-User-Id)가 주어진 권한 토큰을 가지고 있는지 확인합니다."""
    caller_id = get_caller_id(environ)
    try:
        environ['services']['user'].check_authority(caller_id, capability)
    except UserNotFoundError:
        raise AuthorizationError(f"Unknown caller '{caller_id}'.")
    return caller_id

def require_self_or_authority(environ, user_id, capability):
    """요청자가 대상 사용자 본인이거나, 주어진 권한 토큰을 가지고 있는지 확인합니다."""
    caller_id = get_caller_id(environ)
    if caller_id == user_id:
        return caller_id
    return require_authority(environ, capability)

def handle_exception(e):
    error_map = {
        AuthorizationError: "403 Forbidden",
        UserNotFoundError: "404 Not Found",
        RoleNotFoundError: "404 Not Found",
        TopicNotFoundError: "404 Not Found",
        ValueError: "400 Bad Request",
        UserCreationError: "409 Conflict",
        TopicMembershipError: "409 Conflict",
    }
    status = error_map.get(type(e), "500 Internal Server Error")
    if status.startswith("500"):
        print(f"Unhandled error: {e!r}", file=sys.stderr)
    return status, json.dumps({"error": str(e)})

# --------------------------------------------------------------------------
## WSGI 애플리케이션 (의존성 주입 및 라우팅)
# --------------------------------------------------------------------------

ROUTES = []

def application(environ, start_response, session_factory=SessionLocal):
    db_session = session_factory()
    try:
        # 1. 의존성 생성 (Repositories -> Services)
        user_repo = SqlalchemyUserRepository(db_session)
        role_repo = SqlalchemyRoleRepository(db_session)
        topic_repo = SqlalchemyTopicRepository(db_session)

        # 2. 생성된 서비스 객체들을 environ을 통해 핸들러에 전달
        environ['services'] = {
            'user': UserService(user_repo, role_repo),
            'topic': TopicService(topic_repo, user_repo),
        }

        # 3. 라우팅 및 핸들러 실행
        path = environ.get("PATH_INFO", "")
        method = environ.get("REQUEST_METHOD", "")

        handler, path_args = None, []
        for route_method, pattern, route_handler in ROUTES:
            if method == route_method and (match := re.match(pattern, path)):
                handler, path_args = route_handler, match.groups()
                break

        if handler:
            status, response_body = handler(environ, *path_args)
        else:
            status, response_body = '404 Not Found', json.dumps({'error': 'Not Found'})

    except Exception as e:
        status, response_body = handle_exception(e)
    finally:
        db_session.close()

    start_response(status, [("Content-Type", "application/json")])
    return [response_body.encode("utf-8")]

# --------------------------------------------------------------------------
## 핸들러 함수
# --------------------------------------------------------------------------

def create_user_handler(environ, *args):
    require_authority(environ, ADMIN_AUTHORITY)
    data = get_request_data(environ)
    user = environ['services']['user'].create_user(data.get('username'), data.get('primaryemail'))
    return '201 Created', json.dumps(user)

def list_users_handler(environ, *args):
    users = environ['services']['user'].list_users()
    return '200 OK', json.dumps({"users": users})

def get_user_handler(environ, user_id):
    user = environ['services']['user'].get_user(int(user_id))
    return '200 OK', json.dumps(user)

def update_user_handler(environ, user_id):
    require_authority(environ, ADMIN_AUTHORITY)
    data = get_request_data(environ)
    user = environ['services']['user'].update_user(
        int(user_id), username=data.get('username'), primary_email=data.get('primaryemail')
    )
    return '200 OK', json.dumps(user)

def delete_user_handler(environ, user_id):
    require_authority(environ, ADMIN_AUTHORITY)
    environ['services']['user'].delete_user(int(user_id))
    return '204 No Content', ''

def add_role_handler(environ, user_id, role_name):
    require_authority(environ, ADMIN_AUTHORITY)
    environ['services']['user'].add_role(int(user_id), role_name)
    return '204 No Content', ''

def create_topic_handler(environ, *args):
    caller_id = get_caller_id(environ)
    data = get_request_data(environ)
    topic = environ['services']['topic'].create_topic(caller_id, data.get('name'))
    return '201 Created', json.dumps(topic)

def list_topics_handler(environ, *args):
    topics = environ['services']['topic'].list_topics()
    return '200 OK', json.dumps({"topics": topics})

def delete_topic_handler(environ, topic_id):
    require_authority(environ, ADMIN_AUTHORITY)
    environ['services']['topic'].delete_topic(int(topic_id))
    return '204 No Content', ''

def join_topic_handler(environ, topic_id, user_id):
    require_self_or_authority(environ, int(user_id), ADMIN_AUTHORITY)
    topic = environ['services']['topic'].join_topic(int(user_id), int(topic_id))
    return '200 OK', json.dumps(topic)

def leave_topic_handler(environ, topic_id, user_id):
    require_self_or_authority(environ, int(user_id), ADMIN_AUTHORITY)
    environ['services']['topic'].leave_topic(int(user_id), int(topic_id))
    return '204 No Content', ''

ROUTES.extend([
    ('POST', r'^/v1/users$', create_user_handler),
    ('GET', r'^/v1/users$', list_users_handler),
    ('GET', r'^/v1/users/([0-9]+)$', get_user_handler),
    ('PATCH', r'^/v1/users/([0-9]+)$', update_user_handler),
    ('DELETE', r'^/v1/users/([0-9]+)$', delete_user_handler),
    ('PUT', r'^/v1/users/([0-9]+)/roles/([a-zA-Z]+)$', add_role_handler),
    ('POST', r'^/v1/topics$', create_topic_handler),
    ('GET', r'^/v1/topics$', list_topics_handler),
    ('DELETE', r'^/v1/topics/([0-9]+)$', delete_topic_handler),
    ('PUT', r'^/v1/topics/([0-9]+)/users/([0-9]+)$', join_topic_handler),
    ('DELETE', r'^/v1/topics/([0-9]+)/users/([0-9]+)$', leave_topic_handler),
])

# --------------------------------------------------------------------------
## 서버 실행
# --------------------------------------------------------------------------

if __name__ == "__main__":
    try:
        with make_server("", 8000, application) as httpd:
            print("Serving Apollo on port 8000...")
            httpd.serve_forever()
    except Exception as e:
        print(f"Error starting server: {e}", file=sys.stderr)

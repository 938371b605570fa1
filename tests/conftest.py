import httpx
import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlalchemy.pool import StaticPool

from src.labportal.db.session import create_db_and_tables, get_db
from src.labportal.main import app
from src.labportal.utils.execution import ExecutionGateway, get_execution_gateway

RUNTIMES = [
    {"language": "python", "version": "3.12.0", "aliases": ["py", "python3"]},
    {"language": "java", "version": "15.0.2", "aliases": []},
    {"language": "gcc", "version": "10.2.0", "aliases": ["c", "cpp", "g++"]},
    {"language": "c++", "version": "10.2.0", "aliases": ["cpp", "g++"]},
]


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


class FakePiston:
    """Stands in for the remote execution service."""

    def __init__(self, runtimes=RUNTIMES, runtimes_status=200):
        self.runtimes = runtimes
        self.runtimes_status = runtimes_status
        self.requests = []
        self.execute_response = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/runtimes"):
            return httpx.Response(self.runtimes_status, json=self.runtimes)
        if request.url.path.endswith("/execute"):
            if self.execute_response is not None:
                return self.execute_response
            return httpx.Response(200, json={"run": {"stdout": "2\n", "stderr": "", "output": "2\n", "code": 0}})
        return httpx.Response(404, json={"message": "not found"})

    def paths(self):
        return [r.url.path for r in self.requests]


@pytest.fixture
def piston():
    return FakePiston()


@pytest.fixture
def gateway(piston):
    return ExecutionGateway(base_url="https://piston.test/api/v2/piston", transport=httpx.MockTransport(piston.handler))


@pytest.fixture
def client(engine, gateway):
    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_execution_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def teacher_token(client):
    resp = client.post(
        "/api/register",
        json={"email": "teacher@example.com", "password": "pass1234", "role": "teacher", "name": "Dr. Rao"},
    )
    return resp.json()["token"]


def auth(token):
    return {"Authorization": f"Bearer {token}"}


def assignment_payload(**overrides):
    payload = {
        "subjectCode": "CS501",
        "batch": "X",
        "assignmentNumber": 1,
        "createdBy": "teacher@example.com",
        "questions": [
            {
                "id": "q1",
                "title": "Reverse a string",
                "description": "Read a line and print it reversed.",
                "expectedTimeComplexity": "O(n)",
                "expectedSpaceComplexity": "O(n)",
            },
            {
                "id": "q2",
                "title": "Binary search",
                "description": "Find the index of a value in a sorted list.",
                "expectedTimeComplexity": "O(log n)",
                "expectedSpaceComplexity": "O(1)",
            },
        ],
    }
    payload.update(overrides)
    return payload


def submission_payload(**overrides):
    payload = {
        "studentEmail": "student@example.com",
        "subjectCode": "CS501",
        "assignmentNumber": 1,
        "questionId": "q1",
        "code": "print(input()[::-1])",
        "language": "Python",
        "input": "abc",
        "output": "cba\n",
        "timeComplexity": "O(n)",
        "spaceComplexity": "O(n)",
    }
    payload.update(overrides)
    return payload

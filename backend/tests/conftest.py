from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.deps import get_db
from app.db.models.user import User


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    User.__table__.create(bind=engine)
    yield TestingSessionLocal
    engine.dispose()


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    from app.main import app

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def sample_resume():
    return {
        "contactInfo": {
            "name": "Asha Verma",
            "location": "New Delhi",
            "phone": "+91 98100 00000",
            "email": "asha@example.com",
            "linkedin": "https://linkedin.com/in/asha",
            "github": "https://github.com/asha",
        },
        "summary": {"title": "Software Quality Analyst", "text": "QA engineer with 4 years of automation."},
        "skills": {"Technical Skills": "Python, Selenium", "Tools & Technologies": "Jenkins, Jira"},
        "workExperience": [],
        "projects": [],
        "education": [],
    }

"""End-to-end tests for question and tag endpoints."""

import pytest
from fastapi.testclient import TestClient

from fakeso.interface.api.app import create_app
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client over an in-memory container."""
    return TestClient(create_app(build_test_container()))


def _ask(client, title="How do I center a div?", tags=None, asked_at=None):
    body = {
        "title": title,
        "text": "I have tried everything.",
        "tag_names": tags or ["css"],
        "asked_by": "alice",
    }
    if asked_at:
        body["asked_at"] = asked_at
    response = client.post("/questions", json=body)
    assert response.status_code == 201
    return response.json()["question"]


class TestQuestionEndpoints:
    """End-to-end tests for the question API.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_add_then_get_counts_a_view(self, client):
        """Reading a question returns it with its view counted."""
        # Arrange
        question = _ask(client, tags=["css", "flexbox"])

        # Act
        response = client.get(f"/questions/{question['question_id']}")

        # Assert
        assert response.status_code == 200
        fetched = response.json()["question"]
        assert fetched["views"] == 1
        assert fetched["title"] == question["title"]
        assert [t["name"] for t in fetched["tags"]] == ["css", "flexbox"]

    def test_get_missing_question(self, client):
        response = client.get("/questions/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404

    def test_get_malformed_id(self, client):
        response = client.get("/questions/not-a-uuid")

        assert response.status_code == 400

    def test_add_question_without_tags(self, client):
        """Request validation failures are reported as 400."""
        response = client.post(
            "/questions",
            json={"title": "T", "text": "Text", "tag_names": [], "asked_by": "a"},
        )

        assert response.status_code == 400

    def test_add_question_with_too_many_tags(self, client):
        response = client.post(
            "/questions",
            json={
                "title": "T",
                "text": "Text",
                "tag_names": ["a", "b", "c", "d", "e", "f"],
                "asked_by": "a",
            },
        )

        assert response.status_code == 400

    def test_list_orders(self, client):
        """Active ranks a recently answered question above a newer one."""
        # Arrange
        a = _ask(client, title="A", asked_at="2023-01-01T00:00:00Z")
        b = _ask(client, title="B", asked_at="2023-02-01T00:00:00Z")
        answer = client.post(
            f"/questions/{a['question_id']}/answers",
            json={
                "text": "Late answer",
                "answered_by": "bob",
                "answered_at": "2023-03-01T00:00:00Z",
            },
        )
        assert answer.status_code == 201

        # Act
        newest = client.get("/questions").json()
        active = client.get("/questions", params={"order": "active"}).json()
        unanswered = client.get("/questions", params={"order": "unanswered"}).json()

        # Assert
        assert newest["order"] == "newest"
        assert [q["title"] for q in newest["questions"]] == ["B", "A"]
        assert [q["title"] for q in active["questions"]] == ["A", "B"]
        assert [q["title"] for q in unanswered["questions"]] == ["B"]
        assert b["question_id"] == unanswered["questions"][0]["question_id"]

    def test_naive_and_offset_timestamps_mix(self, client):
        """Naive timestamps are read as UTC and compare with offset ones."""
        # Arrange
        a = _ask(client, title="A", asked_at="2023-01-01T00:00:00")
        _ask(client, title="B", asked_at="2023-02-01T00:00:00+00:00")
        answer = client.post(
            f"/questions/{a['question_id']}/answers",
            json={
                "text": "Answer",
                "answered_by": "bob",
                "answered_at": "2023-02-01T03:00:00+02:00",
            },
        )
        assert answer.status_code == 201

        # Act
        response = client.get("/questions", params={"order": "active"})

        # Assert
        assert response.status_code == 200
        assert [q["title"] for q in response.json()["questions"]] == ["A", "B"]

    def test_list_unknown_order(self, client):
        response = client.get("/questions", params={"order": "hottest"})

        assert response.status_code == 400
        assert response.json()["order"] == "hottest"

    def test_search(self, client):
        """Tags match with AND, words with OR, both kinds as a union."""
        # Arrange
        _ask(client, title="Props", tags=["react"])
        _ask(client, title="Generics in typescript", tags=["typescript"])
        _ask(client, title="Typed hooks", tags=["react", "typescript"])

        def titles(search):
            response = client.get("/questions", params={"search": search})
            assert response.status_code == 200
            return [q["title"] for q in response.json()["questions"]]

        # Act & Assert
        assert titles("[react] [typescript]") == ["Typed hooks"]
        assert titles("[react] generics") == [
            "Typed hooks",
            "Generics in typescript",
            "Props",
        ]
        assert titles("nothing-matches") == []
        assert len(titles("")) == 3

    def test_list_tags_with_counts(self, client):
        _ask(client, tags=["react"])
        _ask(client, tags=["React", "redux"])

        response = client.get("/tags")

        assert response.status_code == 200
        tags = response.json()["tags"]
        assert [(t["name"], t["question_count"]) for t in tags] == [
            ("react", 2),
            ("redux", 1),
        ]

    def test_answer_missing_question(self, client):
        response = client.post(
            "/questions/00000000-0000-0000-0000-000000000000/answers",
            json={"text": "Hello", "answered_by": "bob"},
        )

        assert response.status_code == 404

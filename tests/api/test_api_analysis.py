"""Tests for the /analysis endpoints."""

from fastapi.testclient import TestClient


def _target(**overrides) -> dict:
    body = {
        "name": "佐藤",
        "relationship": "colleague",
        "benefit_type": "tangible",
        "relationship_goal": "maintain",
        "emotional_priority": 3,
        "budget": 1000,
    }
    body.update(overrides)
    return body


class TestAnalyzeTargetEndpoint:
    def test_minimal_request(self, client: TestClient) -> None:
        """POST /analysis/target returns scores, rank and gift."""
        response = client.post("/analysis/target", json=_target())
        assert response.status_code == 200
        data = response.json()
        assert data["target_name"] == "佐藤"
        assert data["rank"] in {"S", "A", "B", "C"}
        assert 0 <= data["scores"]["total"] <= 100
        assert data["gift"]["price"] <= 1000
        assert len(data["questions"]) <= 5

    def test_full_request(self, client: TestClient) -> None:
        body = _target(
            relationship="partner",
            benefit_type="intangible",
            relationship_goal="deepen",
            emotional_priority=5,
            budget=5000,
            personality=["sociable"],
            preferences=["alcohol", "surprise_lover"],
            recent_interests="クラフトビール巡り",
            recipient_actions=["contacts_first", "invited_to_meal"],
            recent_episodes="先月一緒に旅行に行った",
            gave_last_year=True,
            received_return=True,
            return_value=5000,
        )
        response = client.post("/analysis/target", json=body)
        assert response.status_code == 200
        data = response.json()
        assert data["gift"]["item"] == "プレミアムクラフトビールセット"
        assert data["gift"]["story"] != ""

    def test_name_too_long(self, client: TestClient) -> None:
        response = client.post("/analysis/target", json=_target(name="あ" * 21))
        assert response.status_code == 422

    def test_priority_out_of_range(self, client: TestClient) -> None:
        response = client.post("/analysis/target", json=_target(emotional_priority=6))
        assert response.status_code == 422

    def test_unknown_enum_value(self, client: TestClient) -> None:
        response = client.post("/analysis/target", json=_target(relationship="rival"))
        assert response.status_code == 422

    def test_budget_bounds(self, client: TestClient) -> None:
        assert client.post("/analysis/target", json=_target(budget=99)).status_code == 422
        assert (
            client.post("/analysis/target", json=_target(budget=100001)).status_code == 422
        )


class TestAnalyzeBatchEndpoint:
    def test_batch(self, client: TestClient) -> None:
        body = {
            "total_budget": 10000,
            "targets": [
                _target(name="部長", relationship="boss"),
                _target(name="恋人", relationship="partner", emotional_priority=5),
                _target(name="友達", relationship="friend", emotional_priority=2),
            ],
        }
        response = client.post("/analysis/batch", json=body)
        assert response.status_code == 200
        data = response.json()
        assert len(data["targets"]) == 3
        assert data["total_budget"] == 10000
        allocated = sum(t["allocated_budget"] for t in data["targets"])
        assert abs(allocated - 10000) <= 3
        assert any(entry["date"] == "2/14" for entry in data["timeline"])

    def test_duplicate_names_rejected(self, client: TestClient) -> None:
        body = {"total_budget": 5000, "targets": [_target(), _target()]}
        assert client.post("/analysis/batch", json=body).status_code == 422

    def test_duplicate_names_with_ids(self, client: TestClient) -> None:
        body = {
            "total_budget": 5000,
            "targets": [_target(target_id="1"), _target(target_id="2")],
        }
        response = client.post("/analysis/batch", json=body)
        assert response.status_code == 200
        assert {t["target_id"] for t in response.json()["targets"]} == {"1", "2"}

    def test_empty_targets_rejected(self, client: TestClient) -> None:
        body = {"total_budget": 5000, "targets": []}
        assert client.post("/analysis/batch", json=body).status_code == 422

    def test_too_many_targets_rejected(self, client: TestClient) -> None:
        body = {
            "total_budget": 5000,
            "targets": [_target(name=f"t{i}") for i in range(21)],
        }
        assert client.post("/analysis/batch", json=body).status_code == 422

    def test_total_budget_bounds(self, client: TestClient) -> None:
        body = {"total_budget": 50, "targets": [_target()]}
        assert client.post("/analysis/batch", json=body).status_code == 422

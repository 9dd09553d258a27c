UNASSIGNED_ID = "5f4e994f025923001fdd6bc9"


def _create(client, body):
    res = client.post("/risk-categories", json=body)
    assert res.status_code == 201
    return res.json()


class TestCreate:
    def test_create(self, client, protests):
        res = client.post("/risk-categories", json=protests)

        assert res.status_code == 201
        body = res.json()
        assert body["deleted"] is False
        assert body["keywords"] == protests["keywords"]
        assert body["language_code"] == "en"
        assert body["name"] == "Protests"
        assert body["risk_level"] == 2
        assert body["updated_by_user_id"] == protests["updated_by_user_id"]
        assert body["created_at"] == body["updated_at"]
        assert len(body["id"]) == 24

    def test_deleted_at_create(self, client, protests):
        res = client.post("/risk-categories", json={**protests, "deleted": True})

        assert res.status_code == 400
        assert res.text == "Cannot create deleted Risk Category."
        assert res.headers["content-type"].startswith("text/plain")

    def test_duplicate(self, client, protests, exclusions):
        _create(client, protests)

        res = client.post("/risk-categories", json={**exclusions, "language_code": "en", "name": "Protests"})

        assert res.status_code == 400
        assert res.text == "en:Protests already exists"

    def test_unknown_field(self, client, protests):
        body = _create(client, {**protests, "notInSchema": True})

        assert "notInSchema" not in body
        assert "notInSchema" not in client.get(f"/risk-categories/{body['id']}").json()

    def test_risk_level_validation(self, client, protests):
        res = client.post("/risk-categories", json={**protests, "risk_level": 5})

        assert res.status_code == 500
        assert res.text == (
            "RiskCategory validation failed: risk_level: `5` is not a valid enum value for path `risk_level`."
        )

    def test_updated_by_user_id_validation(self, client, protests):
        res = client.post("/risk-categories", json={**protests, "updated_by_user_id": "invalid"})

        assert res.status_code == 500
        assert res.text == (
            'RiskCategory validation failed: updated_by_user_id: "invalid" is not a valid identifier.'
        )

    def test_object_name_is_an_entity_rule_failure(self, client, protests):
        res = client.post("/risk-categories", json={**protests, "name": {"x": 1}})

        assert res.status_code == 500
        assert res.text.startswith("RiskCategory validation failed: name: ")
        assert "SELECT" not in res.text

    def test_body_must_be_an_object(self, client):
        res = client.post("/risk-categories", json=["not", "an", "object"])

        assert res.status_code == 422


class TestGetById:
    def test_round_trip(self, client, protests):
        created = _create(client, protests)

        res = client.get(f"/risk-categories/{created['id']}")

        assert res.status_code == 200
        assert res.json() == created
        assert res.json()["created_at"] == res.json()["updated_at"]

    def test_uppercase_id(self, client, protests):
        created = _create(client, protests)

        res = client.get(f"/risk-categories/{created['id'].upper()}")

        assert res.status_code == 200
        assert res.json() == created

    def test_invalid_id(self, client):
        res = client.get("/risk-categories/100")

        assert res.status_code == 400
        assert res.text == "'100' is not a valid identifier."

    def test_missing_document(self, client):
        res = client.get(f"/risk-categories/{UNASSIGNED_ID}")

        assert res.status_code == 404
        assert res.content == b""


class TestSearch:
    def test_empty_filter(self, client, protests, exclusions):
        first = _create(client, protests)
        second = _create(client, exclusions)

        res = client.post("/risk-categories/search", json={})

        assert res.status_code == 200
        assert [doc["id"] for doc in res.json()] == [first["id"], second["id"]]

    def test_no_body(self, client, protests):
        created = _create(client, protests)

        res = client.post("/risk-categories/search")

        assert res.status_code == 200
        assert [doc["id"] for doc in res.json()] == [created["id"]]

    def test_by_id(self, client, protests, exclusions):
        _create(client, protests)
        second = _create(client, exclusions)

        res = client.post("/risk-categories/search", json={"id": second["id"]})

        assert res.status_code == 200
        assert res.json() == [second]

    def test_subset_of_fields(self, client, protests, exclusions):
        first = _create(client, protests)
        _create(client, exclusions)

        res = client.post("/risk-categories/search", json={"language_code": "en", "name": "Protests"})

        assert res.json() == [first]

    def test_timestamp_from_a_response(self, client, protests, exclusions):
        first = _create(client, protests)
        _create(client, exclusions)

        res = client.post("/risk-categories/search", json={"created_at": first["created_at"]})

        assert [doc["id"] for doc in res.json()] == [first["id"]]

    def test_field_not_in_schema(self, client, protests):
        _create(client, protests)

        res = client.post("/risk-categories/search", json={"notInSchema": True})

        assert res.status_code == 200
        assert res.json() == []

    def test_object_value_matches_nothing(self, client, protests):
        _create(client, protests)

        res = client.post("/risk-categories/search", json={"name": {"a": 1}})

        assert res.status_code == 200
        assert res.json() == []

    def test_null_id_matches_nothing(self, client, protests):
        _create(client, protests)

        res = client.post("/risk-categories/search", json={"id": None})

        assert res.status_code == 200
        assert res.json() == []

    def test_invalid_id(self, client):
        res = client.post("/risk-categories/search", json={"id": "100"})

        assert res.status_code == 400
        assert res.text == "'100' is not a valid identifier."


class TestPatch:
    def test_patch(self, client, protests):
        created = _create(client, protests)

        res = client.patch(f"/risk-categories/{created['id']}", json={"risk_level": 3, "notInSchema": True})

        assert res.status_code == 200
        body = res.json()
        assert body["risk_level"] == 3
        assert body["created_at"] == created["created_at"]
        assert "notInSchema" not in body

    def test_enum_violation(self, client, protests):
        created = _create(client, protests)

        res = client.patch(f"/risk-categories/{created['id']}", json={"risk_level": 5})

        assert res.status_code == 500
        assert "not a valid enum value" in res.text

    def test_id_in_body(self, client, protests):
        created = _create(client, protests)

        res = client.patch(f"/risk-categories/{created['id']}", json={"id": UNASSIGNED_ID})

        assert res.status_code == 400
        assert res.text == "Request body cannot have id."

    def test_invalid_id(self, client):
        res = client.patch("/risk-categories/100", json={"risk_level": 3})

        assert res.status_code == 400
        assert res.text == "'100' is not a valid identifier."

    def test_missing_document(self, client):
        res = client.patch(f"/risk-categories/{UNASSIGNED_ID}", json={"risk_level": 3})

        assert res.status_code == 404
        assert res.content == b""


class TestSoftDelete:
    def test_soft_delete_twice(self, client, protests):
        created = _create(client, protests)

        first = client.delete(f"/risk-categories/{created['id']}")
        second = client.delete(f"/risk-categories/{created['id']}")

        assert first.status_code == 200 and second.status_code == 200
        assert first.json()["deleted"] is True and second.json()["deleted"] is True
        for field in ("id", "keywords", "language_code", "name", "risk_level", "updated_by_user_id", "created_at"):
            assert first.json()[field] == created[field] == second.json()[field]

    def test_deleted_document_is_still_readable(self, client, protests):
        created = _create(client, protests)
        client.delete(f"/risk-categories/{created['id']}")

        res = client.get(f"/risk-categories/{created['id']}")

        assert res.status_code == 200
        assert res.json()["deleted"] is True

    def test_uppercase_id(self, client, protests):
        created = _create(client, protests)

        res = client.delete(f"/risk-categories/{created['id'].upper()}")

        assert res.status_code == 200
        assert res.json()["id"] == created["id"]
        assert res.json()["deleted"] is True

    def test_invalid_id(self, client):
        res = client.delete("/risk-categories/100")

        assert res.status_code == 400

    def test_missing_document(self, client):
        res = client.delete(f"/risk-categories/{UNASSIGNED_ID}")

        assert res.status_code == 404
        assert res.content == b""


class TestErrorTranslation:
    def test_no_database_connection(self, client, no_engine):
        res = client.get(f"/risk-categories/{UNASSIGNED_ID}")

        assert res.status_code == 500
        assert res.text == "No database connection."

    def test_unexpected_error(self, client, monkeypatch):
        def broken(**kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr("risk_categories.api.fast_api.find_risk_categories", broken)

        res = client.post("/risk-categories/search", json={})

        assert res.status_code == 500
        assert res.text == "Internal server error."

    def test_database_error_text_is_not_sent(self, client, monkeypatch):
        def broken(**kwargs):
            raise RuntimeError("(sqlite3.ProgrammingError) [SQL: SELECT risk_category.id FROM risk_category]")

        monkeypatch.setattr("risk_categories.api.fast_api.get_risk_category_by_id", broken)

        res = client.get(f"/risk-categories/{UNASSIGNED_ID}")

        assert res.status_code == 500
        assert "SELECT" not in res.text

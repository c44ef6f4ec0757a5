"""
Integration tests for /users endpoints.
"""

from datetime import datetime

from biotrack.models.user import User
from biotrack.utils.password import verify_password


class TestCreateUser:
    def test_create_user(self, client, test_db, user_payload):
        response = client.post("/users", json=user_payload)

        assert response.status_code == 200
        assert response.json() == {"message": "User created successfully!"}
        user = test_db.query(User).one()
        assert user.email == "joao.silva@email.com"
        assert verify_password("Senha123", user.password)

    def test_create_user_blank_name(self, client, user_payload):
        user_payload["name"] = "   "

        response = client.post("/users", json=user_payload)

        assert response.status_code == 400
        assert response.json()["error"] == "validation_failed"

    def test_create_user_empty_email(self, client, user_payload):
        user_payload["email"] = ""

        response = client.post("/users", json=user_payload)

        assert response.status_code == 400

    def test_create_user_password_without_digit(self, client, user_payload):
        user_payload["password"] = "SenhaSemNumero"

        response = client.post("/users", json=user_payload)

        assert response.status_code == 400
        fields = [e["field"] for e in response.json()["errors"]]
        assert "password" in fields

    def test_create_user_missing_birth_date(self, client, user_payload):
        del user_payload["birthDate"]

        response = client.post("/users", json=user_payload)

        assert response.status_code == 400

    def test_create_user_password_over_72_bytes(self, client, test_db, user_payload):
        # 72 characters, 142 bytes in UTF-8
        user_payload["password"] = "é" * 70 + "a1"

        response = client.post("/users", json=user_payload)

        assert response.status_code == 400
        assert test_db.query(User).count() == 0


class TestReadUsers:
    def test_list_users(self, client, sample_user, other_user):
        response = client.get("/users")

        assert response.status_code == 200
        data = response.json()
        assert [u["name"] for u in data] == ["João Silva", "Maria Santos"]
        assert data[0]["zipCode"] == "12345-678"
        assert data[0]["birthDate"] == "1990-05-15"
        assert "password" not in data[0]

    def test_list_users_empty(self, client):
        response = client.get("/users")

        assert response.status_code == 404
        assert response.json()["detail"] == "No users found"

    def test_get_user(self, client, sample_user):
        response = client.get(f"/users/{sample_user.id}")

        assert response.status_code == 200
        assert response.json()["id"] == sample_user.id
        assert response.json()["email"] == "joao.silva@email.com"

    def test_get_user_not_found(self, client):
        response = client.get("/users/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found with ID: 999"

    def test_get_user_non_positive_id(self, client):
        response = client.get("/users/0")

        assert response.status_code == 400

    def test_users_without_measures(self, client, sample_user, other_user, create_measure):
        create_measure(sample_user.id)

        response = client.get("/users/without-measures")

        assert response.status_code == 200
        assert [u["email"] for u in response.json()] == ["maria.santos@email.com"]

    def test_users_without_measures_empty(self, client):
        response = client.get("/users/without-measures")

        assert response.status_code == 200
        assert response.json() == []


class TestUserMeasures:
    def test_all_measures_newest_first(self, client, sample_user, create_measure):
        create_measure(sample_user.id, measurement_date=datetime(2024, 1, 10, 10, 0))
        create_measure(sample_user.id, measurement_date=datetime(2024, 1, 20, 10, 0))

        response = client.get(f"/users/{sample_user.id}/all-measures")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "João Silva"
        assert [m["measurementDate"] for m in data["measures"]] == [
            "2024-01-20T10:00:00",
            "2024-01-10T10:00:00",
        ]

    def test_all_measures_none_recorded(self, client, sample_user):
        response = client.get(f"/users/{sample_user.id}/all-measures")

        assert response.status_code == 404

    def test_latest_measure(self, client, sample_user, create_measure):
        create_measure(sample_user.id, measurement_date=datetime(2024, 1, 10, 10, 0), weight_kg=75.0)
        create_measure(sample_user.id, measurement_date=datetime(2024, 1, 20, 10, 0), weight_kg=76.0)

        response = client.get(f"/users/{sample_user.id}/latest-measure")

        assert response.status_code == 200
        measures = response.json()["measures"]
        assert len(measures) == 1
        assert measures[0]["weightKg"] == 76.0
        assert measures[0]["userId"] == sample_user.id

    def test_latest_measure_none_recorded(self, client, sample_user):
        response = client.get(f"/users/{sample_user.id}/latest-measure")

        assert response.status_code == 200
        assert response.json()["measures"] == []

    def test_latest_measure_user_not_found(self, client):
        response = client.get("/users/999/latest-measure")

        assert response.status_code == 404


class TestUpdateUser:
    def test_update_user(self, client, test_db, sample_user, user_payload):
        user_payload.update(name="João Atualizado", zipCode="11111-222")

        response = client.put(f"/users/{sample_user.id}", json=user_payload)

        assert response.status_code == 200
        assert response.json() == {"message": "User updated successfully!"}
        body = client.get(f"/users/{sample_user.id}").json()
        assert body["name"] == "João Atualizado"
        assert body["zipCode"] == "11111-222"

    def test_update_user_requires_all_fields(self, client, sample_user):
        response = client.put(f"/users/{sample_user.id}", json={"name": "Só Nome"})

        assert response.status_code == 400

    def test_update_user_not_found(self, client, user_payload):
        response = client.put("/users/999", json=user_payload)

        assert response.status_code == 404

    def test_patch_user(self, client, sample_user):
        response = client.patch(
            f"/users/{sample_user.id}", json={"email": "novo.email@email.com"}
        )

        assert response.status_code == 200
        assert response.json() == {"message": "User partially updated successfully!"}
        body = client.get(f"/users/{sample_user.id}").json()
        assert body["email"] == "novo.email@email.com"
        assert body["name"] == "João Silva"
        assert body["birthDate"] == "1990-05-15"

    def test_patch_user_explicit_null_is_ignored(self, client, sample_user):
        response = client.patch(f"/users/{sample_user.id}", json={"name": None})

        assert response.status_code == 200
        assert client.get(f"/users/{sample_user.id}").json()["name"] == "João Silva"

    def test_patch_user_weak_password(self, client, sample_user):
        response = client.patch(f"/users/{sample_user.id}", json={"password": "abcdefgh"})

        assert response.status_code == 400

    def test_patch_user_password_over_72_bytes(self, client, sample_user):
        response = client.patch(
            f"/users/{sample_user.id}", json={"password": "é" * 70 + "a1"}
        )

        assert response.status_code == 400

    def test_patch_user_not_found(self, client):
        response = client.patch("/users/999", json={"name": "Ninguém"})

        assert response.status_code == 404


class TestDeleteUser:
    def test_delete_user(self, client, sample_user, create_measure):
        user_id = sample_user.id
        create_measure(user_id)

        response = client.delete(f"/users/{user_id}")

        assert response.status_code == 200
        assert response.json() == {"message": "User removed successfully!"}
        assert client.get(f"/users/{user_id}").status_code == 404
        assert client.get(f"/measures/{user_id}/measures").status_code == 404

    def test_delete_user_not_found(self, client):
        response = client.delete("/users/999")

        assert response.status_code == 404


class TestBmiEndpoints:
    def test_bmi_filter(self, client, create_user, create_measure):
        normal = create_user(name="Normal", email="normal@email.com")
        heavy = create_user(name="Heavy", email="heavy@email.com")
        create_user(name="Empty", email="empty@email.com")
        create_measure(normal.id, weight_kg=70.0, height_cm=175.0)
        create_measure(heavy.id, weight_kg=100.0, height_cm=175.0)

        response = client.get("/users/bmi-filter", params={"range": "Normal weight"})

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["name"] == "Normal"
        assert data[0]["bmi"] == 22.9
        assert data[0]["bmiRange"] == "Normal weight"
        assert data[0]["latestMeasure"]["weightKg"] == 70.0

    def test_bmi_filter_legacy_label(self, client, sample_user, create_measure):
        create_measure(sample_user.id, weight_kg=70.0, height_cm=175.0)

        response = client.get("/users/bmi-filter", params={"range": "Peso Normal"})

        assert response.status_code == 200
        assert [u["id"] for u in response.json()] == [sample_user.id]

    def test_bmi_filter_no_match(self, client, sample_user, create_measure):
        create_measure(sample_user.id, weight_kg=70.0, height_cm=175.0)

        response = client.get("/users/bmi-filter", params={"range": "Obese"})

        assert response.status_code == 200
        assert response.json() == []

    def test_bmi_filter_unknown_range(self, client):
        response = client.get("/users/bmi-filter", params={"range": "Skinny"})

        assert response.status_code == 400

    def test_bmi_filter_missing_range(self, client):
        response = client.get("/users/bmi-filter")

        assert response.status_code == 400

    def test_user_bmi(self, client, sample_user, create_measure):
        measure = create_measure(sample_user.id, weight_kg=90.0, height_cm=180.0)

        response = client.get(f"/users/{sample_user.id}/bmi")

        assert response.status_code == 200
        data = response.json()
        assert data["userId"] == sample_user.id
        assert data["measureId"] == measure.id
        assert data["bmi"] == 27.8
        assert data["bmiRange"] == "Overweight"

    def test_user_bmi_without_measures(self, client, sample_user):
        response = client.get(f"/users/{sample_user.id}/bmi")

        assert response.status_code == 404

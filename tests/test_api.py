import pytest
from fastapi.testclient import TestClient

from diario_carga.main import create_app


def _register(client, name="Ana", email="ana@x.com", secret="s1"):
    return client.post("/api/cadastro", json={"name": name, "email": email, "secret": secret})


def test_register_login_scenario(client):
    response = _register(client)
    assert response.status_code == 200
    assert response.json()["ok"] is True

    response = client.post("/api/login", json={"email": "ana@x.com", "secret": "s1"})
    assert response.status_code == 200
    assert response.json()["ok"] is True
    assert response.json()["user"] == {"name": "Ana", "email": "ana@x.com"}

    response = client.post("/api/login", json={"email": "ana@x.com", "secret": "nope"})
    assert response.status_code == 401
    assert response.json()["ok"] is False
    assert response.json()["error"] == "invalid_credentials"


def test_duplicate_registration_is_409(client):
    assert _register(client).status_code == 200

    response = _register(client, name="Ana 2")

    assert response.status_code == 409
    assert response.json() == {"ok": False, "error": "duplicate_entry", "message": "Email já existe."}


def test_missing_fields_are_400(client):
    response = client.post("/api/cadastro", json={"email": "ana@x.com"})

    assert response.status_code == 400
    assert response.json()["error"] == "invalid_input"


def test_original_front_end_field_names_are_accepted(client):
    assert client.post("/api/cadastro", json={"nome": "Ana", "email": "ana@x.com", "senha": "s1"}).status_code == 200
    assert client.post("/api/login", json={"email": "ana@x.com", "senha": "s1"}).status_code == 200


def test_routines_by_email_without_session(client):
    _register(client)
    _register(client, name="Bia", email="bia@x.com")

    created = client.post("/api/fichas", json={"user_email": "ana@x.com", "name": "Treino A", "weekday_label": "Segunda"})
    assert created.status_code == 200
    routine_id = created.json()["id"]
    client.post("/api/fichas", json={"user_email": "bia@x.com", "nome": "Treino B", "dia": "Terça"})

    listed = client.get("/api/fichas", params={"email": "ana@x.com"}).json()

    assert listed == [{"id": routine_id, "name": "Treino A", "weekday_label": "Segunda"}]


def test_unresolved_identity_reads_empty_and_writes_404(client):
    assert client.get("/api/fichas").json() == []
    assert client.get("/api/fichas", params={"email": "a@x.com"}).json() == []
    assert client.get("/api/peso", params={"email": "a@x.com"}).json() == []
    assert client.get("/api/historico").json() == []

    response = client.post("/api/fichas", json={"user_email": "a@x.com", "name": "Treino A"})
    assert response.status_code == 404
    assert response.json()["error"] == "not_found"
    response = client.post("/api/peso", json={"user_email": "a@x.com", "weight": 80, "date": "2024-05-01"})
    assert response.status_code == 404


def test_session_identity_wins_over_email(client):
    _register(client)
    _register(client, name="Bia", email="bia@x.com")
    client.post("/api/fichas", json={"user_email": "bia@x.com", "name": "Treino da Bia"})
    client.post("/api/login", json={"email": "ana@x.com", "secret": "s1"})

    client.post("/api/fichas", json={"name": "Treino da Ana", "weekday_label": "Segunda"})

    names = [r["name"] for r in client.get("/api/fichas", params={"email": "bia@x.com"}).json()]
    assert names == ["Treino da Ana"]

    assert client.get("/api/logout").json() == {"ok": True}
    assert client.get("/api/fichas").json() == []
    assert client.post("/api/logout").json() == {"ok": True}


def test_routine_exercise_lifecycle(client):
    _register(client)
    routine_id = client.post("/api/fichas", json={"user_email": "ana@x.com", "name": "Treino A"}).json()["id"]

    for name, order in (("C", 3), ("A", 1), ("B", 2)):
        response = client.post("/api/exercicios", json={"ficha_id": routine_id, "name": name, "group": "Peito", "order_index": order})
        assert response.status_code == 200
    listed = client.get("/api/exercicios", params={"ficha_id": routine_id}).json()
    assert [item["exercise_name"] for item in listed] == ["A", "B", "C"]

    target = listed[0]["id"]
    for _ in range(2):
        response = client.put(f"/api/exercicios/{target}", json={"notes": "pegada fechada", "is_superset": True})
        assert response.json() == {"ok": True}
    updated = client.get("/api/exercicios", params={"ficha_id": routine_id}).json()
    assert len(updated) == 3
    assert updated[0]["setup_notes"] == "pegada fechada"
    assert updated[0]["is_superset"] is True
    assert updated[0]["muscle_group"] == "Peito"

    assert client.delete(f"/api/exercicios/{target}").json() == {"ok": True}
    assert client.delete(f"/api/exercicios/{target}").status_code == 404
    assert client.put("/api/exercicios/9999", json={"notes": None, "is_superset": False}).status_code == 404


def test_create_exercise_for_missing_routine(client):
    response = client.post("/api/exercicios", json={"ficha_id": 77, "name": "Supino", "group": "Peito"})

    assert response.status_code == 404


def test_history_and_cascading_routine_delete(client):
    _register(client)
    routine_id = client.post("/api/fichas", json={"user_email": "ana@x.com", "name": "Treino A"}).json()["id"]
    exercise_id = client.post("/api/exercicios", json={"ficha_id": routine_id, "name": "Supino", "group": "Peito"}).json()["id"]

    for day, weight in (("2024-05-01", 60), ("2024-05-08", 62.5)):
        response = client.post(
            "/api/historico",
            json={"routine_exercise_id": exercise_id, "weight": weight, "reps": 10, "type": "working", "date": day},
        )
        assert response.status_code == 200

    per_exercise = client.get("/api/historico", params={"exercicio_id": exercise_id}).json()
    assert [entry["recorded_at"] for entry in per_exercise] == ["2024-05-08", "2024-05-01"]
    assert per_exercise[0]["weight"] == 62.5

    per_user = client.get("/api/historico", params={"email": "ana@x.com"}).json()
    assert [entry["exercise_name"] for entry in per_user] == ["Supino", "Supino"]

    assert client.delete(f"/api/fichas/{routine_id}").json() == {"ok": True}
    assert client.get("/api/historico", params={"exercicio_id": exercise_id}).json() == []
    assert client.get("/api/historico", params={"email": "ana@x.com"}).json() == []
    assert client.delete(f"/api/fichas/{routine_id}").status_code == 404


def test_history_for_missing_exercise_is_404(client):
    response = client.post(
        "/api/historico",
        json={"routine_exercise_id": 5, "weight": 60, "reps": 10, "type": "working", "date": "2024-05-01"},
    )

    assert response.status_code == 404


def test_weight_log(client):
    _register(client)
    for day, weight in (("2024-05-10", 81.4), ("2024-05-01", 82)):
        assert client.post("/api/peso", json={"user_email": "ana@x.com", "weight": weight, "date": day}).status_code == 200

    assert client.get("/api/peso", params={"email": "ana@x.com"}).json() == [
        {"weight": 82.0, "date": "2024-05-01"},
        {"weight": 81.4, "date": "2024-05-10"},
    ]


def test_library_is_public(client, database):
    from diario_carga.services.library import LibraryItem, seed_library

    database.run_sync(lambda s: seed_library(s, [LibraryItem(name="Stiff", muscle_group="Posterior", equipment="Barra")]))

    assert client.get("/api/biblioteca").json() == [
        {"id": 1, "name": "Stiff", "muscle_group": "Posterior", "equipment": "Barra", "description": None}
    ]


def test_foreign_routine_cannot_be_deleted_from_another_session(client):
    _register(client)
    _register(client, name="Bia", email="bia@x.com")
    routine_id = client.post("/api/fichas", json={"user_email": "bia@x.com", "name": "Treino da Bia"}).json()["id"]
    client.post("/api/login", json={"email": "ana@x.com", "secret": "s1"})

    assert client.delete(f"/api/fichas/{routine_id}").status_code == 404
    client.get("/api/logout")
    assert [r["id"] for r in client.get("/api/fichas", params={"email": "bia@x.com"}).json()] == [routine_id]


def test_legacy_response_format(settings, database):
    legacy = settings.model_copy(update={"response_format": "legacy"})
    with TestClient(create_app(legacy, database)) as client:
        client.post("/api/cadastro", json={"nome": "Ana", "email": "ana@x.com", "senha": "s1"})
        login = client.post("/api/login", json={"email": "ana@x.com", "senha": "s1"}).json()
        assert login["success"] is True
        assert login["user"] == {"nome": "Ana", "email": "ana@x.com"}

        routine_id = client.post("/api/fichas", json={"user_email": "ana@x.com", "nome": "Treino A", "dia": "Segunda"}).json()["id"]
        assert client.get("/api/fichas").json() == [
            {"id": routine_id, "nome": "Treino A", "dia_semana": "Segunda", "dia": "Segunda"}
        ]

        client.post("/api/exercicios", json={"ficha_id": routine_id, "nome": "Supino", "grupo": "Peito"})
        exercise = client.get("/api/exercicios", params={"ficha_id": routine_id}).json()[0]
        assert exercise["nome_exercicio"] == "Supino"
        assert exercise["is_biset"] is False

        client.post(
            "/api/historico",
            json={"ficha_exercicio_id": exercise["id"], "peso": 60, "repeticoes": 10, "tipo": "warmup", "data_registro": "2024-05-01"},
        )
        entry = client.get("/api/historico", params={"email": "ana@x.com"}).json()[0]
        assert entry["tipo_serie"] == "warmup"
        assert entry["nome_exercicio"] == "Supino"

        failed = client.post("/api/login", json={"email": "ana@x.com", "senha": "x"})
        assert failed.status_code == 401
        assert failed.json()["success"] is False


def test_unexpected_errors_hide_details(settings, database, monkeypatch):
    from diario_carga.services import library

    def boom(session):
        raise RuntimeError("secret internals")

    monkeypatch.setattr(library, "list_library", boom)
    with TestClient(create_app(settings, database), raise_server_exceptions=False) as client:
        response = client.get("/api/biblioteca")

    assert response.status_code == 500
    assert "secret internals" not in response.text
    assert response.json()["ok"] is False


def test_foreign_exercise_history_is_scoped_to_the_session(client):
    _register(client)
    _register(client, name="Bia", email="bia@x.com")
    routine_id = client.post("/api/fichas", json={"user_email": "bia@x.com", "name": "Treino da Bia"}).json()["id"]
    exercise_id = client.post("/api/exercicios", json={"ficha_id": routine_id, "name": "Remada", "group": "Costas"}).json()["id"]
    client.post(
        "/api/historico",
        json={"routine_exercise_id": exercise_id, "weight": 70, "reps": 8, "type": "working", "date": "2024-05-01"},
    )
    client.post("/api/login", json={"email": "ana@x.com", "secret": "s1"})

    assert client.get("/api/exercicios", params={"ficha_id": routine_id}).json() == []
    assert client.get("/api/historico", params={"exercicio_id": exercise_id}).json() == []
    response = client.post("/api/exercicios", json={"ficha_id": routine_id, "name": "Supino", "group": "Peito"})
    assert response.status_code == 404
    response = client.post(
        "/api/historico",
        json={"routine_exercise_id": exercise_id, "weight": 90, "reps": 5, "type": "working", "date": "2024-05-02"},
    )
    assert response.status_code == 404

    client.get("/api/logout")
    bia_history = client.get("/api/historico", params={"email": "bia@x.com"}).json()
    assert [entry["weight"] for entry in bia_history] == [70.0]
    assert len(client.get("/api/exercicios", params={"ficha_id": routine_id}).json()) == 1


def test_free_form_set_type_round_trips(client):
    _register(client)
    routine_id = client.post("/api/fichas", json={"user_email": "ana@x.com", "name": "Treino A"}).json()["id"]
    exercise_id = client.post("/api/exercicios", json={"ficha_id": routine_id, "name": "Supino"}).json()["id"]

    for day, label in (("2024-05-01", "Drop Set"), ("2024-05-02", "falha"), ("2024-05-03", "aquecimento")):
        response = client.post(
            "/api/historico",
            json={"routine_exercise_id": exercise_id, "weight": 50, "reps": 10, "type": label, "date": day},
        )
        assert response.status_code == 200

    entries = client.get("/api/historico", params={"exercicio_id": exercise_id}).json()
    assert [entry["set_type"] for entry in entries] == ["warmup", "falha", "drop_set"]

    response = client.post(
        "/api/historico",
        json={"routine_exercise_id": exercise_id, "weight": 50, "reps": 10, "type": "", "date": "2024-05-04"},
    )
    assert response.status_code == 400


def test_deleting_exercise_clears_its_history(client):
    _register(client)
    routine_id = client.post("/api/fichas", json={"user_email": "ana@x.com", "name": "Treino A"}).json()["id"]
    exercise_id = client.post("/api/exercicios", json={"ficha_id": routine_id, "name": "Supino"}).json()["id"]
    client.post(
        "/api/historico",
        json={"routine_exercise_id": exercise_id, "weight": 60, "reps": 10, "date": "2024-05-01"},
    )
    assert len(client.get("/api/historico", params={"exercicio_id": exercise_id}).json()) == 1

    assert client.delete(f"/api/exercicios/{exercise_id}").json() == {"ok": True}

    assert client.get("/api/historico", params={"exercicio_id": exercise_id}).json() == []
    assert client.get("/api/historico", params={"email": "ana@x.com"}).json() == []

"""HTTP-level tests for the product API.

The app is built through create_app() with an in-memory repository injected,
so no PostgreSQL server is needed.
"""

from unittest.mock import patch

import psycopg2

from services.exceptions import DatabaseUnavailableError


class TestHealthAndDocs:

    def test_root_returns_plain_text(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "API Produto rodando"

    def test_swagger_page_is_served(self, client):
        response = client.get("/swagger")
        assert response.status_code == 200
        assert "swagger-ui" in response.text.lower()

    def test_openapi_lists_product_routes(self, client):
        paths = client.get("/openapi.json").json()["paths"]
        assert set(paths["/produtos"]) == {"get", "post"}
        assert set(paths["/produtos/{product_id}"]) == {"get", "put", "delete"}
        assert "post" in paths["/init-db"]


class TestInitDb:

    def test_init_db_runs_schema_initializer(self, client, database):
        with patch("handlers.schema.initialize_schema") as init:
            response = client.post("/init-db")

        assert response.status_code == 200
        assert response.text == "Banco de dados e tabela criados com sucesso."
        init.assert_called_once_with(database)

    def test_init_db_failure_returns_500_with_message(self, client):
        error = psycopg2.OperationalError("permission denied to create database")
        with patch("handlers.schema.initialize_schema", side_effect=error):
            response = client.post("/init-db")

        assert response.status_code == 500
        assert response.json() == {"error": "permission denied to create database"}


class TestProductCrud:

    def test_full_lifecycle(self, client):
        created = client.post("/produtos", json={"Nome": "Caneta", "Descricao": "Azul", "Preco": 2.50})
        assert created.status_code == 201
        assert created.json() == {"id": 1}

        fetched = client.get("/produtos/1")
        assert fetched.status_code == 200
        assert fetched.json() == {"Id": 1, "Nome": "Caneta", "Descricao": "Azul", "Preco": "2.50"}

        deleted = client.delete("/produtos/1")
        assert deleted.status_code == 200
        assert deleted.json() == {"message": "Produto deletado com sucesso"}

        gone = client.get("/produtos/1")
        assert gone.status_code == 404
        assert gone.json() == {"error": "Produto não encontrado"}

    def test_list_empty_then_n_entries(self, client):
        assert client.get("/produtos").json() == []

        for i in range(3):
            client.post("/produtos", json={"Nome": f"Item {i}", "Descricao": "x", "Preco": i})

        body = client.get("/produtos").json()
        assert len(body) == 3
        assert [p["Id"] for p in body] == [1, 2, 3]

    def test_ids_are_unique_and_positive(self, client):
        ids = [
            client.post("/produtos", json={"Nome": "A", "Descricao": "B", "Preco": 1}).json()["id"]
            for _ in range(5)
        ]
        assert len(set(ids)) == 5
        assert all(i > 0 for i in ids)

    def test_update_overwrites_all_fields(self, client):
        client.post("/produtos", json={"Nome": "Caneta", "Descricao": "Azul", "Preco": 2.5})

        response = client.put("/produtos/1", json={"Nome": "Lápis", "Descricao": "Preto", "Preco": "1.10"})

        assert response.status_code == 200
        assert response.json() == {"message": "Produto atualizado com sucesso"}
        assert client.get("/produtos/1").json() == {
            "Id": 1, "Nome": "Lápis", "Descricao": "Preto", "Preco": "1.10",
        }

    def test_update_missing_product_returns_404(self, client, repository):
        response = client.put("/produtos/99", json={"Nome": "A", "Descricao": "B", "Preco": 1})
        assert response.status_code == 404
        assert repository.rows == {}

    def test_second_delete_returns_404(self, client):
        client.post("/produtos", json={"Nome": "A", "Descricao": "B", "Preco": 1})
        assert client.delete("/produtos/1").status_code == 200
        assert client.delete("/produtos/1").status_code == 404


class TestValidation:

    def test_missing_field_returns_400_and_persists_nothing(self, client, repository):
        response = client.post("/produtos", json={"Nome": "Caneta", "Preco": 2.5})

        assert response.status_code == 400
        assert "Descricao" in response.json()["error"]
        assert "add" not in repository.calls

    def test_empty_nome_is_rejected(self, client, repository):
        response = client.post("/produtos", json={"Nome": "", "Descricao": "Azul", "Preco": 2.5})
        assert response.status_code == 400
        assert repository.rows == {}

    def test_null_preco_is_rejected(self, client):
        response = client.post("/produtos", json={"Nome": "A", "Descricao": "B", "Preco": None})
        assert response.status_code == 400
        assert "Preco" in response.json()["error"]

    def test_zero_preco_is_accepted(self, client):
        response = client.post("/produtos", json={"Nome": "Brinde", "Descricao": "Grátis", "Preco": 0})
        assert response.status_code == 201

    def test_update_with_missing_field_leaves_row_unchanged(self, client, repository):
        client.post("/produtos", json={"Nome": "Caneta", "Descricao": "Azul", "Preco": 2.5})

        response = client.put("/produtos/1", json={"Nome": "Lápis", "Descricao": "  "})

        assert response.status_code == 400
        assert repository.rows[1].nome == "Caneta"
        assert "update" not in repository.calls

    def test_non_numeric_preco_returns_400(self, client):
        response = client.post("/produtos", json={"Nome": "A", "Descricao": "B", "Preco": "caro"})
        assert response.status_code == 400
        assert "error" in response.json()

    def test_lowercase_field_names_are_not_accepted(self, client, repository):
        response = client.post("/produtos", json={"nome": "Caneta", "descricao": "Azul", "preco": 2.5})

        assert response.status_code == 400
        assert "Nome" in response.json()["error"]
        assert repository.rows == {}

    def test_missing_body_returns_400(self, client):
        response = client.post("/produtos")
        assert response.status_code == 400

    def test_non_integer_id_returns_400(self, client):
        response = client.get("/produtos/abc")
        assert response.status_code == 400
        assert "product_id" in response.json()["error"]


class TestDatabaseFailures:

    def test_database_error_is_passed_through_as_500(self, client, repository):
        error = psycopg2.OperationalError("could not connect to server")
        with patch.object(repository, "list_all", side_effect=error):
            response = client.get("/produtos")

        assert response.status_code == 500
        assert response.json() == {"error": "could not connect to server"}

    def test_pool_wait_timeout_returns_503(self, client, repository):
        error = DatabaseUnavailableError("Nenhuma conexão disponível após 0.05s")
        with patch.object(repository, "get_by_id", side_effect=error):
            response = client.get("/produtos/1")

        assert response.status_code == 503
        assert response.json() == {"error": "Nenhuma conexão disponível após 0.05s"}

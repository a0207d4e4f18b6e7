"""
Tests for Livros API Endpoints

Tests for /livros endpoints: the availability default and the foreign
keys to autor and categoria.
"""

from fastapi import status

from biblioteca.models import Livro
from tests.helpers import count_rows


class TestListLivros:
    """Tests for GET /livros endpoint."""

    def test_list_livros_empty(self, client):
        response = client.get("/livros")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_livros_with_data(self, client, sample_livro):
        response = client.get("/livros")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        assert data[0]["titulo"] == "Dom Casmurro"
        assert data[0]["disponivel"] is True


class TestGetLivro:
    """Tests for GET /livros/{id} endpoint."""

    def test_get_livro_success(self, client, sample_livro):
        response = client.get(f"/livros/{sample_livro['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id": sample_livro["id"],
            "titulo": "Dom Casmurro",
            "ano_publicacao": 1899,
            "fk_autor_id": sample_livro["fk_autor_id"],
            "fk_categoria_id": sample_livro["fk_categoria_id"],
            "disponivel": True,
        }

    def test_get_livro_not_found(self, client):
        response = client.get("/livros/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.text == "Livro não encontrado"


class TestCreateLivro:
    """Tests for POST /livros endpoint."""

    def test_create_livro_defaults_to_available(self, client, sample_autor, sample_categoria):
        """Leaving disponivel out lets the database default (true) apply."""
        payload = {
            "titulo": "Memórias Póstumas de Brás Cubas",
            "ano_publicacao": 1881,
            "fk_autor_id": sample_autor["id"],
            "fk_categoria_id": sample_categoria["id"],
        }

        response = client.post("/livros", json=payload)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["disponivel"] is True
        assert client.get(f"/livros/{data['id']}").json() == {
            "id": data["id"],
            "disponivel": True,
            **payload,
        }

    def test_create_livro_unavailable(self, client, sample_autor, sample_categoria):
        response = client.post(
            "/livros",
            json={
                "titulo": "Quincas Borba",
                "fk_autor_id": sample_autor["id"],
                "fk_categoria_id": sample_categoria["id"],
                "disponivel": False,
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["disponivel"] is False

    def test_create_livro_unknown_autor(self, client, database, sample_categoria):
        """A missing author is a store failure: generic 500, no row created."""
        response = client.post(
            "/livros",
            json={
                "titulo": "Livro Fantasma",
                "fk_autor_id": 99999,
                "fk_categoria_id": sample_categoria["id"],
            },
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == "Erro ao criar livro"
        assert count_rows(database, Livro) == 0
        assert client.get("/livros").json() == []


class TestUpdateLivro:
    """Tests for PUT /livros/{id} endpoint."""

    def test_update_livro(self, client, sample_livro):
        payload = {
            "titulo": "Dom Casmurro (edição comentada)",
            "ano_publicacao": 2008,
            "fk_autor_id": sample_livro["fk_autor_id"],
            "fk_categoria_id": sample_livro["fk_categoria_id"],
            "disponivel": False,
        }

        response = client.put(f"/livros/{sample_livro['id']}", json=payload)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"id": sample_livro["id"], **payload}

    def test_update_livro_without_disponivel_writes_null(self, client, sample_livro):
        """Full replace: disponivel is not preserved when omitted."""
        response = client.put(
            f"/livros/{sample_livro['id']}",
            json={
                "titulo": "Dom Casmurro",
                "fk_autor_id": sample_livro["fk_autor_id"],
                "fk_categoria_id": sample_livro["fk_categoria_id"],
            },
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["disponivel"] is None
        assert data["ano_publicacao"] is None

    def test_update_livro_unknown_categoria(self, client, sample_livro):
        response = client.put(
            f"/livros/{sample_livro['id']}",
            json={
                "titulo": "Dom Casmurro",
                "fk_autor_id": sample_livro["fk_autor_id"],
                "fk_categoria_id": 99999,
            },
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == "Erro ao atualizar livro"
        assert client.get(f"/livros/{sample_livro['id']}").json()["fk_categoria_id"] == (
            sample_livro["fk_categoria_id"]
        )

    def test_update_livro_not_found(self, client):
        response = client.put("/livros/99999", json={"titulo": "Nada"})

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.text == "Livro não encontrado"


class TestDeleteLivro:
    """Tests for DELETE /livros/{id} endpoint."""

    def test_delete_livro_success(self, client, sample_livro):
        response = client.delete(f"/livros/{sample_livro['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.text == "Livro deletado com sucesso"
        assert client.get(f"/livros/{sample_livro['id']}").status_code == status.HTTP_404_NOT_FOUND

    def test_delete_livro_not_found(self, client):
        response = client.delete("/livros/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.text == "Livro não encontrado"

    def test_delete_livro_on_loan(self, client, sample_emprestimo):
        response = client.delete(f"/livros/{sample_emprestimo['fk_livro_id']}")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.text == "Erro ao deletar livro"

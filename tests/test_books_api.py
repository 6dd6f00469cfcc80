"""
Tests for the book catalog API endpoints.
"""


def _book_payload(**overrides):
    payload = {
        "title": "The Alchemist",
        "category": "Inspirational",
        "description": "A shepherd embarks on a magical journey.",
        "oldPrice": 19,
        "newPrice": 14,
        "coverImage": "/uploads/placeholder.webp",
    }
    payload.update(overrides)
    return payload


class TestBooksApi:

    def test_create_and_get_book(self, client, admin_headers):
        response = client.post("/api/books/create-book", json=_book_payload(), headers=admin_headers)

        assert response.status_code == 201
        created = response.json()
        assert created["title"] == "The Alchemist"
        assert created["newPrice"] == 14
        assert created["trending"] is False

        fetched = client.get(f"/api/books/{created['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["coverImage"] == "/uploads/placeholder.webp"

    def test_create_requires_admin(self, client, user_headers):
        assert client.post("/api/books/create-book", json=_book_payload()).status_code == 401
        response = client.post("/api/books/create-book", json=_book_payload(), headers=user_headers)
        assert response.status_code == 403

    def test_negative_price_rejected(self, client, admin_headers):
        response = client.post(
            "/api/books/create-book", json=_book_payload(newPrice=-1), headers=admin_headers
        )
        assert response.status_code == 422

    def test_list_books(self, client, add_book):
        add_book(title="1984")
        add_book(title="Pride and Prejudice")

        response = client.get("/api/books")

        assert response.status_code == 200
        assert {b["title"] for b in response.json()} == {"1984", "Pride and Prejudice"}

    def test_update_only_given_fields(self, client, add_book, admin_headers):
        book_id = add_book(title="1984", new_price=13, old_price=18)

        response = client.put(f"/api/books/edit/{book_id}", json={"newPrice": 11}, headers=admin_headers)

        assert response.status_code == 200
        assert response.json()["newPrice"] == 11
        assert response.json()["oldPrice"] == 18
        assert response.json()["title"] == "1984"

    def test_update_unknown_book(self, client, admin_headers):
        response = client.put("/api/books/edit/9999", json={"newPrice": 11}, headers=admin_headers)
        assert response.status_code == 404

    def test_delete_book(self, client, add_book, admin_headers):
        book_id = add_book()

        assert client.delete(f"/api/books/{book_id}", headers=admin_headers).status_code == 204
        assert client.get(f"/api/books/{book_id}").status_code == 404
        assert client.delete(f"/api/books/{book_id}", headers=admin_headers).status_code == 404

    def test_get_unknown_book(self, client):
        response = client.get("/api/books/9999")
        assert response.status_code == 404
        assert "not found" in response.json()["detail"].lower()

"""
Web tests for movie pages and mutations.
"""

from cinelog.database import crud


class TestMoviePages:
    """Tests for GET /movies, GET /new-movie, GET /movies/{movie_id}."""

    def test_list_empty(self, client):
        r = client.get("/movies")
        assert r.status_code == 200
        assert "No movies yet." in r.text

    def test_list_shows_movies(self, client, movie_id):
        r = client.get("/movies")
        assert r.status_code == 200
        assert f'href="/movies/{movie_id}"' in r.text
        assert "Heat" in r.text

    def test_new_movie_form(self, client):
        r = client.get("/new-movie")
        assert r.status_code == 200
        assert 'action="/movies"' in r.text

    def test_show_movie_with_owner(self, client, movie_id):
        r = client.get(f"/movies/{movie_id}")
        assert r.status_code == 200
        assert "Heat (1995)" in r.text
        assert "Added by: alice" in r.text

    def test_show_movie_not_found(self, client):
        r = client.get("/movies/999999")
        assert r.status_code == 404
        assert "Movie not found" in r.text


class TestCreateMovie:
    """Tests for POST /movies."""

    def test_requires_sign_in(self, client, db_manager):
        r = client.post(
            "/movies",
            data={"name": "Alien", "year": "1979", "rating": "8.5"},
            follow_redirects=False,
        )
        assert r.status_code == 303
        assert r.headers["location"] == "/auth/sign-in"

        with db_manager.session_scope() as session:
            assert crud.get_movie_count(session) == 0

    def test_create_sets_owner(self, signed_in_client, alice_id, db_manager):
        r = signed_in_client.post(
            "/movies",
            data={"name": "Alien", "year": "1979", "rating": "8.5"},
            follow_redirects=False,
        )
        assert r.status_code == 303
        assert r.headers["location"] == "/movies"

        with db_manager.session_scope() as session:
            movies = crud.get_movies(session)
            assert len(movies) == 1
            assert movies[0].name == "Alien"
            assert movies[0].year == 1979
            assert movies[0].created_by == alice_id

    def test_flash_message_shown_once(self, signed_in_client):
        r = signed_in_client.post("/movies", data={"name": "Alien", "year": "1979", "rating": "8.5"})
        assert r.status_code == 200
        assert "Movie successfully created." in r.text

        again = signed_in_client.get("/movies")
        assert "Movie successfully created." not in again.text

    def test_out_of_range_year_rejected(self, signed_in_client, db_manager):
        r = signed_in_client.post(
            "/movies",
            data={"name": "Alien", "year": "99999999999999999999", "rating": "8.5"},
            follow_redirects=False,
        )
        assert r.status_code == 303
        assert r.headers["location"] == "/movies"

        with db_manager.session_scope() as session:
            assert crud.get_movie_count(session) == 0

    def test_infinite_rating_rejected(self, signed_in_client, db_manager):
        r = signed_in_client.post("/movies", data={"name": "Alien", "year": "1979", "rating": "inf"})
        assert r.status_code == 200
        assert "finite number" in r.text

        with db_manager.session_scope() as session:
            assert crud.get_movie_count(session) == 0

    def test_invalid_input_flashes_error(self, signed_in_client, db_manager):
        r = signed_in_client.post("/movies", data={"name": "Alien", "year": "soon", "rating": "8.5"})
        assert r.status_code == 200
        assert "valid integer" in r.text

        with db_manager.session_scope() as session:
            assert crud.get_movie_count(session) == 0


class TestUpdateMovie:
    """Tests for PUT /movies/{movie_id}."""

    def test_requires_sign_in(self, client, db_manager):
        with db_manager.session_scope() as session:
            movie_id = crud.create_movie(session, name="Heat", year=1995, rating=8.3).movie_id

        r = client.put(f"/movies/{movie_id}", json={"rating": 1.0}, follow_redirects=False)
        assert r.status_code == 303
        assert r.headers["location"] == "/auth/sign-in"

        with db_manager.session_scope() as session:
            assert crud.get_movie(session, movie_id).rating == 8.3

    def test_partial_update(self, signed_in_client, movie_id):
        r = signed_in_client.put(f"/movies/{movie_id}", json={"rating": 9.5})
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "updated"
        assert data["movie"]["movie_id"] == movie_id
        assert data["movie"]["rating"] == 9.5
        assert data["movie"]["name"] == "Heat"

    def test_update_via_form_override(self, signed_in_client, movie_id):
        r = signed_in_client.post(
            f"/movies/{movie_id}?_method=PUT",
            data={"name": "Heat (Director's Cut)", "year": "", "rating": ""},
        )
        assert r.status_code == 200
        data = r.json()
        assert data["movie"]["name"] == "Heat (Director's Cut)"
        assert data["movie"]["year"] == 1995

    def test_invalid_body(self, signed_in_client, movie_id):
        r = signed_in_client.put(f"/movies/{movie_id}", json={"year": "next year"})
        assert r.status_code == 422
        assert r.json()["status"] == "invalid"

    def test_out_of_range_year(self, signed_in_client, movie_id):
        r = signed_in_client.put(f"/movies/{movie_id}", json={"year": 10000})
        assert r.status_code == 422
        assert r.json()["status"] == "invalid"

    def test_infinite_rating(self, signed_in_client, movie_id, db_manager):
        r = signed_in_client.put(f"/movies/{movie_id}", json={"rating": "Infinity"})
        assert r.status_code == 422
        assert r.json()["status"] == "invalid"

        with db_manager.session_scope() as session:
            assert crud.get_movie(session, movie_id).rating == 8.3

    def test_body_not_utf8(self, signed_in_client, movie_id):
        r = signed_in_client.put(
            f"/movies/{movie_id}",
            content=b'{"name": "\xff"}',
            headers={"content-type": "application/json"},
        )
        assert r.status_code == 422
        assert r.json()["status"] == "invalid"

    def test_keeps_pending_flash_message(self, signed_in_client, movie_id):
        signed_in_client.post(
            "/movies",
            data={"name": "Alien", "year": "1979", "rating": "8.5"},
            follow_redirects=False,
        )
        signed_in_client.put(f"/movies/{movie_id}", json={"rating": 9.0})
        signed_in_client.delete("/movies/424242")

        r = signed_in_client.get("/movies")
        assert "Movie successfully created." in r.text

    def test_not_found(self, signed_in_client):
        r = signed_in_client.put("/movies/999999", json={"rating": 5})
        assert r.status_code == 404
        assert r.json() == {"status": "not_found", "movie": None, "detail": "Movie not found"}


class TestDeleteMovie:
    """Tests for DELETE /movies/{movie_id}."""

    def test_requires_sign_in(self, client, db_manager):
        with db_manager.session_scope() as session:
            movie_id = crud.create_movie(session, name="Heat", year=1995, rating=8.3).movie_id

        r = client.delete(f"/movies/{movie_id}", follow_redirects=False)
        assert r.status_code == 303

        with db_manager.session_scope() as session:
            assert crud.get_movie(session, movie_id) is not None

    def test_delete(self, signed_in_client, movie_id, db_manager):
        r = signed_in_client.delete(f"/movies/{movie_id}")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "deleted"
        assert data["movie"]["name"] == "Heat"

        with db_manager.session_scope() as session:
            assert crud.get_movie(session, movie_id) is None

    def test_delete_via_form_override(self, signed_in_client, movie_id):
        r = signed_in_client.post(f"/movies/{movie_id}?_method=DELETE")
        assert r.status_code == 200
        assert r.json()["status"] == "deleted"

    def test_delete_missing_movie_keeps_serving(self, signed_in_client):
        r = signed_in_client.delete("/movies/424242")
        assert r.status_code == 404
        assert r.json()["status"] == "not_found"

        assert signed_in_client.get("/movies").status_code == 200

    def test_method_override_ignored_for_get(self, signed_in_client, movie_id, db_manager):
        r = signed_in_client.get(f"/movies/{movie_id}?_method=DELETE")
        assert r.status_code == 200

        with db_manager.session_scope() as session:
            assert crud.get_movie(session, movie_id) is not None

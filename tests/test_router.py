import pytest

from gotismadex import router
from gotismadex.config import Config


@pytest.fixture
def config(monkeypatch):
    monkeypatch.setenv("TOKEN_API_TEST", "token")
    return Config(usersapi=["alice"], tokensapi=["TOKEN_API_TEST"], portapi="8080")


@pytest.fixture
def app(config):
    application = router.initialize_router(config, "/conf/swagger.yaml")

    def ping():
        return "pong"

    router.get_secure_router().add_route("/ping", ping)
    return application


def test_populate_and_authenticate(monkeypatch):
    monkeypatch.setenv("TOKEN_API_TEST", "token")
    middleware = router.AuthenticationMiddleware()
    middleware.populate(["alice"], ["TOKEN_API_TEST"])
    assert middleware.token_users == {"token": "alice"}
    assert middleware.authenticate("token") == "alice"
    assert middleware.authenticate("other") is None


def test_populate_needs_tokens():
    middleware = router.AuthenticationMiddleware()
    with pytest.raises(ValueError):
        middleware.populate(["alice", "bob"], ["TOKEN_API_TEST"])


def test_get_app_is_built_app(app):
    assert router.get_app() is app
    assert router.get_secure_router().prefix == "/auth"


def test_secure_route_with_token(app):
    response = app.test_client().get("/auth/ping", headers={"X-Session-Token": "token"})
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "pong"


def test_secure_route_without_token(app):
    response = app.test_client().get("/auth/ping")
    assert response.status_code == 403
    assert "Forbidden" in response.get_data(as_text=True)


def test_secure_route_wrong_token(app):
    response = app.test_client().get("/auth/ping", headers={"X-Session-Token": "secret"})
    assert response.status_code == 403


def test_trailing_slash_redirects(app):
    response = app.test_client().get("/auth/ping/")
    assert response.status_code == 301
    assert response.headers["Location"].endswith("/auth/ping")


def test_unknown_route_not_found(app):
    assert app.test_client().get("/nothing/").status_code == 404


def test_swagger_ui_references_spec(app):
    response = app.test_client().get("/swagger")
    assert response.status_code == 200
    assert "/conf/swagger.yaml" in response.get_data(as_text=True)


def test_redoc_references_spec(app):
    response = app.test_client().get("/docs")
    assert response.status_code == 200
    assert "/conf/swagger.yaml" in response.get_data(as_text=True)


def test_swagger_file_served(app, tmp_path, monkeypatch):
    (tmp_path / "conf").mkdir()
    (tmp_path / "conf" / "swagger.yaml").write_text("swagger: '2.0'\n")
    monkeypatch.chdir(tmp_path)
    response = app.test_client().get("/conf/swagger.yaml")
    assert response.status_code == 200
    assert response.get_data(as_text=True) == "swagger: '2.0'\n"
    response.close()
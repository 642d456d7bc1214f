import pytest

from syncdash.domain.ports import UseCaseError
from syncdash.domain.routes import RouteRegistry, RouteRule
from syncdash.domain.session import Identity, Session, parse_user_id, session_from_storage
from syncdash.domain.views import HOME_PATH, LOGIN_PATH


def test_resolve_home_is_pinned():
    event = RouteRegistry.default().resolve(HOME_PATH)

    assert event.name == "Dashboard"
    assert event.participates_in_tabs is True
    assert event.closable is False


def test_root_redirects_to_home():
    assert RouteRegistry.default().resolve("/").path == HOME_PATH


def test_param_route_is_hidden():
    event = RouteRegistry.default().resolve("/videos/42")

    assert event.path == "/videos/42"
    assert event.name == "VideoDetail"
    assert event.participates_in_tabs is False


def test_login_route_is_hidden():
    assert RouteRegistry.default().resolve(LOGIN_PATH).participates_in_tabs is False


def test_query_and_trailing_slash_are_normalized():
    event = RouteRegistry.default().resolve("/videos/?page=2")

    assert event.path == "/videos"
    assert event.name == "Videos"
    assert event.closable is True


def test_unknown_route_raises():
    with pytest.raises(UseCaseError) as excinfo:
        RouteRegistry.default().resolve("/nope")

    assert excinfo.value.code == "ROUTE_NOT_FOUND"


def test_menu_excludes_hidden_routes():
    names = [rule.name for rule in RouteRegistry.default().menu()]

    assert names[0] == "Dashboard"
    assert "VideoDetail" not in names
    assert "Login" not in names


def test_duplicate_route_names_rejected():
    with pytest.raises(ValueError):
        RouteRegistry([RouteRule("/a", "A", "A"), RouteRule("/b", "A", "B")])


def test_session_invariant_rejects_identity_without_token():
    with pytest.raises(ValueError):
        Session(token="", identity=Identity(id=3, display_name="bob"))


def test_from_login_payload_requires_token():
    with pytest.raises(ValueError):
        Session.from_login_payload({"token": "", "user": {"id": 1}})

    session = Session.from_login_payload({"token": "t", "user": {"id": "7", "username": "x"}})
    assert session.identity == Identity(id=7, display_name="x")


def test_parse_user_id_and_storage_rebuild():
    assert parse_user_id(" 12 ") == 12
    assert parse_user_id(None) == 0
    assert parse_user_id(True) == 0
    assert session_from_storage(None, "bob", "3") == Session.empty()
    assert session_from_storage("t", None, None) == Session.empty()
    assert session_from_storage("t", "", "0") == Session.empty()


def test_session_invariant_rejects_token_without_identity():
    with pytest.raises(ValueError):
        Session(token="t")


def test_from_login_payload_requires_user_identity():
    with pytest.raises(ValueError):
        Session.from_login_payload({"token": "t"})
    with pytest.raises(ValueError):
        Session.from_login_payload({"token": "t", "user": "alice"})
    with pytest.raises(ValueError):
        Session.from_login_payload({"token": "t", "user": {"id": "x", "username": ""}})


def test_session_module_is_documented():
    from syncdash.domain import session as session_module

    assert session_module.__doc__.startswith("Authentication session")

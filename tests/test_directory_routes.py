# tests/test_directory_routes.py

"""
Tests for the /directory endpoint.
"""

from unittest.mock import Mock, patch

from fastapi.testclient import TestClient

from core.navigation_state import navigate_to_page
from models.enums import UserRole

from conftest import make_user


ROWS = [
    {"id": "1", "name": "Asha Rao", "email": "asha@example.com", "role": "Admin", "units": []},
    {
        "id": "2",
        "name": "Vikram Iyer",
        "email": "vikram@example.com",
        "role": "Resident",
        "units": [{"id": "u1", "flat_number": "B-204", "block": "B", "floor": "2"}],
    },
    {"id": "3", "name": "Meera Das", "email": "meera@example.com", "role": "Tenant", "units": None},
    {"id": "4", "name": "Ravi Kumar", "email": "ravi@example.com", "role": "Security", "flat_number": "Gate 1"},
]


def mock_directory_client(rows=ROWS):
    mock_client = Mock()
    mock_query = Mock()
    mock_query.eq.return_value = mock_query
    mock_query.execute.return_value = Mock(data=rows)
    mock_client.table.return_value.select.return_value = mock_query
    return mock_client


def test_admin_sees_tenants(client: TestClient, login_as):
    login_as(make_user(UserRole.admin))

    with patch("routers.directory.get_supabase_client", return_value=mock_directory_client()) as mock_supabase:
        response = client.get("/directory")

    assert response.status_code == 200
    assert [m["id"] for m in response.json()] == ["1", "2", "3"]
    mock_supabase.return_value.table.assert_called_with("users")


def test_resident_does_not_see_tenants(client: TestClient, login_as):
    login_as(make_user(UserRole.resident))

    with patch("routers.directory.get_supabase_client", return_value=mock_directory_client()):
        response = client.get("/directory")

    assert [m["id"] for m in response.json()] == ["1", "2"]


def test_search_and_role_filter(client: TestClient, login_as):
    login_as(make_user(UserRole.admin))

    with patch("routers.directory.get_supabase_client", return_value=mock_directory_client()):
        by_flat = client.get("/directory", params={"search": "b-204"}).json()
        by_role = client.get("/directory", params={"role": "Tenant"}).json()

    assert [m["id"] for m in by_flat] == ["2"]
    assert by_flat[0]["units"][0]["floor"] == 2
    assert [m["id"] for m in by_role] == ["3"]


def test_grouped_view(client: TestClient, login_as):
    login_as(make_user(UserRole.admin))

    with patch("routers.directory.get_supabase_client", return_value=mock_directory_client()):
        data = client.get("/directory", params={"grouped": True}).json()

    assert [g["role"] for g in data] == ["Admin", "Resident", "Tenant"]


def test_security_admin_sees_guards(client: TestClient, login_as):
    login_as(make_user(UserRole.security_admin))

    with patch("routers.directory.get_supabase_client", return_value=mock_directory_client()):
        data = client.get("/directory").json()

    assert [m["id"] for m in data] == ["4"]


def test_directory_page_forbidden_for_guard(client: TestClient, login_as):
    login_as(make_user(UserRole.security))

    response = client.get("/directory")

    assert response.status_code == 403


def test_directory_blocked_until_setup_done(client: TestClient, login_as):
    login_as(make_user(UserRole.resident, units=[]))

    response = client.get("/directory")

    assert response.status_code == 403


def test_user_without_community_gets_empty_list(client: TestClient, login_as):
    login_as(make_user(UserRole.helpdesk_admin, community_id=None))

    with patch("routers.directory.get_supabase_client") as mock_supabase:
        response = client.get("/directory")

    assert response.status_code == 200
    assert response.json() == []
    mock_supabase.assert_not_called()


def test_backend_failure_is_a_local_error(client: TestClient, login_as):
    login_as(make_user(UserRole.admin))

    mock_client = mock_directory_client()
    mock_client.table.return_value.select.return_value.eq.return_value.execute.side_effect = Exception("connection reset")

    with patch("routers.directory.get_supabase_client", return_value=mock_client):
        response = client.get("/directory")

    assert response.status_code == 500
    assert response.json()["detail"] == "Load directory failed"

    # navigation is unaffected
    assert client.get("/navigation").status_code == 200


def test_stale_request_is_rejected(client: TestClient, login_as):
    login_as(make_user(UserRole.admin))
    opened = navigate_to_page("user-1", "Directory")
    navigate_to_page("user-1", "Notices")

    with patch("routers.directory.get_supabase_client", return_value=mock_directory_client()):
        response = client.get("/directory", params={"request_id": opened.request_id})

    assert response.status_code == 409


def test_current_request_is_served(client: TestClient, login_as):
    login_as(make_user(UserRole.admin))
    opened = navigate_to_page("user-1", "Directory")

    with patch("routers.directory.get_supabase_client", return_value=mock_directory_client()):
        response = client.get("/directory", params={"request_id": opened.request_id})

    assert response.status_code == 200


def test_unit_without_flat_number_is_listed(client: TestClient, login_as):
    login_as(make_user(UserRole.admin))
    rows = ROWS + [
        {"id": "5", "name": "Nisha Pillai", "email": "nisha@example.com", "role": "Resident",
         "units": [{"id": "u5", "flat_number": None}]},
    ]

    with patch("routers.directory.get_supabase_client", return_value=mock_directory_client(rows)):
        listed = client.get("/directory")
        searched = client.get("/directory", params={"search": "b-204"})

    assert listed.status_code == 200
    assert "5" in [m["id"] for m in listed.json()]
    assert listed.json()[-1]["units"][0]["flat_number"] is None
    assert [m["id"] for m in searched.json()] == ["2"]


def test_other_session_does_not_make_view_stale(client: TestClient, login_as):
    # same account signed in on two devices
    login_as(make_user(UserRole.admin, session_id="device-a"))
    opened = client.post("/navigation", json={"page": "Directory"}).json()

    login_as(make_user(UserRole.admin, session_id="device-b"))
    moved = client.post("/navigation", json={"page": "Notices"}).json()
    assert moved["request_id"] == 1

    login_as(make_user(UserRole.admin, session_id="device-a"))
    with patch("routers.directory.get_supabase_client", return_value=mock_directory_client()):
        response = client.get("/directory", params={"request_id": opened["request_id"]})

    assert response.status_code == 200
    assert client.get("/navigation").json()["page"] == "Directory"

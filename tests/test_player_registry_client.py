"""Tests for the requests-based PlayerRegistryClient."""

import json
from unittest import mock

import pytest
import requests

from player_registry_client import PlayerRegistryClient


def make_response(status_code, body=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = json.dumps(body).encode("utf-8") if body is not None else b""
    response.url = "http://players.test"
    return response


@pytest.fixture
def session():
    return mock.Mock(spec=requests.Session)


@pytest.fixture
def client(session):
    return PlayerRegistryClient(base_url="http://players.test/", session=session)


def test_list_players_translates_filters(client, session):
    session.request.return_value = make_response(200, [{"id": 1}])

    players, error = client.list_players(race="ELF", min_level=2, banned=False, page_size=5, title=None)

    assert error is None
    assert players == [{"id": 1}]
    kwargs = session.request.call_args.kwargs
    assert kwargs["method"] == "GET"
    assert kwargs["url"] == "http://players.test/api/v1/players/"
    assert kwargs["params"] == {"race": "ELF", "minLevel": 2, "banned": "false", "pageSize": 5}


def test_requests_carry_no_credentials(client, session):
    session.request.return_value = make_response(200, {"status": "ok"})

    client.health()

    assert "headers" not in session.request.call_args.kwargs
    with pytest.raises(TypeError):
        PlayerRegistryClient(base_url="http://players.test", api_key="secret")


def test_count_players(client, session):
    session.request.return_value = make_response(200, 4)
    assert client.count_players(maxExperience=100) == (4, None)
    assert session.request.call_args.kwargs["params"] == {"maxExperience": 100}


def test_create_and_update_send_json(client, session):
    session.request.return_value = make_response(201, {"id": 3, "name": "Eowyn"})

    created, error = client.create_player({"name": "Eowyn"})
    assert error is None
    assert created["id"] == 3
    assert session.request.call_args.kwargs["json"] == {"name": "Eowyn"}

    session.request.return_value = make_response(200, {"id": 3, "banned": True})
    updated, _ = client.update_player(3, {"banned": True})
    assert updated["banned"] is True
    assert session.request.call_args.kwargs["method"] == "PUT"
    assert session.request.call_args.kwargs["url"].endswith("/players/3")


def test_http_error_is_returned_not_raised(client, session):
    session.request.return_value = make_response(404, {"detail": "Player 9 not found"})

    player, error = client.get_player(9)

    assert player is None
    assert error == {"status_code": 404, "message": "Player 9 not found"}


def test_delete_player(client, session):
    session.request.return_value = make_response(204)
    assert client.delete_player(3) == (True, None)

    session.request.return_value = make_response(400, {"detail": "Player id must not be zero"})
    deleted, error = client.delete_player(0)
    assert deleted is False
    assert error["status_code"] == 400


def test_connection_error(client, session):
    session.request.side_effect = requests.ConnectionError("refused")

    players, error = client.list_players()

    assert players == []
    assert error["status_code"] is None
    assert "refused" in error["message"]

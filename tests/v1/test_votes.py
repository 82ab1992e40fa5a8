# tests/v1/test_votes.py
"""Tests for build vote endpoints."""

from fastapi import status

from epitome_codex.services import voting


def _vote(client, build_id, vote_type, headers=None):
    return client.post(f"/api/v1/builds/{build_id}/vote", json={"type": vote_type}, headers=headers)


def test_upvote(client, auth_token, test_build) -> None:
    """First vote creates an upvote."""
    response = _vote(client, test_build.id, "up", auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"upvotes": 1, "downvotes": 0, "userVote": "up"}


def test_repeat_vote_withdraws(client, auth_token, test_build) -> None:
    """Voting the same direction twice removes the vote."""
    _vote(client, test_build.id, "down", auth_token)
    response = _vote(client, test_build.id, "down", auth_token)

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"upvotes": 0, "downvotes": 0, "userVote": None}


def test_opposite_vote_flips(client, auth_token, test_build) -> None:
    _vote(client, test_build.id, "up", auth_token)
    response = _vote(client, test_build.id, "down", auth_token)

    assert response.json() == {"upvotes": 0, "downvotes": 1, "userVote": "down"}


def test_votes_from_two_users(client, auth_token, other_auth_token, test_build) -> None:
    _vote(client, test_build.id, "up", auth_token)
    response = _vote(client, test_build.id, "down", other_auth_token)

    assert response.json() == {"upvotes": 1, "downvotes": 1, "userVote": "down"}

    build = client.get(f"/api/v1/builds/{test_build.id}").json()
    assert (build["upvotes"], build["downvotes"]) == (1, 1)


def test_vote_requires_login(client, test_build) -> None:
    """Anonymous votes are rejected."""
    response = _vote(client, test_build.id, "up")

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["detail"] == "You must be logged in to vote"


def test_vote_with_bad_token_requires_login(client, test_build) -> None:
    response = _vote(client, test_build.id, "up", {"Authorization": "Bearer not-a-token"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_vote_invalid_type(client, auth_token, test_build) -> None:
    response = _vote(client, test_build.id, "sideways", auth_token)

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["detail"] == "Invalid vote type"


def test_vote_missing_type(client, auth_token, test_build) -> None:
    response = client.post(f"/api/v1/builds/{test_build.id}/vote", json={}, headers=auth_token)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_vote_nonexistent_build(client, auth_token) -> None:
    response = _vote(client, "does-not-exist", "up", auth_token)

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Build not found"


def test_get_my_vote(client, auth_token, test_build) -> None:
    url = f"/api/v1/builds/{test_build.id}/vote"
    assert client.get(url, headers=auth_token).json() == {"userVote": None}

    _vote(client, test_build.id, "up", auth_token)
    assert client.get(url, headers=auth_token).json() == {"userVote": "up"}


def test_get_my_vote_anonymous(client, auth_token, test_build) -> None:
    _vote(client, test_build.id, "up", auth_token)

    response = client.get(f"/api/v1/builds/{test_build.id}/vote")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"userVote": None}


def test_vote_conflict_returns_409(client, db_session, auth_token, test_build, monkeypatch) -> None:
    """A vote that keeps losing races is reported as a conflict, not a server error."""
    db_session.commit()

    def always_stale(*args, **kwargs):
        raise voting._StaleVote()

    monkeypatch.setattr(voting, "_write_vote_row", always_stale)

    response = _vote(client, test_build.id, "up", auth_token)

    assert response.status_code == status.HTTP_409_CONFLICT

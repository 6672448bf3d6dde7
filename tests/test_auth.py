"""Tests for bearer token handling and branch access rules."""

from datetime import timedelta
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from app.config.database import get_db
from app.core.auth.dependencies import can_access_branch
from app.core.auth.schemas import CurrentPrincipal, Roles
from app.core.auth.service import AuthService
from app.main import app

ELIGIBILITY = "/api/v1/sessions/transfer/eligibility"


@pytest.fixture
def raw_client(db_session):
    """TestClient that authenticates through real tokens."""
    app.dependency_overrides[get_db] = lambda: db_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def _bearer(**claims) -> dict:
    return {"Authorization": f"Bearer {AuthService.create_access_token(claims)}"}


@pytest.mark.unit
class TestAuthService:
    def test_round_trip(self):
        token = AuthService.create_access_token({"sub": "user-1", "roles": [Roles.ADMIN]})

        payload = AuthService.verify_token(token)

        assert payload["sub"] == "user-1"
        assert payload["roles"] == [Roles.ADMIN]

    def test_expired_token_is_rejected(self):
        token = AuthService.create_access_token({"sub": "user-1"}, expires_delta=timedelta(seconds=-5))

        assert AuthService.verify_token(token) is None

    def test_garbage_token_is_rejected(self):
        assert AuthService.verify_token("not.a.token") is None

    def test_subject_is_required(self):
        with pytest.raises(ValueError):
            AuthService.create_access_token({"roles": [Roles.ADMIN]})


@pytest.mark.unit
class TestBranchAccess:
    def test_admin_reaches_every_branch(self):
        admin = CurrentPrincipal(user_id="a", roles=[Roles.ADMIN])

        assert can_access_branch(admin, uuid4()) is True

    def test_members_reach_only_their_branches(self):
        branch_id = uuid4()
        manager = CurrentPrincipal(user_id="m", roles=[Roles.BRANCH_MANAGER], branch_ids=[branch_id])

        assert can_access_branch(manager, branch_id) is True
        assert can_access_branch(manager, uuid4()) is False
        assert can_access_branch(manager, None) is False


@pytest.mark.api
class TestTokenThroughApi:
    def _params(self):
        return {"sourceBranchId": str(uuid4()), "targetBranchId": str(uuid4())}

    def test_role_claim_as_string(self, raw_client):
        headers = _bearer(sub="u1", role=Roles.BRANCH_MANAGER)

        response = raw_client.get(ELIGIBILITY, params=self._params(), headers=headers)

        assert response.status_code == 200
        assert response.json() is True

    def test_roles_claim_as_list(self, raw_client):
        headers = _bearer(user_id="u1", roles=[Roles.PATIENT, Roles.ADMIN], branch_ids=[str(uuid4())])

        assert raw_client.get(ELIGIBILITY, params=self._params(), headers=headers).status_code == 200

    def test_wrong_role_is_403(self, raw_client):
        headers = _bearer(sub="u1", roles=[Roles.DOCTOR])

        assert raw_client.get(ELIGIBILITY, params=self._params(), headers=headers).status_code == 403

    def test_invalid_token_is_401(self, raw_client):
        headers = {"Authorization": "Bearer invalid"}

        response = raw_client.get(ELIGIBILITY, params=self._params(), headers=headers)

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    def test_malformed_branch_claim_is_401(self, raw_client):
        headers = _bearer(sub="u1", roles=[Roles.ADMIN], branch_ids=["not-a-uuid"])

        assert raw_client.get(ELIGIBILITY, params=self._params(), headers=headers).status_code == 401

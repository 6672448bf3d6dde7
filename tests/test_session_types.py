"""
Tests for the session type catalog.

Service rules (unique names, cascading deactivation) and the HTTP surface.
"""

from uuid import uuid4

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from app.core.auth.schemas import Roles
from app.modules.session_types.schemas import SessionTypeCreate, SessionTypeUpdate
from app.modules.session_types.service import SessionTypesService
from app.shared.database.models import RecordStatus, SessionOffering

BASE = "/api/v1/session-types"


@pytest.fixture
def service(db_session) -> SessionTypesService:
    return SessionTypesService(db_session)


@pytest.mark.unit
class TestSessionTypesService:
    def test_create_and_get(self, service):
        created = service.create_session_type(
            SessionTypeCreate(name="  Video consult ", default_duration_minutes=30, is_telemedicine_available=True)
        )

        fetched = service.get_session_type(created.id)

        assert fetched.name == "Video consult"
        assert fetched.is_telemedicine_available is True
        assert fetched.status == RecordStatus.ACTIVE

    def test_duplicate_name_is_conflict_regardless_of_case(self, service):
        service.create_session_type(SessionTypeCreate(name="Follow-up", default_duration_minutes=15))

        with pytest.raises(HTTPException) as exc_info:
            service.create_session_type(SessionTypeCreate(name="FOLLOW-UP", default_duration_minutes=20))

        assert exc_info.value.status_code == 409

    def test_missing_type_is_404(self, service):
        with pytest.raises(HTTPException) as exc_info:
            service.get_session_type(uuid4())

        assert exc_info.value.status_code == 404

    def test_rename_to_existing_name_is_conflict(self, service, session_type_factory):
        session_type_factory(name="Initial")
        other = session_type_factory(name="Other")

        with pytest.raises(HTTPException) as exc_info:
            service.update_session_type(other.id, SessionTypeUpdate(name="initial"))

        assert exc_info.value.status_code == 409

    def test_update_changes_only_given_fields(self, service, session_type_factory):
        session_type = session_type_factory(name="Therapy", duration=45)

        updated = service.update_session_type(session_type.id, SessionTypeUpdate(default_duration_minutes=60))

        assert updated.default_duration_minutes == 60
        assert updated.name == "Therapy"

    def test_deactivate_cascades_to_offerings(
        self, service, db_session, session_type_factory, offering_factory, source_branch_id
    ):
        session_type = session_type_factory()
        offering_factory(source_branch_id, session_type=session_type)
        offering_factory(source_branch_id, session_type=session_type)
        unrelated = offering_factory(source_branch_id)

        deactivated = service.deactivate(session_type.id)

        assert deactivated.is_active is False
        db_session.expire_all()
        offerings = db_session.query(SessionOffering).filter(
            SessionOffering.session_type_id == session_type.id
        ).all()
        assert len(offerings) == 2
        assert all(o.is_active is False for o in offerings)
        assert db_session.get(SessionOffering, unrelated.id).is_active is True

    def test_soft_delete_and_reactivate(self, service, session_type_factory):
        session_type = session_type_factory()

        assert service.soft_delete(session_type.id).status == RecordStatus.DELETED
        assert service.reactivate(session_type.id).status == RecordStatus.ACTIVE

    def test_delete_removes_offerings(self, service, db_session, session_type_factory, offering_factory, source_branch_id):
        session_type = session_type_factory()
        offering = offering_factory(source_branch_id, session_type=session_type)
        offering_id = offering.id

        service.delete_session_type(session_type.id)

        db_session.expire_all()
        assert db_session.get(SessionOffering, offering_id) is None

    def test_blank_name_is_rejected(self):
        with pytest.raises(ValidationError):
            SessionTypeCreate(name="   ", default_duration_minutes=10)

    def test_duration_must_be_positive(self):
        with pytest.raises(ValidationError):
            SessionTypeCreate(name="Zero", default_duration_minutes=0)


@pytest.mark.api
class TestSessionTypesApi:
    def test_create_returns_201_with_camel_case(self, client):
        response = client.post(
            BASE,
            json={"name": "Dermatology", "defaultDurationMinutes": 20, "isTelemedicineAvailable": True},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Dermatology"
        assert body["defaultDurationMinutes"] == 20
        assert body["isTelemedicineAvailable"] is True

    def test_duplicate_returns_409(self, client, session_type_factory):
        session_type_factory(name="Dermatology")

        response = client.post(BASE, json={"name": "dermatology", "defaultDurationMinutes": 20})

        assert response.status_code == 409

    def test_exists_by_name(self, client, session_type_factory):
        session_type_factory(name="Cardiology")

        assert client.get(f"{BASE}/exists-by-name", params={"name": "CARDIOLOGY"}).json() is True
        assert client.get(f"{BASE}/exists-by-name", params={"name": "Oncology"}).json() is False

    def test_lifecycle_endpoints(self, client, session_type_factory):
        session_type = session_type_factory()
        url = f"{BASE}/{session_type.id}"

        assert client.post(f"{url}/deactivate").json()["isActive"] is False
        assert client.post(f"{url}/activate").json()["isActive"] is True
        assert client.post(f"{url}/soft-delete").json()["status"] == "DELETED"
        assert client.post(f"{url}/reactivate").json()["status"] == "ACTIVE"
        assert client.put(url, json={"description": "Updated"}).json()["description"] == "Updated"
        assert client.delete(url).status_code == 204
        assert client.get(url).status_code == 404

    def test_writes_require_admin(self, client, principal):
        principal.roles = [Roles.DOCTOR]

        response = client.post(BASE, json={"name": "Pediatrics", "defaultDurationMinutes": 30})

        assert response.status_code == 403

    def test_doctor_may_read(self, client, principal, session_type_factory):
        session_type = session_type_factory()
        principal.roles = [Roles.DOCTOR]

        assert client.get(f"{BASE}/{session_type.id}").status_code == 200

    def test_health(self, client):
        assert client.get(f"{BASE}/health").json()["status"] == "healthy"

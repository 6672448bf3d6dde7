"""
Unit tests for TransferExecutor.

The executor copies one offering to the target branch and then keeps,
deactivates or deletes the source. It must never raise.
"""

from unittest.mock import Mock, patch
from uuid import uuid4

import pytest

from app.modules.session_offerings.repository import SessionOfferingRepository
from app.modules.session_transfers.executor import SUCCESS_REASON, TransferExecutor
from app.modules.session_transfers.schemas import ItemStatus, TransferRequest, TransferType
from app.shared.database.models import SessionOffering


@pytest.fixture
def repository(db_session) -> SessionOfferingRepository:
    return SessionOfferingRepository(db_session)


@pytest.fixture
def executor(repository) -> TransferExecutor:
    return TransferExecutor(repository)


def _request(source, target, **kwargs) -> TransferRequest:
    return TransferRequest(
        source_branch_id=source,
        target_branch_id=target,
        transfer_type=kwargs.pop("transfer_type", TransferType.BULK),
        **kwargs,
    )


@pytest.mark.unit
class TestTransferExecutorSuccess:
    """Copy and disposal paths."""

    def test_copy_keeps_source_by_default(
        self, executor, repository, offering_factory, source_branch_id, target_branch_id
    ):
        source = offering_factory(source_branch_id, price="80.00")

        result = executor.transfer_one(source, _request(source_branch_id, target_branch_id))

        assert result.status == ItemStatus.SUCCESS
        assert result.reason == SUCCESS_REASON
        assert result.session_id == source.id
        assert result.original_branch_id == source_branch_id
        assert result.new_branch_id == target_branch_id

        copy = repository.get_by_id(result.new_session_id)
        assert copy.id != source.id
        assert copy.branch_id == target_branch_id
        assert copy.doctor_id == source.doctor_id
        assert copy.session_type_id == source.session_type_id
        assert copy.price == source.price
        assert repository.get_by_id(source.id) is not None

    def test_result_carries_session_type_name(
        self, executor, offering_factory, session_type_factory, source_branch_id, target_branch_id
    ):
        session_type = session_type_factory(name="Telemedicine 30")
        source = offering_factory(source_branch_id, session_type=session_type)

        result = executor.transfer_one(source, _request(source_branch_id, target_branch_id))

        assert result.session_title == "Telemedicine 30"

    def test_move_deletes_source(
        self, executor, repository, offering_factory, source_branch_id, target_branch_id
    ):
        source = offering_factory(source_branch_id)
        source_id = source.id

        result = executor.transfer_one(
            source, _request(source_branch_id, target_branch_id, preserve_original_schedule=False)
        )

        assert result.status == ItemStatus.SUCCESS
        assert repository.get_by_id(source_id) is None

    def test_emergency_move_deactivates_source(
        self, executor, repository, offering_factory, source_branch_id, target_branch_id
    ):
        source = offering_factory(source_branch_id)

        result = executor.transfer_one(
            source,
            _request(
                source_branch_id,
                target_branch_id,
                preserve_original_schedule=False,
                emergency_flag=True,
            ),
        )

        assert result.status == ItemStatus.SUCCESS
        kept = repository.get_by_id(source.id)
        assert kept is not None
        assert kept.is_active is False
        assert kept.branch_id == source_branch_id
        assert repository.get_by_id(result.new_session_id).is_active is True

    def test_inactive_flag_is_carried_to_copy(
        self, executor, repository, offering_factory, source_branch_id, target_branch_id
    ):
        source = offering_factory(source_branch_id, is_active=False)

        result = executor.transfer_one(source, _request(source_branch_id, target_branch_id))

        assert repository.get_by_id(result.new_session_id).is_active is False


@pytest.mark.unit
class TestTransferExecutorFailure:
    """Failures become FAILED results."""

    def test_create_failure_is_reported_not_raised(self, offering_factory, source_branch_id, target_branch_id):
        source = offering_factory(source_branch_id)
        repository = Mock(spec=SessionOfferingRepository)
        repository.create.side_effect = RuntimeError("connection reset")

        result = TransferExecutor(repository).transfer_one(source, _request(source_branch_id, target_branch_id))

        assert result.status == ItemStatus.FAILED
        assert result.session_id == source.id
        assert "connection reset" in result.reason
        assert result.new_session_id is None
        repository.rollback.assert_called_once()

    def test_disposal_failure_leaves_copy_in_place(
        self, executor, repository, db_session, offering_factory, source_branch_id, target_branch_id
    ):
        source = offering_factory(source_branch_id)
        source_id = source.id

        with patch.object(repository, "delete", side_effect=RuntimeError("locked")):
            result = executor.transfer_one(
                source, _request(source_branch_id, target_branch_id, preserve_original_schedule=False)
            )

        assert result.status == ItemStatus.FAILED
        assert "locked" in result.reason
        db_session.expire_all()
        assert repository.get_by_id(source_id) is not None
        copies = repository.find_by_branch_id(target_branch_id)
        assert len(copies) == 1

    def test_unsaved_offering_failure_has_empty_title(self, source_branch_id, target_branch_id):
        offering = SessionOffering(
            id=uuid4(),
            doctor_id=uuid4(),
            branch_id=source_branch_id,
            session_type_id=uuid4(),
            price=10,
            is_active=True,
        )
        repository = Mock(spec=SessionOfferingRepository)
        repository.create.side_effect = ValueError("bad row")

        result = TransferExecutor(repository).transfer_one(offering, _request(source_branch_id, target_branch_id))

        assert result.status == ItemStatus.FAILED
        assert result.session_title == ""

"""
MiniCRM Backend — Deal & Dashboard Service Unit Tests
=======================================================

What:  Tests for DealService create/update binding and DashboardService
       aggregate defaults, using mock DB sessions.
"""

from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest

from minicrm.exceptions import DatabaseError
from minicrm.schemas.deal import DealCreate, DealUpdate
from minicrm.services.dashboard_service import DashboardService
from minicrm.services.deal_service import DealService


class TestDealServiceCreate:

    def setup_method(self):
        self.service = DealService()

    def _capture_insert(self, session, new_id=1):
        def flush():
            session.add.call_args.args[0].id = new_id
        session.flush = AsyncMock(side_effect=flush)

    @pytest.mark.asyncio
    async def test_stage_defaults_to_lead(self, mock_db_session):
        self._capture_insert(mock_db_session)

        await self.service.create_deal(mock_db_session, DealCreate(title="Renewal"))

        added = mock_db_session.add.call_args.args[0]
        assert added.stage == "lead"
        assert added.value is None
        assert added.close_date is None
        assert added.company_id is None

    @pytest.mark.asyncio
    async def test_empty_stage_defaults_to_lead(self, mock_db_session):
        self._capture_insert(mock_db_session)

        await self.service.create_deal(mock_db_session, DealCreate(title="Renewal", stage=""))

        assert mock_db_session.add.call_args.args[0].stage == "lead"

    @pytest.mark.asyncio
    async def test_given_fields_are_kept(self, mock_db_session):
        self._capture_insert(mock_db_session, new_id=8)

        result = await self.service.create_deal(
            mock_db_session,
            DealCreate(
                company_id=3,
                title="Expansion",
                value=1500.5,
                stage="proposal",
                close_date=date(2026, 12, 1),
            ),
        )

        added = mock_db_session.add.call_args.args[0]
        assert added.company_id == 3
        assert added.value == 1500.5
        assert added.stage == "proposal"
        assert added.close_date == date(2026, 12, 1)
        assert result.id == 8
        assert result.message == "Deal created successfully"

    @pytest.mark.asyncio
    async def test_zero_value_is_stored_as_null(self, mock_db_session):
        """Falsy optional values are coalesced to NULL on create."""
        self._capture_insert(mock_db_session)

        await self.service.create_deal(mock_db_session, DealCreate(title="Pilot", value=0))

        assert mock_db_session.add.call_args.args[0].value is None


class TestDealServiceUpdate:

    @pytest.mark.asyncio
    async def test_update_does_not_default_stage(self, mock_db_session):
        result = await DealService().update_deal(mock_db_session, 2, DealUpdate(title="Renewal"))

        params = mock_db_session.execute.call_args.args[0].compile().params
        assert params["title"] == "Renewal"
        assert params["stage"] is None
        assert params["value"] is None
        assert "company_id" not in params
        assert result.message == "Deal updated successfully"


class TestDashboardService:

    def setup_method(self):
        self.service = DashboardService()

    @pytest.mark.asyncio
    async def test_null_aggregates_default_to_zero(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.scalar.return_value = None
        mock_db_session.execute.return_value = mock_result

        stats = await self.service.get_stats(mock_db_session)

        assert stats.model_dump() == {
            "contacts": 0,
            "companies": 0,
            "deals": 0,
            "pipeline_value": 0,
        }
        assert mock_db_session.execute.await_count == 4

    @pytest.mark.asyncio
    async def test_aggregates_in_order(self, mock_db_session):
        results = []
        for value in (5, 2, 3, 1250.0):
            result = MagicMock()
            result.scalar.return_value = value
            results.append(result)
        mock_db_session.execute = AsyncMock(side_effect=results)

        stats = await self.service.get_stats(mock_db_session)

        assert stats.contacts == 5
        assert stats.companies == 2
        assert stats.deals == 3
        assert stats.pipeline_value == 1250.0
        assert isinstance(stats.pipeline_value, int)

    @pytest.mark.asyncio
    async def test_store_failure(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=RuntimeError("database is locked"))

        with pytest.raises(DatabaseError, match="database is locked"):
            await self.service.get_stats(mock_db_session)

    @pytest.mark.asyncio
    async def test_fractional_pipeline_kept(self, mock_db_session):
        results = []
        for value in (0, 0, 2, 99.5):
            result = MagicMock()
            result.scalar.return_value = value
            results.append(result)
        mock_db_session.execute = AsyncMock(side_effect=results)

        stats = await self.service.get_stats(mock_db_session)

        assert stats.pipeline_value == 99.5

"""Unit tests for CalculateHotScoreUseCase."""

import pytest

from vent.application.usecase.post import CalculateHotScoreUseCase
from vent.domain.error import ValidationError


class TestCalculateHotScoreUseCase:
    """Tests for CalculateHotScoreUseCase."""

    @pytest.mark.asyncio
    async def test_ten_upvotes_at_epoch(self):
        use_case = CalculateHotScoreUseCase()

        response = await use_case.execute(
            {"upvotes": 10, "downvotes": 0, "createdAt": "2024-01-01T00:00:00Z"}
        )

        assert response.hot_score == pytest.approx(1.0)

    @pytest.mark.asyncio
    async def test_newer_inputs_score_higher(self):
        use_case = CalculateHotScoreUseCase()

        older = await use_case.execute(
            {"upvotes": 3, "downvotes": 1, "createdAt": "2025-01-01T00:00:00Z"}
        )
        newer = await use_case.execute(
            {"upvotes": 3, "downvotes": 1, "createdAt": "2025-01-02T00:00:00Z"}
        )

        assert newer.hot_score - older.hot_score == pytest.approx(86400 / 45000)

    @pytest.mark.asyncio
    async def test_invalid_payload_raises_validation_error(self):
        use_case = CalculateHotScoreUseCase()

        with pytest.raises(ValidationError, match="createdAt is required"):
            await use_case.execute({"upvotes": 1, "downvotes": 2})

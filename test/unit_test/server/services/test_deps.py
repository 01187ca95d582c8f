"""Unit tests for server services dependencies."""

from unittest.mock import patch

import pytest
from fastapi import HTTPException

from ecowaste.core.storage import DatabaseStorage
from ecowaste.learning import QuizGenerator
from ecowaste.server.services.deps import (
    CurrentUserId,
    QuizGeneratorDep,
    StorageDep,
    get_current_user_id,
    get_quiz_generator,
    get_storage,
)


class TestGetCurrentUserId:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("header", [None, "", "   "])
    async def test_missing_user_is_unauthorized(self, header):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user_id(header)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Unauthorized"

    @pytest.mark.asyncio
    async def test_user_id_is_stripped(self):
        assert await get_current_user_id("  user-1 ") == "user-1"


class TestGetStorage:
    @pytest.mark.asyncio
    async def test_storage_wraps_session(self, session):
        storage = await get_storage(session)

        assert isinstance(storage, DatabaseStorage)
        assert storage.session is session


class TestGetQuizGenerator:
    def test_empty_model_uses_builtin_bank(self):
        with patch("ecowaste.server.services.deps.settings") as mock_settings:
            mock_settings.quiz.model = ""
            generator = get_quiz_generator()

        assert isinstance(generator, QuizGenerator)
        assert generator.model_name is None

    def test_configured_model(self):
        with patch("ecowaste.server.services.deps.settings") as mock_settings:
            mock_settings.quiz.model = "openai:gpt-4o"
            generator = get_quiz_generator()

        assert generator.model_name == "openai:gpt-4o"


class TestAnnotatedDependencies:
    @pytest.mark.parametrize(
        "annotated,dependency",
        [
            (CurrentUserId, get_current_user_id),
            (StorageDep, get_storage),
            (QuizGeneratorDep, get_quiz_generator),
        ],
    )
    def test_dependency_metadata(self, annotated, dependency):
        assert annotated.__metadata__[0].dependency is dependency

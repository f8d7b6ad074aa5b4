import logging
import os

import pytest

from exam_results.startup import lifespan
from exam_results.utils.env import find_dotenv_file, load_environment
from exam_results.utils.timing import async_timing_decorator


def test_find_dotenv_file_walks_up_parent_directories(tmp_path):
    env_path = tmp_path / ".env"
    env_path.write_text("OPENROUTER_MODEL_NAME=test/model\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert find_dotenv_file(nested) == env_path.resolve()


def test_load_environment_keeps_existing_variables(tmp_path, monkeypatch):
    env_path = tmp_path / ".env"
    env_path.write_text("OPENROUTER_MODEL_NAME=from/dotenv\nOPENROUTER_TIMEOUT_SECONDS=5\n")
    monkeypatch.setenv("OPENROUTER_MODEL_NAME", "from/process")
    monkeypatch.delenv("OPENROUTER_TIMEOUT_SECONDS", raising=False)

    try:
        assert load_environment(env_path) is True
        assert os.environ["OPENROUTER_MODEL_NAME"] == "from/process"
        assert os.environ["OPENROUTER_TIMEOUT_SECONDS"] == "5"
    finally:
        os.environ.pop("OPENROUTER_TIMEOUT_SECONDS", None)


def test_load_environment_without_file(tmp_path):
    assert load_environment(tmp_path / "missing.env") is False


@pytest.mark.asyncio
async def test_async_timing_decorator_logs_elapsed_time(caplog):
    @async_timing_decorator
    async def double(value):
        return value * 2

    with caplog.at_level(logging.INFO, logger="exam_results"):
        assert await double(21) == 42

    assert "double completed in" in caplog.text


@pytest.mark.asyncio
async def test_async_timing_decorator_logs_on_error(caplog):
    @async_timing_decorator
    async def fail():
        raise RuntimeError("boom")

    with caplog.at_level(logging.INFO, logger="exam_results"):
        with pytest.raises(RuntimeError):
            await fail()

    assert "fail completed in" in caplog.text


@pytest.mark.asyncio
async def test_lifespan_warns_without_api_key(monkeypatch, caplog):
    monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)

    with caplog.at_level(logging.INFO, logger="exam_results"):
        async with lifespan(None):
            pass

    assert "OPENROUTER_API_KEY is not set" in caplog.text
    assert "Application shutdown completed" in caplog.text

"""Tests for the command-line entry point."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from supplydb.core.exceptions import ConnectivityError, ExhaustionError
from supplydb.features.schema.provisioner import ProvisionResult
from supplydb.main import create_parser, run
from supplydb.shared.seeder import InitializationResult, SeederResult


@pytest.fixture(autouse=True)
def logger():
    """Replace the module logger; structlog caches it against the first stdout it sees."""
    with patch("supplydb.main.logger") as mock:
        yield mock


@pytest.fixture
def conn():
    """Create a mock connection."""
    return AsyncMock()


@pytest.fixture
def fake_open_connection(conn):
    """Patch open_connection to yield the mock connection."""

    @asynccontextmanager
    async def fake(engine=None):
        yield conn

    with patch("supplydb.main.open_connection", fake):
        yield fake


@pytest.fixture
def initialize():
    """Patch initialize_database with a canned result."""
    result = InitializationResult(provision=ProvisionResult(), seed=SeederResult())
    with patch("supplydb.main.initialize_database", AsyncMock(return_value=result)) as mock:
        yield mock


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        """No flags means a full initialization."""
        args = create_parser().parse_args([])

        assert args.status is False
        assert args.verify is False
        assert args.source is None
        assert args.product_sample_size is None

    def test_status_and_verify_exclusive(self):
        """--status and --verify cannot be combined."""
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--status", "--verify"])


class TestRun:
    """Tests for run()."""

    @pytest.mark.asyncio
    async def test_initializes_by_default(self, fake_open_connection, initialize, conn, capsys):
        """Without flags the database is provisioned and seeded."""
        assert await run([]) == 0

        initialize.assert_awaited_once()
        assert initialize.await_args.args[0] is conn
        assert "Initialization Complete!" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_sample_size_override(self, fake_open_connection, initialize):
        """--product-sample-size replaces the configured bound."""
        assert await run(["--product-sample-size", "5"]) == 0

        config = initialize.await_args.args[1]
        assert config.product_sample_size == 5

    @pytest.mark.asyncio
    async def test_invalid_sample_size(self, fake_open_connection, initialize, capsys):
        """A sample size below 1 is rejected before connecting."""
        assert await run(["--product-sample-size", "0"]) == 1

        initialize.assert_not_awaited()
        assert "product_sample_size" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_missing_source_file(self, fake_open_connection, initialize, tmp_path):
        """An unreadable seed source fails without touching the database."""
        assert await run(["--source", str(tmp_path / "missing.yaml")]) == 1

        initialize.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_source_file_used(self, fake_open_connection, initialize, tmp_path):
        """Seed lists are read from --source."""
        path = tmp_path / "source.yaml"
        path.write_text("countries: [Austria]\n")

        assert await run(["--source", str(path)]) == 0

        source = initialize.await_args.args[2]
        assert source.countries == ["Austria"]

    @pytest.mark.asyncio
    async def test_production_guard(self, monkeypatch, fake_open_connection, initialize, capsys):
        """Initialization is refused in production without the override."""
        monkeypatch.setenv("APP_ENV", "production")

        assert await run([]) == 1

        initialize.assert_not_awaited()
        assert "production" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_production_override(self, monkeypatch, fake_open_connection, initialize):
        """SEEDER_ALLOW_PRODUCTION lifts the guard."""
        monkeypatch.setenv("APP_ENV", "production")
        monkeypatch.setenv("SEEDER_ALLOW_PRODUCTION", "true")

        assert await run([]) == 0

        initialize.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_status_allowed_in_production(self, monkeypatch, fake_open_connection):
        """Read-only modes skip the production guard."""
        monkeypatch.setenv("APP_ENV", "production")

        with patch("supplydb.main.run_status", AsyncMock(return_value=0)) as status:
            assert await run(["--status"]) == 0

        status.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_verify_failures_exit_nonzero(self, fake_open_connection, capsys):
        """Integrity failures are listed and give a non-zero status."""
        with patch(
            "supplydb.main.DataSeeder.verify_data_integrity",
            AsyncMock(return_value=["Found 1 users linked to both a supplier and a client"]),
        ):
            assert await run(["--verify"]) == 1

        assert "ERRORS FOUND" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_connectivity_error(self, logger, capsys):
        """An unreachable database exits with status 1."""
        with patch(
            "supplydb.main.open_connection",
            MagicMock(side_effect=ConnectivityError("Cannot connect to database")),
        ):
            assert await run([]) == 1

        assert "ERROR [CONNECTIVITY_ERROR]" in capsys.readouterr().out
        logger.error.assert_called_once()
        assert logger.error.call_args.args[0] == "app.run_failed"
        assert logger.error.call_args.kwargs["error_code"] == "CONNECTIVITY_ERROR"

    @pytest.mark.asyncio
    async def test_seeding_error(self, fake_open_connection, capsys):
        """Errors raised while seeding are reported with their code."""
        with patch(
            "supplydb.main.initialize_database",
            AsyncMock(side_effect=ExhaustionError("no countries available")),
        ):
            assert await run([]) == 1

        assert "ERROR [EXHAUSTION_ERROR]: no countries available" in capsys.readouterr().out

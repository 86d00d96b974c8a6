"""Fixtures for the CLI logging tests.

A test-only ``log-demo`` command emits one message per level on a GEODEX
logger and on a third-party logger, so verbosity flags, logger-level
overrides and the flight recorder can be observed from the outside.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from geodex.entrypoints.cli.main import geodex

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on 'geodex.demo' and 'some.thirdparty'."""
    logger = logging.getLogger("geodex.demo")
    logger.debug("geodex debug record.")
    logger.info("geodex info record.")
    logger.warning("geodex warning record.")
    logger.error("geodex error record.")
    logger.critical("geodex critical record.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("third-party debug record.")
    third_party_logger.info("third-party info record.")
    third_party_logger.warning("third-party warning record.")
    logger.debug("geodex closing debug record.")


def _remove_command(group: click.Group, name: str) -> None:
    """Drop ``name`` from the group and from click-extra's help sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register ``log-demo`` on the top-level group for one test."""
    geodex.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command(geodex, "log-demo")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield

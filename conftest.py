"""Workspace-level pytest configuration and fixtures.

This file provides shared fixtures and configuration for all tests.
"""

import pytest

from jumpmatch.mappings import MappingRegistry
from jumpmatch.types import HintDirection, JumpContext, JumpOptions, WindowContext


@pytest.fixture(autouse=True, scope="function")
def isolate_mapping_registry():
    """Automatically preserve and restore MappingRegistry state for each test.

    MappingRegistry keeps its tables in class-level state, so a test that
    registers or clears tables would otherwise leak into the tests after it.
    """
    saved_state = MappingRegistry.snapshot_state()

    yield

    MappingRegistry.restore_state(saved_state)


@pytest.fixture
def jump_context() -> JumpContext:
    """Jump context searching both sides of the cursor in an unscrolled window."""
    return JumpContext(direction=None, window_context=WindowContext(col_first=0))


@pytest.fixture
def before_cursor_context() -> JumpContext:
    """Jump context searching before the cursor in an unscrolled window."""
    return JumpContext(
        direction=HintDirection.BEFORE_CURSOR,
        window_context=WindowContext(col_first=0, col_last=79),
    )


@pytest.fixture
def options() -> JumpOptions:
    """Default jump options."""
    return JumpOptions()

"""Pytest fixtures for testing"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from bonai_rewards.api.main import create_app
from bonai_rewards.domain.animation import AnimationSequencer, AnimationTimings
from bonai_rewards.infrastructure.bill_store import BillCollection
from bonai_rewards.infrastructure.fixtures import seed_bill_collection
from bonai_rewards.infrastructure.schedulers import ManualScheduler
from bonai_rewards.presentation.screens.reward_screen import RewardScreen


@pytest.fixture
def scheduler() -> ManualScheduler:
    """Virtual clock starting at t=0"""
    return ManualScheduler()


@pytest.fixture
def sequencer(scheduler: ManualScheduler) -> Generator[AnimationSequencer, None, None]:
    """Sequencer with the stock timings, disposed after the test"""
    sequencer = AnimationSequencer(scheduler, AnimationTimings())
    yield sequencer
    sequencer.dispose()


@pytest.fixture
def bill_collection() -> BillCollection:
    """Collection seeded with the three sample bills"""
    return seed_bill_collection()


@pytest.fixture
def reward_screen(bill_collection: BillCollection, sequencer: AnimationSequencer) -> Generator[RewardScreen, None, None]:
    """Mounted reward screen, torn down after the test"""
    screen = RewardScreen(bill_collection, sequencer)
    screen.mount()
    yield screen
    screen.teardown()


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client over freshly seeded bills"""
    return TestClient(create_app(seed_bill_collection()))

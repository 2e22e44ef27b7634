import pytest

from engine.logic.ruleset import MinimalRuleset
from engine.tests.mocks import MockAIPlayer, MockScoring


@pytest.fixture
def scoring():
    return MockScoring(deltas=[30, -10, -10, -10])


@pytest.fixture
def ai_player():
    return MockAIPlayer()


@pytest.fixture
def ruleset(scoring, ai_player):
    return MinimalRuleset(scoring=scoring, ai=ai_player)

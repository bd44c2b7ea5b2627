import logging
import os
import sys
import time

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.dirname(__file__))


@pytest.fixture
def logger():
    return logging.getLogger('MeleeHunterTest')


@pytest.fixture(autouse=True)
def sleeps(monkeypatch):
    """Make every sleep instant and record the requested durations"""
    recorded = []
    monkeypatch.setattr(time, 'sleep', recorded.append)
    return recorded

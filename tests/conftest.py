"""
Pytest fixtures for policy simulator tests.
"""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from econsim.policies import MarketType, PolicyCategory, PolicyInput, PolicyType
from econsim.simulation import run


# =============================================================================
# POLICY FIXTURES
# =============================================================================

@pytest.fixture
def food_indirect_tax():
    """Indirect tax on food at the threshold rate, elasticities unknown."""
    return PolicyInput(
        market_type=MarketType.FOOD,
        policy_category=PolicyCategory.TAX_INDIRECT,
        policy_rate=15,
    )


@pytest.fixture
def make_input():
    """Factory for PolicyInput with fuel market and rate 20 by default."""
    def _make(category, rate=20, market=MarketType.FUEL, **kwargs):
        return PolicyInput(
            market_type=market,
            policy_category=category,
            policy_rate=rate,
            **kwargs,
        )
    return _make


# =============================================================================
# RESULT FIXTURES
# =============================================================================

@pytest.fixture
def tax_result():
    """Default tax form run."""
    return run(PolicyType.TAX, {"taxType": "indirect", "rate": 20, "market": "food", "Ed": 0.5, "Es": 0.8})


@pytest.fixture
def subsidy_result():
    """Consumer subsidy run."""
    return run(PolicyType.SUBSIDY, {"subsidyType": "consumer", "rate": 30, "market": "food", "Es": 1.2})


# =============================================================================
# STREAMLIT FAKES
# =============================================================================

class SessionState(dict):
    """dict with attribute access, like st.session_state."""

    def __getattr__(self, key):
        try:
            return self[key]
        except KeyError:
            raise AttributeError(key) from None

    def __setattr__(self, key, value):
        self[key] = value

    def __delattr__(self, key):
        del self[key]


class _Block:
    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


class FakeStreamlit:
    """
    Minimal stand-in for the streamlit module.

    Widgets return their defaults; buttons return True only for labels in
    ``pressed``. Every call is recorded in ``calls`` as ``(name, args, kwargs)``.
    """

    def __init__(self, pressed=(), chat_text=None):
        self.session_state = SessionState()
        self.sidebar = _Block()
        self.pressed = set(pressed)
        self.chat_text = chat_text
        self.calls = []

    def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))

    def called(self, name):
        return [call for call in self.calls if call[0] == name]

    def texts(self, name):
        return [str(call[1][0]) for call in self.called(name) if call[1]]

    def __getattr__(self, name):
        # markdown, caption, header, metric, plotly_chart, info, ... are recorded only
        def _recorder(*args, **kwargs):
            self._record(name, *args, **kwargs)
        return _recorder

    def columns(self, layout, **kwargs):
        self._record("columns", layout, **kwargs)
        count = layout if isinstance(layout, int) else len(layout)
        return [_Block() for _ in range(count)]

    def tabs(self, labels):
        self._record("tabs", labels)
        return [_Block() for _ in labels]

    def expander(self, *args, **kwargs):
        self._record("expander", *args, **kwargs)
        return _Block()

    def spinner(self, *args, **kwargs):
        self._record("spinner", *args, **kwargs)
        return _Block()

    def chat_message(self, role):
        self._record("chat_message", role)
        return _Block()

    def radio(self, label, options, **kwargs):
        self._record("radio", label, options, **kwargs)
        return options[kwargs.get("index", 0)]

    def selectbox(self, label, options, index=0, **kwargs):
        self._record("selectbox", label, options, index=index, **kwargs)
        return options[index]

    def slider(self, label, min_value=None, max_value=None, value=None, **kwargs):
        self._record("slider", label, min_value=min_value, max_value=max_value, value=value, **kwargs)
        return value

    def number_input(self, label, min_value=None, max_value=None, value=None, **kwargs):
        self._record("number_input", label, min_value=min_value, max_value=max_value, value=value, **kwargs)
        return value

    def button(self, label, **kwargs):
        self._record("button", label, **kwargs)
        return label in self.pressed

    def chat_input(self, *args, **kwargs):
        self._record("chat_input", *args, **kwargs)
        return self.chat_text

    def write_stream(self, stream):
        self._record("write_stream")
        return "".join(stream)

    def rerun(self):
        self._record("rerun")


@pytest.fixture
def fake_st():
    """Fresh fake Streamlit module."""
    return FakeStreamlit()


@pytest.fixture
def make_fake_st():
    """Factory for fake Streamlit modules with pressed buttons or chat input."""
    return FakeStreamlit


@pytest.fixture
def quick_result():
    """Bare object carrying only a policy category."""
    return SimpleNamespace(policy_category=PolicyCategory.TAX_TARIFF)

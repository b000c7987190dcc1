"""Hypothesis strategies for rule ids and configurations."""

from __future__ import annotations

import string

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from lintfuzz.configuration import Configuration

RULE_ID_CHARS = string.ascii_lowercase + string.digits + "-"


def rule_ids() -> st.SearchStrategy[str]:
    """Rule ids in the usual kebab-case shape."""
    return st.text(alphabet=RULE_ID_CHARS, min_size=1, max_size=20)


def rule_values() -> st.SearchStrategy[object]:
    """Serialized rule entries: bare severity or [severity, *options]."""
    severities = st.sampled_from([0, 1, 2, "off", "warn", "error", "OFF", "Error"])
    options = st.lists(
        st.one_of(st.integers(), st.text(max_size=5), st.fixed_dictionaries({"max": st.integers(0, 200)})),
        max_size=2,
    )
    return st.one_of(severities, st.builds(lambda s, o: [s, *o], severities, options))


@composite
def rule_configurations(draw: st.DrawFn, min_size: int = 0, max_size: int = 8) -> Configuration:
    """Configurations with unique rule ids.

    Events emitted:
    - config_size={n}: Number of rules
    """
    ids = draw(st.lists(rule_ids(), min_size=min_size, max_size=max_size, unique=True))
    event(f"config_size={len(ids)}")
    return Configuration({rule_id: draw(rule_values()) for rule_id in ids})

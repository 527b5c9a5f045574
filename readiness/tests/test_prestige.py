"""
Tests for the prestige resolver and the relative-advantage term.
"""

import pytest

from readiness.logic.constants import CNTier, QSTier
from readiness.logic.contracts import InstitutionSelection
from readiness.logic.prestige import (
    institution_prestige,
    prestige_from,
    relative_advantage,
    source_prestige,
)


def test_prestige_takes_max_not_blend():
    assert prestige_from(QSTier.TOP_10, CNTier.C9) == 10.0


def test_prestige_prefers_better_ranking():
    assert prestige_from(QSTier.RANK_800_PLUS, CNTier.C9) == 9.2
    assert prestige_from(QSTier.RANK_101_200, CNTier.PROJECT_211) == 8.0


def test_prestige_single_system():
    assert prestige_from(QSTier.RANK_51_100, None) == 8.5
    assert prestige_from(None, CNTier.BELOW_TIER_ONE) == 5.0


def test_prestige_none_selected():
    assert prestige_from(None, None) is None
    assert institution_prestige(InstitutionSelection()) is None


def test_institution_prestige_from_selection():
    selection = InstitutionSelection(qs_tier="qs_21_50", cn_tier="cn_985")
    assert institution_prestige(selection) == 9.0


def test_source_prestige_blend():
    assert source_prestige(9.0, 10.0) == pytest.approx(9.35)


def test_source_prestige_fallbacks():
    assert source_prestige(8.0, None) == 8.0
    assert source_prestige(None, 7.2) == 7.2
    assert source_prestige(None, None) is None


# =============================================================================
# RELATIVE ADVANTAGE
# =============================================================================

def test_relative_advantage_within_deadzone():
    assert relative_advantage(8.0, 8.2) == 0.0
    assert relative_advantage(0.3, 0.0) == 0.0


def test_relative_advantage_capped():
    assert relative_advantage(9.0, 7.0) == pytest.approx(1.2)
    assert relative_advantage(7.0, 9.0) == pytest.approx(-1.2)


def test_relative_advantage_shrinks_by_deadzone():
    assert relative_advantage(8.5, 8.0) == pytest.approx(0.2)
    assert relative_advantage(8.0, 9.0) == pytest.approx(-0.7)


def test_relative_advantage_missing_side_is_zero():
    assert relative_advantage(None, 8.0) == 0.0
    assert relative_advantage(9.0, None) == 0.0

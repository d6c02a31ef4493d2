# tests/test_brew_timer.py
# Purpose:
# Brew-along timer ticks against the 20 g / 320 g reference recipe
# (bloom 0:00, pours 0:45 1:15 1:45 2:15, drawdown 2:45).
import pytest

from pourover_backend.app.schemas import Recipe, StepType
from pourover_backend.app.services.brew_timer import current_step_index, timer_state, upcoming_steps

def test_start_of_brew(basic_recipe):
    st = timer_state(basic_recipe, 0)
    assert st.current_step_index == 0
    assert st.current_step.type == StepType.BLOOM
    assert st.next_step_time == "0:45"
    assert st.cumulative_target == 60
    assert st.water_poured == 0
    assert st.progress_percent == 0
    assert [s.target_time for s in st.upcoming_steps] == ["0:45", "1:15", "1:45", "2:15"]

@pytest.mark.parametrize("elapsed, poured, progress", [(5, 30, 50), (10, 60, 100), (30, 60, 100)])
def test_bloom_ramps_over_ten_seconds(basic_recipe, elapsed, poured, progress):
    st = timer_state(basic_recipe, elapsed)
    assert st.current_step_index == 0
    assert st.water_poured == poured
    assert st.water_for_current_step == poured
    assert st.progress_percent == progress

def test_mid_pour(basic_recipe):
    st = timer_state(basic_recipe, 50)
    assert st.current_step_index == 1
    assert st.cumulative_target == 125
    assert st.water_for_current_step == 33      # 65 × 5/10 = 32.5 rounds up
    assert st.water_poured == 93
    assert st.target_amount == 125
    assert st.progress_percent == 74
    assert st.next_step_time == "1:15"

def test_step_boundary_moves_to_next_step(basic_recipe):
    assert timer_state(basic_recipe, 44).current_step_index == 0
    assert timer_state(basic_recipe, 45).current_step_index == 1

def test_drawdown_targets_total_water(basic_recipe):
    st = timer_state(basic_recipe, 165)
    assert st.current_step_index == 5
    assert st.current_step.type == StepType.DRAWDOWN
    assert st.next_step_time == "3:45"
    assert st.water_poured == 320
    assert st.water_for_current_step == 0
    assert st.target_amount == 320
    assert st.progress_percent == 100
    assert st.upcoming_steps == []

def test_after_last_step_stays_on_last_step(basic_recipe):
    st = timer_state(basic_recipe, 600)
    assert st.current_step_index == 5
    assert st.water_poured == 320

def test_upcoming_is_capped_at_four(basic_recipe):
    assert len(upcoming_steps(basic_recipe.steps, -1)) == 4
    assert [s.target_time_in_seconds for s in upcoming_steps(basic_recipe.steps, 120)] == [135, 165]

def test_recipe_without_steps():
    empty = Recipe(id="empty", name="Empty", coffee_weight=20, water_weight=320, ratio=16)
    assert current_step_index([], 10) is None
    st = timer_state(empty, 10)
    assert st.current_step_index is None
    assert st.current_step is None
    assert st.water_poured == 0

def test_advanced_recipe_drawdown(advanced_recipe):
    # steps only deliver 270 g; drawdown progress is measured against the full 320 g
    st = timer_state(advanced_recipe, 140)
    assert st.current_step.type == StepType.DRAWDOWN
    assert st.water_poured == 270
    assert st.target_amount == 320
    assert st.progress_percent == 84

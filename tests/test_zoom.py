"""Tests for zoom transitions."""

import pytest

from trackline.service.zoom import make_zoom_state, zoom_in, zoom_out


class TestMakeZoomState:
    def test_clamps_factor(self):
        assert make_zoom_state(0.5, 1, 20)["factor"] == 1
        assert make_zoom_state(50, 1, 20)["factor"] == 20
        assert make_zoom_state(3, 1, 20) == {"factor": 3, "min": 1, "max": 20}

    def test_rejects_inverted_bounds(self):
        with pytest.raises(ValueError):
            make_zoom_state(1, 5, 2)


class TestZoomTransitions:
    def test_three_zoom_ins(self):
        state = make_zoom_state(1, 1, 20)
        for _ in range(3):
            state = zoom_in(state)
        assert state["factor"] == pytest.approx(1.728)
        assert state["min"] == 1
        assert state["max"] == 20

    def test_zoom_out_at_minimum_is_noop(self):
        state = make_zoom_state(1, 1, 20)
        assert zoom_out(state) == state

    def test_zoom_in_clamps_at_maximum(self):
        state = make_zoom_state(19, 1, 20)
        state = zoom_in(state)
        assert state["factor"] == 20
        assert zoom_in(state) == state

    def test_zoom_out_reverses_zoom_in(self):
        state = make_zoom_state(2, 1, 20)
        assert zoom_out(zoom_in(state))["factor"] == pytest.approx(2)

    def test_transitions_do_not_mutate(self):
        state = make_zoom_state(2, 1, 20)
        zoom_in(state)
        zoom_out(state)
        assert state["factor"] == 2

    def test_invariant_holds_for_long_sequences(self):
        state = make_zoom_state(1, 1, 20)
        for step in [zoom_in] * 30 + [zoom_out] * 40 + [zoom_in] * 5:
            state = step(state)
            assert state["min"] <= state["factor"] <= state["max"]

    def test_custom_step(self):
        assert zoom_in(make_zoom_state(1, 1, 20), step=2)["factor"] == 2

    @pytest.mark.parametrize("step", [1, 0.5, 0])
    def test_rejects_non_growing_step(self, step):
        with pytest.raises(ValueError):
            zoom_in(make_zoom_state(1, 1, 20), step=step)

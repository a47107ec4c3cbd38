from __future__ import annotations

import pytest

from event_thumbnail.projector import (
    EmptyPlaceholderView,
    ImageAbsentView,
    ImageView,
    LoadingView,
    is_trigger_enabled,
    project_preview,
    trigger_label,
)
from event_thumbnail.types import ControllerState, Failure, Loading, Success


@pytest.mark.parametrize(
    ("state", "expected"),
    [
        (ControllerState(), EmptyPlaceholderView()),
        (ControllerState(in_flight=True, result=Loading()), LoadingView()),
        (ControllerState(in_flight=False, result=Success("data:image/png;base64,Zm9v")), ImageView("data:image/png;base64,Zm9v")),
        (ControllerState(in_flight=False, result=Failure("quota exceeded")), ImageAbsentView("quota exceeded")),
    ],
)
def test_project_preview_selects_one_view(state: ControllerState, expected: object) -> None:
    assert project_preview(state) == expected


def test_in_flight_wins_over_stale_result() -> None:
    state = ControllerState(in_flight=True, result=Success("data:image/png;base64,Zm9v"))

    assert project_preview(state) == LoadingView()


def test_hand_built_loading_without_flight_still_shows_loading() -> None:
    assert project_preview(ControllerState(in_flight=False, result=Loading())) == LoadingView()


def test_trigger_enabled_only_when_idle_and_actionable() -> None:
    idle = ControllerState()
    busy = ControllerState(in_flight=True, result=Loading())

    assert is_trigger_enabled(idle, actionable=True) is True
    assert is_trigger_enabled(idle, actionable=False) is False
    assert is_trigger_enabled(busy, actionable=True) is False


def test_trigger_label_follows_flight_flag() -> None:
    assert trigger_label(ControllerState()) == "Generate Thumbnail"
    assert trigger_label(ControllerState(in_flight=True, result=Loading())) == "Generating..."


def test_settled_states() -> None:
    assert ControllerState(result=Failure("x")).is_settled is True
    assert ControllerState(result=Success("data:image/png;base64,")).is_settled is True
    assert ControllerState().is_settled is False
    assert ControllerState(in_flight=True, result=Loading()).is_settled is False

"""Tests for markup classification."""

import pytest

from navgraph.graph.schema import NodeType
from navgraph.parsers.markup.classifier import classify_markup


@pytest.mark.parametrize(
    "text, expected",
    [
        ('<Window x:Class="App.MainWindow"></Window>', NodeType.WINDOW),
        ('<Page x:Class="App.Views.Home"></Page>', NodeType.PAGE),
        ('<UserControl x:Class="App.Widget"></UserControl>', NodeType.USER_CONTROL),
        ('<ContentDialog Title="Confirm" />', NodeType.DIALOG),
        ("<ResourceDictionary />", NodeType.USER_CONTROL),
        ("", NodeType.USER_CONTROL),
    ],
)
def test_classify_markup_by_root_element(text, expected):
    assert classify_markup(text) == expected


def test_window_takes_precedence_over_dialog_marker():
    text = '<Window x:Class="App.SettingsDialog" Title="Dialog"></Window>'
    assert classify_markup(text) == NodeType.WINDOW


def test_page_takes_precedence_over_dialog_marker():
    text = '<Page x:Class="App.DialogHostPage"></Page>'
    assert classify_markup(text) == NodeType.PAGE


def test_dialog_marker_beats_user_control_tag():
    text = '<UserControl x:Class="App.ConfirmDialog"></UserControl>'
    assert classify_markup(text) == NodeType.DIALOG


def test_dialog_marker_in_comment_still_counts():
    # Substring heuristic: comments are not excluded.
    text = "<!-- opened from the Dialog service -->\n<Grid />"
    assert classify_markup(text) == NodeType.DIALOG


def test_malformed_markup_does_not_raise():
    assert classify_markup("<Window <<< unterminated") == NodeType.WINDOW
    assert classify_markup("<<<>>>") == NodeType.USER_CONTROL

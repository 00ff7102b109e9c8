"""Tests for code-behind navigation call extraction."""

from navgraph.graph.schema import EdgeKind
from navgraph.parsers.codebehind.extractor import (
    RawCall,
    extract_navigation_calls,
    iter_navigation_calls,
)


def test_extracts_show_call():
    calls = extract_navigation_calls("new LoginWindow().Show();")
    assert calls == [RawCall(target="LoginWindow", kind=EdgeKind.SHOW)]


def test_extracts_show_dialog_call():
    calls = extract_navigation_calls("new SettingsDialog().ShowDialog();")
    assert calls == [RawCall(target="SettingsDialog", kind=EdgeKind.SHOW_DIALOG)]


def test_extracts_navigate_by_uri():
    calls = extract_navigation_calls('NavigationService.Navigate(new Uri("Views/Page2.xaml"));')
    assert calls == [RawCall(target="Views/Page2.xaml", kind=EdgeKind.NAVIGATE)]


def test_navigate_accepts_single_quotes_and_extra_arguments():
    code = "NavigationService.Navigate( new Uri( 'Pages/Settings.xaml', UriKind.Relative ) );"
    calls = extract_navigation_calls(code)
    assert calls == [RawCall(target="Pages/Settings.xaml", kind=EdgeKind.NAVIGATE)]


def test_tolerates_whitespace_between_tokens():
    code = "new  AboutWindow ( ) \n    . ShowDialog ( );"
    assert extract_navigation_calls(code) == [
        RawCall(target="AboutWindow", kind=EdgeKind.SHOW_DIALOG)
    ]


def test_show_matches_come_before_navigate_matches():
    code = """
        NavigationService.Navigate(new Uri("Views/First.xaml"));
        new HelpWindow().Show();
        NavigationService.Navigate(new Uri("Views/Second.xaml"));
        new ExportDialog().ShowDialog();
    """
    calls = extract_navigation_calls(code)
    assert calls == [
        RawCall("HelpWindow", EdgeKind.SHOW),
        RawCall("ExportDialog", EdgeKind.SHOW_DIALOG),
        RawCall("Views/First.xaml", EdgeKind.NAVIGATE),
        RawCall("Views/Second.xaml", EdgeKind.NAVIGATE),
    ]


def test_ignores_constructors_with_arguments_and_other_methods():
    code = """
        new LoginWindow(user).Show();
        new LoginWindow().Close();
        var w = new LoginWindow(); w.Show();
        Frame.Navigate(typeof(HomePage));
        NavigationService.Navigate(page);
    """
    assert extract_navigation_calls(code) == []


def test_none_and_empty_text_yield_no_calls():
    assert extract_navigation_calls(None) == []
    assert extract_navigation_calls("") == []


def test_repeated_scans_are_independent():
    code = "new A().Show(); new B().Show();"
    first = extract_navigation_calls(code)
    second = extract_navigation_calls(code)
    assert first == second
    assert [c.target for c in iter_navigation_calls(code)] == ["A", "B"]
    # A partially consumed generator does not affect a new scan.
    partial = iter_navigation_calls(code)
    next(partial)
    assert [c.target for c in iter_navigation_calls(code)] == ["A", "B"]

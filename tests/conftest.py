"""Shared fixtures for navgraph tests."""

from __future__ import annotations

from pathlib import Path

import pytest

WINDOW_XAML = """<Window x:Class="Demo.{name}"
        xmlns="http://schemas.microsoft.com/winfx/2006/xaml/presentation">
    <Grid />
</Window>
"""

PAGE_XAML = """<Page x:Class="Demo.Views.{name}"
      xmlns="http://schemas.microsoft.com/winfx/2006/xaml/presentation">
    <StackPanel />
</Page>
"""

DIALOG_XAML = """<UserControl x:Class="Demo.{name}"
             xmlns="http://schemas.microsoft.com/winfx/2006/xaml/presentation">
    <Border />
</UserControl>
"""


def write_view(root: Path, rel_path: str, markup: str, code_behind: str | None = None) -> Path:
    """Write a markup file (and optionally its .xaml.cs companion)."""
    path = root / rel_path
    path.parent.mkdir(parents=True, exist_ok=True)
    name = path.name[: -len(".xaml")]
    path.write_text(markup.format(name=name), encoding="utf-8")
    if code_behind is not None:
        path.with_name(path.name + ".cs").write_text(code_behind, encoding="utf-8")
    return path


@pytest.fixture
def xaml_workspace(tmp_path: Path) -> Path:
    """A small WPF-style project.

    Enumeration order is AboutDialog, LoginWindow, MainWindow, Views/Page2.
    """
    root = tmp_path / "demoapp"
    write_view(root, "AboutDialog.xaml", DIALOG_XAML)
    write_view(root, "LoginWindow.xaml", WINDOW_XAML, code_behind="// nothing to see\n")
    write_view(
        root,
        "MainWindow.xaml",
        WINDOW_XAML,
        code_behind=(
            "public partial class MainWindow : Window\n"
            "{\n"
            "    void OnLogin() { new LoginWindow().Show(); }\n"
            "    void OnAbout() { new AboutDialog().ShowDialog(); }\n"
            "    void OnNext() { NavigationService.Navigate(new Uri(\"Views/Page2.xaml\", UriKind.Relative)); }\n"
            "    void OnMissing() { new MissingWindow().Show(); }\n"
            "}\n"
        ),
    )
    write_view(
        root,
        "Views/Page2.xaml",
        PAGE_XAML,
        code_behind="void Back() { new MainWindow().Show(); }\n",
    )
    return root


@pytest.fixture
def view_writer():
    """Expose ``write_view`` to tests that lay out their own workspace."""
    return write_view

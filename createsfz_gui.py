#!/usr/bin/env python3
"""createsfz - GUI Entry Point.

Usage: python createsfz_gui.py

Requires: flet>=0.80.0
"""

import flet as ft

from gui.app import CreateSFZApp


def main(page: ft.Page):
    """Main entry point for Flet application."""
    CreateSFZApp(page)


def run():
    """Entry point for the createsfz-gui console script."""
    ft.run(main)


if __name__ == "__main__":
    run()

"""UI module for the character sheet editor.

Streamlit-based interface over the rules engine. The UI only renders
derived views and forwards button presses to the ledgers; it holds no
rules of its own.

Submodules:
    app: Streamlit page script
    components: Render functions for each sheet section
    state: Session state management

Usage:
    Run the application with:
        streamlit run src/charsheet/ui/app.py

    Or:
        charsheet
"""

from __future__ import annotations


def run_app() -> None:
    """Launch the Streamlit application in a subprocess."""
    import subprocess
    import sys
    from pathlib import Path

    app_path = Path(__file__).parent / "app.py"
    subprocess.run([sys.executable, "-m", "streamlit", "run", str(app_path)], check=False)


__all__ = [
    "run_app",
]

"""Smoke test for the Streamlit UI."""

from pathlib import Path

import pytest

pytest.importorskip("streamlit")

from streamlit.testing.v1 import AppTest  # noqa: E402

APP_PATH = str(Path(__file__).resolve().parent.parent / "main.py")


def test_find_elements_lists_matches():
    app = AppTest.from_file(APP_PATH).run()
    app.text_area[0].input("Call 1234567890 #support").run()
    app.button[0].click().run()

    assert not app.exception
    assert app.success[0].value == "Found 2 elements."


def test_format_value_with_preset():
    app = AppTest.from_file(APP_PATH).run()
    app.selectbox[0].select("phone").run()
    app.text_input[0].input("1234567890").run()

    assert app.code[0].value == "(123) 456-7890"

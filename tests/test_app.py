"""
Tests for the Streamlit page.

Drives app.py with Streamlit's AppTest: cascading inputs, toast
notifications for rejected actions, saving and deleting assessments.
"""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from risk_assessment_dashboard.db import STORE_KEY

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


def _button(at, label):
    return next(b for b in at.button if b.label == label)


def _toasts(at):
    return [t.value for t in at.toast]


@pytest.fixture
def app():
    """App with a department and a risk already selected."""
    at = AppTest.from_file(APP_PATH, default_timeout=30).run()
    at.selectbox(key="department").select("Finans").run()
    at.selectbox(key="risk").select("Operasyonel Risk").run()
    return at


def _fill_ratings(at):
    at.number_input(key="probability").set_value(6.0)
    at.number_input(key="frequency").set_value(6.0)
    at.number_input(key="severity").set_value(10.0)
    return at.run()


class TestAssessmentPage:
    def test_inputs_hidden_until_department_and_risk(self):
        at = AppTest.from_file(APP_PATH, default_timeout=30).run()
        assert not at.exception
        assert len(at.number_input) == 0
        assert len(at.radio) == 0

        at.selectbox(key="department").select("Finans").run()
        assert len(at.number_input) == 0
        assert len(at.radio) == 0

        at.selectbox(key="risk").select("Operasyonel Risk").run()
        assert len(at.number_input) == 3
        assert len(at.radio) == 1

    def test_empty_export_shows_toast(self, app):
        _button(app, "Excel'e Aktar").click().run()

        assert not app.exception
        assert "Dışa aktarılacak değerlendirme bulunamadı" in _toasts(app)
        assert app.session_state[STORE_KEY] == []

    def test_missing_step_shows_toast(self, app):
        _fill_ratings(app)
        _button(app, "Hesapla ve Kaydet").click().run()

        assert not app.exception
        assert "Lütfen departman, risk ve değer zinciri adımı seçin" in _toasts(app)
        assert app.session_state[STORE_KEY] == []

    def test_missing_rating_shows_toast(self, app):
        app.radio(key="value_chain_step").set_value("Operasyonlar").run()
        _button(app, "Hesapla ve Kaydet").click().run()

        assert not app.exception
        assert "Lütfen tüm değerleri girin" in _toasts(app)
        assert app.session_state[STORE_KEY] == []

    def test_save_then_delete(self, app):
        app.radio(key="value_chain_step").set_value("Operasyonlar").run()
        _fill_ratings(app)
        _button(app, "Hesapla ve Kaydet").click().run()

        assert not app.exception
        assert len(app.session_state[STORE_KEY]) == 1
        assert "Risk değerlendirmesi kaydedildi" in _toasts(app)
        metrics = {m.label: (m.value, m.delta) for m in app.metric}
        assert metrics["Risk Skoru"] == ("360.00", "High")
        assert metrics["Finansal Etki"][0] == "10–20M"
        assert len(app.get("download_button")) == 1

        _button(app, "Sil").click().run()

        assert not app.exception
        assert len(app.session_state[STORE_KEY]) == 0

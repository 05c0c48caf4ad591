"""
Shared fixtures for the test suite.
"""
import pytest

from core.config import reset_settings

SETTINGS_ENV_VARS = ["APP_NAME", "HOST", "PORT", "LOG_LEVEL", "CALENDAR_ERA_PREFIX"]


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Give every test default settings and a fresh singleton."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def verbose_withdrawal_text():
    return """
        *بانک تجارت*
        حساب: 0177018376691
        برداشت: 640,000 ریال
        از طریق: پایانه فروش
        مانده: 204,285,600 ریال
        1404/02/02
        12:06
        Cigarettes #ciggaret
    """


@pytest.fixture
def verbose_deposit_text():
    return """
        *بانک تجارت*
        حساب: 0177018376691
        واریز حقوق: 148,792,250 ریال
        از طریق: شعبه
        کدشعبه: 2080
        مانده: 204,925,600 ریال
        1404/02/02
        11:58
        Hooghoogh #hooghoogh
    """


@pytest.fixture
def compact_withdrawal_text():
    return """
        حساب2328262050
        برداشت2,007,200
        مانده4,715,425
        04/02/08-20:17
        Ichil #ichil
    """


@pytest.fixture
def compact_deposit_text():
    return """
        حساب2328262050
        واریز20,000,000
        مانده20,483,825
        04/02/08-10:20
        CardCard #moneymanagement
    """

import pytest

from hotspotview.settings import Settings


@pytest.fixture
def settings():
    instance = Settings.instance()
    original = instance.prettify_symbols
    instance.set_prettify_symbols(True)
    yield instance
    instance.set_prettify_symbols(original)


def test_instance_is_shared(settings):
    Settings.instance().set_prettify_symbols(False)
    assert Settings.instance().prettify_symbols is False
    assert settings.prettify_symbols is False


def test_default_prettify_is_enabled():
    assert Settings().prettify_symbols is True


def test_set_prettify_changes_value(settings):
    settings.set_prettify_symbols(False)
    assert settings.prettify_symbols is False
    settings.set_prettify_symbols(True)
    assert settings.prettify_symbols is True


def test_listener_called_on_change(settings):
    received = []
    disconnect = settings.on_prettify_symbols_changed(received.append)
    try:
        settings.set_prettify_symbols(False)
        settings.set_prettify_symbols(True)
    finally:
        disconnect()
    assert received == [False, True]


def test_listener_not_called_without_change(settings):
    received = []
    disconnect = settings.on_prettify_symbols_changed(received.append)
    try:
        settings.set_prettify_symbols(True)
    finally:
        disconnect()
    assert received == []


def test_disconnect_stops_notifications(settings):
    received = []
    disconnect = settings.on_prettify_symbols_changed(received.append)
    disconnect()
    settings.set_prettify_symbols(False)
    assert received == []
    assert settings.prettify_symbols is False


def test_property_setter_notifies(settings):
    received = []
    disconnect = settings.on_prettify_symbols_changed(received.append)
    try:
        settings.prettify_symbols = False
    finally:
        disconnect()
    assert received == [False]
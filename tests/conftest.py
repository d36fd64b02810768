# Shared fixtures for color tests. Qt bridge tests construct QColor only, but
# force the offscreen platform in case a QGuiApplication gets created.

import os

import pytest

from cellcolor.design import Color

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def black() -> Color:
    return Color.from_channels(0, 0, 0)


@pytest.fixture
def white() -> Color:
    return Color.from_channels(255, 255, 255)

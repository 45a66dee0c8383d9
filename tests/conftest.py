import logging

import pytest

from fakes import FakeAssetDatabase


@pytest.fixture
def database():
    """Recording asset database with the default shader available."""
    return FakeAssetDatabase()


@pytest.fixture
def wood_textures():
    return [
        "Assets/Textures/Tex_Wood_Diffuse.png",
        "Assets/Textures/Tex_Wood_MAOS.png",
        "Assets/Textures/Tex_Wood_NormalGL.png",
    ]


@pytest.fixture
def materialize_logs(caplog):
    """Capture records from the package logger even when it stops propagating."""
    base_logger = logging.getLogger("materialize")
    previous = base_logger.propagate
    base_logger.propagate = True
    caplog.set_level(logging.DEBUG, logger="materialize")
    yield caplog
    base_logger.propagate = previous

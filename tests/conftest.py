"""Shared test fixtures."""
import pytest

from numberflow.config import Settings
from numberflow.models.edit import FormatOptions
from numberflow.models.separators import Separators
from numberflow.pipeline import EditPipeline


@pytest.fixture
def settings():
    """Settings with formatting on and defaults elsewhere."""
    return Settings(default_locale="en-US", format=True, auto_add_leading_zero=False, max_length=None)


@pytest.fixture
def pipeline(settings):
    return EditPipeline(settings)


@pytest.fixture
def us_separators():
    return Separators(decimal=".", group=",")


@pytest.fixture
def de_separators():
    return Separators(decimal=",", group=".")


@pytest.fixture
def us_options(us_separators):
    return FormatOptions(locale="en-US", format=True, separators=us_separators)


@pytest.fixture
def de_options(de_separators):
    return FormatOptions(locale="de-DE", format=True, separators=de_separators)

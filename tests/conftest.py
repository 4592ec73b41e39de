"""Shared pytest fixtures and configuration for all tests."""

import logging
import textwrap

import pytest

from mould.config import BuildConfig


STICKER_FORM = textwrap.dedent(
    """\
    form-title          = Merveilles Stickers
    form-desc           = Hey mervs, welcome to this form! Fill in the inputs below and then press submit!
    form-password       = hihi-stickertown
    input[Name]         = First and last name
    textarea[Address]   = your postal address
    number[Sticker sheet amount]#amount                 = min=1, max=5, value=1
    input[The rabbit boat but backwards]#access-token   = you know it.
    radio[Size]                                         = Small, Medium, Large
    """
)


@pytest.fixture(autouse=True)
def reset_mould_logger():
    """Undo the handler the CLI installs so caplog sees every record."""
    yield
    logger = logging.getLogger("mould")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def sticker_form():
    """The sample sticker-shop form definition."""
    return STICKER_FORM


@pytest.fixture
def build_config(tmp_path):
    """Build configuration writing into a temporary directory."""
    return BuildConfig(out=tmp_path)

"""Pytest fixtures shared across the graph engine tests."""

from __future__ import annotations

from typing import Any, Callable, Dict, Tuple

import pytest

from src.graph_engine.figure_assembler import FigureAssembler
from src.graph_engine.utils.axis_configurator import AxisConfigurator
from src.graph_engine.utils.color_manager import ColorManager
from src.shared_lib.utils.validations import ValidationError


@pytest.fixture
def assembler() -> FigureAssembler:
    """Return a fresh FigureAssembler with the default generators."""

    return FigureAssembler()


@pytest.fixture
def colors() -> ColorManager:
    """Return a ColorManager with the default fallback color."""

    return ColorManager()


@pytest.fixture
def axes() -> AxisConfigurator:
    """Return an AxisConfigurator with the default padding."""

    return AxisConfigurator()


@pytest.fixture
def render_error(assembler: FigureAssembler) -> Callable[[Any, Any], str]:
    """Return a helper that assembles a figure and returns the validation message."""

    def _render_error(data: Any, configuration: Any) -> str:
        with pytest.raises(ValidationError) as excinfo:
            assembler.assemble(data, configuration)
        return str(excinfo.value)

    return _render_error


@pytest.fixture
def legend_titles(assembler: FigureAssembler) -> Callable[..., Tuple[Dict, Dict]]:
    """
    Return a helper that assembles the same graph twice, without and with titles.

    ``set_titles(data, title)`` mutates ``data`` in place to carry ``title`` in
    every title field under test, and the same objects are assembled again.
    The helper returns both figures as dictionaries.
    """

    def _legend_titles(
        data: Any, configuration: Any, set_titles: Callable[[Any, str], None]
    ) -> Tuple[Dict, Dict]:
        untitled = assembler.assemble(data, configuration).to_dict()
        set_titles(data, "Title")
        titled = assembler.assemble(data, configuration).to_dict()
        return untitled, titled

    return _legend_titles

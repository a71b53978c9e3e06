"""
Chart Options Builder

Derives renderer options (title, legend, axis scales) from a column mapping.
"""
from __future__ import annotations

from querycharts.charts.constants import (
    CARTESIAN_LEGEND_POSITION,
    DEFAULT_CHART_TITLE,
    PROPORTIONAL_LEGEND_POSITION,
)
from querycharts.charts.types import (
    AxisScale,
    AxisTitle,
    ChartColumnMapping,
    ChartOptions,
    LegendOptions,
    PluginOptions,
    Scales,
    TitleOptions,
)


def _axis(title: str | None) -> AxisScale:
    return AxisScale(title=AxisTitle(text=title) if title else None)


def build_options(mapping: ChartColumnMapping, is_proportional: bool) -> ChartOptions:
    """
    Build rendering options for a chart.

    Pie/doughnut renderers reject axis configuration, so ``scales`` is left
    unset for them. Their legend sits on the right; cartesian legends sit on top.
    """
    scales = None
    if not is_proportional:
        axis_titles = mapping.axis_titles
        scales = Scales(
            x=_axis(axis_titles.x if axis_titles else None),
            y=_axis(axis_titles.y if axis_titles else None),
        )

    position = PROPORTIONAL_LEGEND_POSITION if is_proportional else CARTESIAN_LEGEND_POSITION

    return ChartOptions(
        responsive=True,
        maintain_aspect_ratio=False,
        title=TitleOptions(
            display=True,
            text=mapping.title if mapping.title is not None else DEFAULT_CHART_TITLE,
        ),
        scales=scales,
        plugins=PluginOptions(legend=LegendOptions(display=True, position=position)),
    )
